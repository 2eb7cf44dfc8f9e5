"""Tests for the conditional and the strategy-based order processing."""

import pytest

from oop_lessons.clean_code import orders
from oop_lessons.clean_code.orders import Card, Cash, DirtyOrder, Order, PaymentMethod, Pix


class TestDirtyOrder:
    """Test the conditional dispatch on integer codes."""

    @pytest.mark.parametrize(
        "payment_type,expected",
        [
            (1, "Cash payment of 200.00"),
            (2, "Card payment of 200.00"),
            (3, "Invalid payment type"),
            (0, "Invalid payment type"),
        ],
    )
    def test_dispatch(self, payment_type, expected, capsys):
        message = DirtyOrder().process_order(payment_type, 200)

        assert message == expected
        assert capsys.readouterr().out == expected + "\n"

    def test_invalid_type_is_logged(self, captured_logs):
        DirtyOrder().process_order(9, 10)

        assert captured_logs[0]["event"] == "invalid_payment_type"
        assert captured_logs[0]["payment_type"] == 9


class TestPaymentStrategies:
    """Test that Order works with any PaymentMethod."""

    @pytest.mark.parametrize(
        "method,expected",
        [
            (Cash(), "Cash payment of 200.00"),
            (Card(), "Card payment of 200.00"),
            (Pix(), "Pix payment of 200.00"),
        ],
    )
    def test_each_method(self, method, expected, capsys):
        assert Order().process_order(method, 200) == expected
        assert capsys.readouterr().out == expected + "\n"

    def test_amount_is_rounded_to_cents(self):
        assert Order().process_order(Pix(), "19.999") == "Pix payment of 20.00"

    def test_new_method_needs_no_order_change(self):
        """Test that a new strategy plugs in without touching Order."""

        class Voucher(PaymentMethod):
            name = "voucher"

            def pay(self, amount):
                return f"Voucher payment of {amount}"

        assert Order().process_order(Voucher(), 5) == "Voucher payment of 5.00"

    def test_payment_method_is_abstract(self):
        with pytest.raises(TypeError):
            PaymentMethod()

    def test_payment_is_logged(self, captured_logs):
        Order().process_order(Card(), 50)

        assert captured_logs == [
            {"event": "payment_processed", "log_level": "info", "method": "card", "amount": "50.00"}
        ]

    def test_main(self, capsys):
        orders.main()

        assert capsys.readouterr().out == "Cash payment of 200.00\n"
