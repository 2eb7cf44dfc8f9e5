"""Tests for the encapsulated bank account."""

from decimal import Decimal

import pytest

from oop_lessons.encapsulation import bank_account
from oop_lessons.encapsulation.bank_account import BankAccount
from oop_lessons.exceptions import InvalidAmountError


class TestBankAccount:
    """Test that the balance only changes through deposit()."""

    def test_new_account_is_empty(self):
        assert BankAccount().balance == Decimal("0")

    def test_deposits_accumulate(self):
        account = BankAccount()
        account.deposit(100)
        account.deposit("0.10")
        account.deposit(0.2)

        assert account.balance == Decimal("100.30")

    @pytest.mark.parametrize("amount", [0, -1, "-0.01"])
    def test_non_positive_deposit_rejected(self, amount):
        account = BankAccount()
        account.deposit(50)

        with pytest.raises(InvalidAmountError):
            account.deposit(amount)

        assert account.balance == Decimal("50.00")

    @pytest.mark.parametrize("amount", ["abc", float("inf")])
    def test_non_numeric_deposit_rejected(self, amount):
        account = BankAccount()

        with pytest.raises(InvalidAmountError):
            account.deposit(amount)

        assert account.balance == Decimal("0.00")

    def test_balance_has_no_setter(self):
        account = BankAccount()

        with pytest.raises(AttributeError):
            account.balance = Decimal("1000000")

    def test_deposit_is_logged(self, captured_logs):
        BankAccount().deposit(10)

        assert captured_logs[0]["event"] == "deposit_completed"
        assert captured_logs[0]["balance"] == "10.00"

    def test_main(self, capsys):
        bank_account.main()

        assert capsys.readouterr().out == "Balance: 150.00\n"
