"""Tests for the basics examples: customer rendering, Fibonacci, option menu."""

import pytest
from pydantic import ValidationError

from oop_lessons.basics import application, customer, fibonacci
from oop_lessons.basics.customer import Customer
from oop_lessons.basics.fibonacci import fibonacci as fib, fibonacci_sequence


class TestCustomer:
    """Test the customer value object."""

    def test_string_rendering(self):
        """Test that all three fields appear in the rendering."""
        c = Customer(1, "Andre", "andreleaos@gmail.com")

        assert str(c) == "id: 1, Name: Andre, Email: andreleaos@gmail.com"

    def test_keyword_construction(self):
        """Test that keyword arguments work like positional ones."""
        assert Customer(id=2, name="Ana", email="ana@example.com") == Customer(2, "Ana", "ana@example.com")

    def test_empty_customer(self):
        """Test that a customer can be built without any field."""
        c = Customer()

        assert c.id is None
        assert str(c) == "id: None, Name: None, Email: None"

    def test_customer_is_immutable(self):
        """Test that fields cannot be reassigned after construction."""
        c = Customer(1, "Andre", "andreleaos@gmail.com")

        with pytest.raises(ValidationError):
            c.name = "Someone else"

    def test_main_prints_customer(self, capsys):
        customer.main()

        assert capsys.readouterr().out == "id: 1, Name: Andre, Email: andreleaos@gmail.com\n"


class TestFibonacci:
    """Test the Fibonacci helper."""

    @pytest.mark.parametrize("n,expected", [(0, 0), (1, 1), (2, 1), (3, 2), (10, 55), (30, 832040)])
    def test_known_values(self, n, expected):
        assert fib(n) == expected

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            fib(-1)

    def test_sequence(self):
        assert fibonacci_sequence(10) == [1, 1, 2, 3, 5, 8, 13, 21, 34, 55]

    def test_main_prints_ten_values(self, capsys):
        fibonacci.main()

        lines = capsys.readouterr().out.splitlines()
        assert lines == ["1", "1", "2", "3", "5", "8", "13", "21", "34", "55"]


class TestApplicationMenu:
    """Test the option menu."""

    def test_default_option_runs_vehicle(self, capsys):
        application.main()

        assert capsys.readouterr().out.splitlines() == ["Fox is accelerating!", "Fox is braking!"]

    def test_option_one_runs_customer(self, capsys):
        application.run_option(1)

        assert "Name: Andre" in capsys.readouterr().out

    def test_unknown_option_rejected(self):
        with pytest.raises(ValueError, match="Unknown option 9"):
            application.run_option(9)
