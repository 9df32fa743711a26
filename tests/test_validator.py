"""
Test suite for validator module

Tests the amount and balance predicates shared by all account types.
"""

import pytest

from atm_banking.validator import is_valid_amount, has_enough_balance


class TestIsValidAmount:
    """Test amount admissibility"""

    @pytest.mark.parametrize("amount", [0.01, 1, 100.0, 1e9])
    def test_positive_amounts_are_valid(self, amount):
        """Test that strictly positive amounts are accepted"""
        assert is_valid_amount(amount)

    @pytest.mark.parametrize("amount", [0, 0.0, -0.01, -100])
    def test_non_positive_amounts_are_invalid(self, amount):
        """Test that zero and negative amounts are rejected"""
        assert not is_valid_amount(amount)

    def test_nan_is_invalid(self):
        """Test that NaN is not a valid amount"""
        assert not is_valid_amount(float("nan"))

    @pytest.mark.parametrize("amount", [float("inf"), float("-inf")])
    def test_infinite_amounts_are_invalid(self, amount):
        """Test that infinities are not valid amounts"""
        assert not is_valid_amount(amount)


class TestHasEnoughBalance:
    """Test balance sufficiency"""

    def test_amount_within_balance(self):
        """Test withdrawal smaller than balance"""
        assert has_enough_balance(500.0, 100.0)

    def test_amount_equal_to_balance(self):
        """Test that the whole balance can be taken"""
        assert has_enough_balance(500.0, 500.0)

    def test_amount_above_balance(self):
        """Test that exceeding the balance is rejected"""
        assert not has_enough_balance(500.0, 500.01)

    def test_positive_floor_allows_overdraft(self):
        """Test an overdraft allowance extends the available amount"""
        assert has_enough_balance(500.0, 700.0, floor=200.0)
        assert not has_enough_balance(500.0, 700.01, floor=200.0)

    def test_negative_floor_reserves_minimum(self):
        """Test a minimum balance reduces the available amount"""
        assert has_enough_balance(1000.0, 900.0, floor=-100.0)
        assert not has_enough_balance(1000.0, 950.0, floor=-100.0)

    def test_negative_balance(self):
        """Test sufficiency on an already overdrawn balance"""
        assert has_enough_balance(-100.0, 100.0, floor=200.0)
        assert not has_enough_balance(-100.0, 200.0, floor=200.0)
