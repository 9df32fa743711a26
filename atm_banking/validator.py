"""
Validation Module

Pure predicates on proposed amounts and balances, shared by all account types.
"""

import math


def is_valid_amount(amount: float) -> bool:
    """Check that an amount is finite and strictly positive"""
    return math.isfinite(amount) and amount > 0


def has_enough_balance(balance: float, amount: float, floor: float = 0.0) -> bool:
    """
    Check that ``amount`` can be taken out of ``balance``.

    Args:
        balance: Current balance
        amount: Total amount to debit (including any fee)
        floor: Extra headroom below zero. Positive for an overdraft
            allowance, negative to reserve a minimum balance.

    Returns:
        True if ``amount <= balance + floor``
    """
    return amount <= balance + floor
