"""
Banking Exceptions Module

Error kinds raised by account operations. Every error subclasses
``BankingError``, which is itself a ``ValueError`` so callers that already
guard account calls with ``except ValueError`` keep working.
"""


class BankingError(ValueError):
    """Base class for all account operation failures"""


class InvalidAmountError(BankingError):
    """Non-positive amount supplied to deposit or withdraw"""


class InsufficientFundsError(BankingError):
    """Withdrawal would take the balance below the account's floor"""


class OverdraftExceededError(InsufficientFundsError):
    """Withdrawal would take a current account past its overdraft limit"""


class MinimumBalanceViolationError(InsufficientFundsError):
    """Withdrawal would take a savings account below its minimum balance"""


class FeeExceedsAmountError(BankingError):
    """Fee charged on a deposit is larger than the deposited amount"""


class AccountClosedError(BankingError):
    """Operation attempted on an account that has already been closed"""
