"""
Transaction Outcome Module

Structured result of a successful account operation. Accounts return these
instead of printing, leaving presentation to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class TransactionType(Enum):
    """Types of account operations"""
    DEPOSIT = "deposit"                    # Cash deposit
    WITHDRAWAL = "withdrawal"              # Cash withdrawal
    INTEREST_CREDIT = "interest_credit"    # Interest earned


@dataclass(frozen=True)
class TransactionOutcome:
    """
    What a successful operation did to an account

    ``amount`` is the requested amount for deposits and withdrawals and the
    interest increment for interest credits. ``fee`` is the fee charged by
    the account's fee strategy for this single operation.
    """
    transaction_type: TransactionType
    account_number: str
    amount: float
    fee: float
    balance_before: float
    balance_after: float

    @property
    def net_change(self) -> float:
        """Signed change in balance"""
        return self.balance_after - self.balance_before

    @property
    def is_credit(self) -> bool:
        """Check if the operation added money to the account"""
        return self.transaction_type in [TransactionType.DEPOSIT, TransactionType.INTEREST_CREDIT]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and events"""
        return {
            'transaction_type': self.transaction_type.value,
            'account_number': self.account_number,
            'amount': self.amount,
            'fee': self.fee,
            'balance_before': self.balance_before,
            'balance_after': self.balance_after
        }
