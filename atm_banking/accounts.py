"""
Account Management Module

Account hierarchy with fee and interest strategies. Savings accounts earn
interest and keep an optional minimum balance; current (checking) accounts
may go overdrawn down to their overdraft limit. Every operation either
succeeds and returns a TransactionOutcome, or raises and leaves the balance
untouched.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum
from threading import Lock
from typing import Optional

from .exceptions import (
    AccountClosedError, FeeExceedsAmountError, InsufficientFundsError,
    InvalidAmountError, MinimumBalanceViolationError, OverdraftExceededError
)
from .fees import FeeStrategy, NoFee
from .interest import InterestStrategy, SimpleInterest
from .logging_config import get_logger, log_action
from .transactions import TransactionOutcome, TransactionType
from .validator import has_enough_balance, is_valid_amount


logger = get_logger("atm_banking.accounts")


class ProductType(Enum):
    """Banking product types"""
    SAVINGS = "savings"    # Interest-bearing, never below minimum balance
    CURRENT = "current"    # Transactional, may use an overdraft

    @property
    def label(self) -> str:
        """Human readable name"""
        return self.value.capitalize()


class AccountCounter:
    """
    Number of live accounts

    Accounts register on creation (or when adopted by a BankingSystem) and
    release on close. Each account is counted at most once.
    """

    def __init__(self):
        self._count = 0
        self._lock = Lock()

    @property
    def value(self) -> int:
        return self._count

    def increment(self) -> int:
        with self._lock:
            self._count += 1
            return self._count

    def decrement(self) -> int:
        with self._lock:
            if self._count == 0:
                raise ValueError("Account counter cannot go below zero")
            self._count -= 1
            return self._count

    def __int__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return f"AccountCounter({self._count})"


class InterestBearing(ABC):
    """Capability of accounts that earn interest"""

    @abstractmethod
    def apply_interest(self) -> TransactionOutcome:
        """Credit one period of interest to the account"""


class Account(ABC):
    """
    Bank account owning its balance and fee strategy

    Subclasses define the balance floor and the error raised when a
    withdrawal would break it.
    """

    account_type: ProductType

    def __init__(
        self,
        account_number: str,
        balance: float = 0.0,
        fee_strategy: Optional[FeeStrategy] = None,
        counter: Optional[AccountCounter] = None
    ):
        if not account_number:
            raise ValueError("Account number is required")

        self._account_number = account_number
        self._balance = float(balance)
        self._fee_strategy = fee_strategy if fee_strategy is not None else NoFee()
        self._counter: Optional[AccountCounter] = None
        self._closed = False

        if not math.isfinite(self._balance):
            raise ValueError(f"Initial balance must be finite, got {self._balance}")
        if self._balance < self.floor:
            raise ValueError(
                f"Initial balance {self._balance} is below the account floor {self.floor}"
            )

        if counter is not None:
            self.attach_counter(counter)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> float:
        return self._balance

    @property
    def fee_strategy(self) -> FeeStrategy:
        return self._fee_strategy

    @property
    def counter(self) -> Optional[AccountCounter]:
        return self._counter

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    @abstractmethod
    def floor(self) -> float:
        """Lowest balance a withdrawal may leave behind"""

    @property
    def available_balance(self) -> float:
        """Amount (fees included) that can still be withdrawn"""
        return self._balance - self.floor

    def get_balance(self) -> float:
        """Get current balance"""
        return self._balance

    def get_account_type(self) -> ProductType:
        """Get the account's product type"""
        return self.account_type

    def deposit(self, amount: float) -> TransactionOutcome:
        """
        Deposit money, net of the fee

        Args:
            amount: Amount handed in, must be positive and finite

        Returns:
            TransactionOutcome of the deposit

        Raises:
            InvalidAmountError: amount is not positive and finite
            FeeExceedsAmountError: fee is larger than the amount
            AccountClosedError: account has been closed
        """
        self._ensure_open()
        if not is_valid_amount(amount):
            raise InvalidAmountError(f"Deposit amount must be positive and finite, got {amount}")

        fee = self._fee_strategy.calculate_fee(amount)
        if fee > amount:
            raise FeeExceedsAmountError(
                f"Fee {fee} exceeds deposit amount {amount}"
            )

        return self._post(TransactionType.DEPOSIT, amount, fee, amount - fee)

    def withdraw(self, amount: float) -> TransactionOutcome:
        """
        Withdraw money; the fee is debited on top of the amount

        Args:
            amount: Amount to pay out, must be positive and finite

        Returns:
            TransactionOutcome of the withdrawal

        Raises:
            InvalidAmountError: amount is not positive and finite
            InsufficientFundsError: amount plus fee would break the floor
            AccountClosedError: account has been closed
        """
        self._ensure_open()
        if not is_valid_amount(amount):
            raise InvalidAmountError(f"Withdrawal amount must be positive and finite, got {amount}")

        fee = self._fee_strategy.calculate_fee(amount)
        total = amount + fee
        if not has_enough_balance(self._balance, total, -self.floor):
            raise self._insufficient_funds_error(amount, fee)

        return self._post(TransactionType.WITHDRAWAL, amount, fee, -total)

    def attach_counter(self, counter: AccountCounter) -> None:
        """Register this account with a live-account counter"""
        self._ensure_open()
        if self._counter is counter:
            return
        if self._counter is not None:
            raise ValueError(f"Account {self._account_number} is already tracked by another counter")

        counter.increment()
        self._counter = counter

    def close(self) -> None:
        """Release the account; further operations are rejected"""
        if self._closed:
            return

        self._closed = True
        if self._counter is not None:
            self._counter.decrement()

        logger.debug(f"Closed account {self._account_number}")

    def __enter__(self) -> 'Account':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _insufficient_funds_error(self, amount: float, fee: float) -> InsufficientFundsError:
        return InsufficientFundsError(
            f"Insufficient balance for withdrawal of {amount} (fee {fee})"
        )

    def _ensure_open(self) -> None:
        if self._closed:
            raise AccountClosedError(f"Account {self._account_number} is closed")

    def _post(self, transaction_type: TransactionType, amount: float, fee: float,
              delta: float) -> TransactionOutcome:
        """Apply a validated balance change"""
        balance_before = self._balance
        self._balance = balance_before + delta

        outcome = TransactionOutcome(
            transaction_type=transaction_type,
            account_number=self._account_number,
            amount=amount,
            fee=fee,
            balance_before=balance_before,
            balance_after=self._balance
        )

        log_action(
            logger, "debug",
            f"{transaction_type.value} of {amount} posted to {self._account_number}",
            action=transaction_type.value,
            resource=self._account_number,
            data=outcome.to_dict()
        )

        return outcome

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(account_number={self._account_number!r}, "
                f"balance={self._balance!r})")


class SavingsAccount(Account, InterestBearing):
    """Interest-bearing account that never drops below its minimum balance"""

    account_type = ProductType.SAVINGS

    def __init__(
        self,
        account_number: str,
        balance: float = 0.0,
        interest_rate: float = 0.0,
        fee_strategy: Optional[FeeStrategy] = None,
        interest_strategy: Optional[InterestStrategy] = None,
        minimum_balance: float = 0.0,
        counter: Optional[AccountCounter] = None
    ):
        if interest_rate < 0:
            raise ValueError("Interest rate must be non-negative")
        if minimum_balance < 0:
            raise ValueError("Minimum balance must be non-negative")

        self._interest_rate = float(interest_rate)
        self._interest_strategy = interest_strategy if interest_strategy is not None else SimpleInterest()
        self._minimum_balance = float(minimum_balance)

        super().__init__(account_number, balance, fee_strategy, counter)

    @property
    def interest_rate(self) -> float:
        return self._interest_rate

    @property
    def interest_strategy(self) -> InterestStrategy:
        return self._interest_strategy

    @property
    def minimum_balance(self) -> float:
        return self._minimum_balance

    @property
    def floor(self) -> float:
        return self._minimum_balance

    def update_interest_rate(self, new_rate: float) -> None:
        """Change the rate used by future interest applications"""
        if new_rate < 0:
            raise ValueError("Interest rate must be non-negative")
        self._interest_rate = float(new_rate)

    def apply_interest(self) -> TransactionOutcome:
        """
        Credit one period of interest computed by the interest strategy.
        Each call compounds on the balance left by the previous one.
        """
        self._ensure_open()
        interest = self._interest_strategy.calculate_interest(self._balance, self._interest_rate)
        return self._post(TransactionType.INTEREST_CREDIT, interest, 0.0, interest)

    def _insufficient_funds_error(self, amount: float, fee: float) -> InsufficientFundsError:
        return MinimumBalanceViolationError(
            f"Withdrawal of {amount} (fee {fee}) would leave balance "
            f"{self._balance - amount - fee} below minimum balance {self._minimum_balance}"
        )


class CurrentAccount(Account):
    """Transactional account that may be overdrawn down to its overdraft limit"""

    account_type = ProductType.CURRENT

    def __init__(
        self,
        account_number: str,
        balance: float = 0.0,
        overdraft_limit: float = 0.0,
        fee_strategy: Optional[FeeStrategy] = None,
        counter: Optional[AccountCounter] = None
    ):
        if overdraft_limit < 0:
            raise ValueError("Overdraft limit must be non-negative")

        self._overdraft_limit = float(overdraft_limit)

        super().__init__(account_number, balance, fee_strategy, counter)

    @property
    def overdraft_limit(self) -> float:
        return self._overdraft_limit

    @property
    def floor(self) -> float:
        return -self._overdraft_limit

    @property
    def is_overdrawn(self) -> bool:
        return self._balance < 0

    def _insufficient_funds_error(self, amount: float, fee: float) -> InsufficientFundsError:
        return OverdraftExceededError(
            f"Withdrawal of {amount} (fee {fee}) exceeds overdraft limit "
            f"{self._overdraft_limit} on balance {self._balance}"
        )


# Checking is the North American name for the same product
CheckingAccount = CurrentAccount
