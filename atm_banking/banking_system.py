"""
Banking System Module

Registry that owns accounts, keeps them in insertion order for reporting and
looks them up by account number. Owned accounts are counted in the system's
live-account counter until they are removed or the system is closed.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

from .accounts import (
    Account, AccountCounter, CurrentAccount, InterestBearing, ProductType, SavingsAccount
)
from .config import get_config
from .events import DomainEvent, EventDispatcher, create_account_event, create_transaction_event
from .fees import FeeStrategy
from .interest import CompoundInterest, InterestStrategy, InterestType
from .logging_config import get_logger, log_action
from .transactions import TransactionOutcome


@dataclass(frozen=True)
class ReportLine:
    """One account in a BankingSystem report"""
    account_number: str
    account_type: ProductType
    balance: float


class BankingSystem:
    """
    Owns a collection of accounts

    Duplicate account numbers are accepted; lookups return the first match.
    """

    def __init__(
        self,
        counter: Optional[AccountCounter] = None,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        self._accounts: List[Account] = []
        self._counter = counter if counter is not None else AccountCounter()
        self._event_dispatcher = event_dispatcher if get_config().enable_events else None
        self.logger = get_logger("atm_banking.banking_system")

    @property
    def counter(self) -> AccountCounter:
        return self._counter

    @property
    def live_accounts(self) -> int:
        """Number of accounts created but not yet closed under this system's counter"""
        return self._counter.value

    def add_account(self, account: Account) -> Account:
        """
        Take ownership of an account

        Args:
            account: Open account to add

        Returns:
            The added account

        Raises:
            AccountClosedError: account has been closed
            ValueError: this account instance is already owned by the system
        """
        if any(owned is account for owned in self._accounts):
            raise ValueError(f"Account {account.account_number} is already in this banking system")
        account.attach_counter(self._counter)
        self._accounts.append(account)

        log_action(
            self.logger, "info",
            f"Added {account.account_type.label} account {account.account_number}",
            action="add_account",
            resource=account.account_number,
            data={"balance": account.balance}
        )
        self._publish_account_event(DomainEvent.ACCOUNT_OPENED, account)

        return account

    def open_savings_account(
        self,
        account_number: str,
        balance: float = 0.0,
        interest_rate: Optional[float] = None,
        fee_strategy: Optional[FeeStrategy] = None,
        interest_strategy: Optional[InterestStrategy] = None,
        minimum_balance: Optional[float] = None,
        interest_type: Optional[InterestType] = None
    ) -> SavingsAccount:
        """Create and add a savings account, filling gaps from configuration"""
        config = get_config()

        if interest_strategy is None and interest_type == InterestType.COMPOUND:
            interest_strategy = CompoundInterest(compound_frequency=config.default_compound_frequency)

        account = SavingsAccount(
            account_number,
            balance,
            interest_rate=config.default_interest_rate if interest_rate is None else interest_rate,
            fee_strategy=fee_strategy,
            interest_strategy=interest_strategy,
            minimum_balance=config.default_minimum_balance if minimum_balance is None else minimum_balance
        )
        self.add_account(account)
        return account

    def open_current_account(
        self,
        account_number: str,
        balance: float = 0.0,
        overdraft_limit: Optional[float] = None,
        fee_strategy: Optional[FeeStrategy] = None
    ) -> CurrentAccount:
        """Create and add a current account, filling gaps from configuration"""
        config = get_config()

        account = CurrentAccount(
            account_number,
            balance,
            overdraft_limit=config.default_overdraft_limit if overdraft_limit is None else overdraft_limit,
            fee_strategy=fee_strategy
        )
        self.add_account(account)
        return account

    def find_account(self, account_number: str) -> Optional[Account]:
        """Get the first account with this exact number, or None"""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def remove_account(self, account_number: str) -> Optional[Account]:
        """
        Remove and close the first account with this number

        Returns:
            The closed account, or None if no account matched
        """
        for index, account in enumerate(self._accounts):
            if account.account_number == account_number:
                del self._accounts[index]
                account.close()

                log_action(
                    self.logger, "info",
                    f"Removed account {account_number}",
                    action="remove_account",
                    resource=account_number
                )
                self._publish_account_event(DomainEvent.ACCOUNT_CLOSED, account)
                return account

        self.logger.debug(f"Account {account_number} not found for removal")
        return None

    def generate_report(self) -> List[ReportLine]:
        """Report every account in insertion order"""
        return [
            ReportLine(
                account_number=account.account_number,
                account_type=account.get_account_type(),
                balance=account.get_balance()
            )
            for account in self._accounts
        ]

    def apply_interest_to_all(self) -> List[TransactionOutcome]:
        """Apply one period of interest to every interest-bearing account"""
        outcomes = []
        for account in self._accounts:
            if isinstance(account, InterestBearing):
                outcome = account.apply_interest()
                outcomes.append(outcome)
                if self._event_dispatcher:
                    self._event_dispatcher.publish(create_transaction_event(outcome))

        self.logger.info(f"Applied interest to {len(outcomes)} accounts")
        return outcomes

    def total_balance(self) -> float:
        """Sum of all account balances"""
        return sum(account.get_balance() for account in self._accounts)

    def close(self) -> None:
        """Close every owned account"""
        while self._accounts:
            account = self._accounts.pop()
            account.close()
            self._publish_account_event(DomainEvent.ACCOUNT_CLOSED, account)
        self.logger.debug("Banking system closed")

    def __enter__(self) -> 'BankingSystem':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def _publish_account_event(self, event_type: DomainEvent, account: Account) -> None:
        if self._event_dispatcher:
            self._event_dispatcher.publish(create_account_event(event_type, account))
