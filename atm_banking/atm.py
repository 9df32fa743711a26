"""
ATM Module

Thin facade over a single account. The ATM borrows the account, forwards
deposits and withdrawals, and recovers locally from operation failures by
reporting them instead of raising.
"""

from typing import Callable, Optional

from .accounts import Account, InterestBearing
from .config import get_config
from .console import ConsoleReporter
from .events import EventDispatcher, create_failure_event, create_transaction_event
from .exceptions import BankingError
from .logging_config import get_logger, log_action
from .transactions import TransactionOutcome


class ATM:
    """
    Non-owning handle on one account

    Methods that move money return the ATM itself so calls can be chained:
    ``atm.add_amount(200).withdraw_amount(100)``. The result of the most
    recent call is kept in ``last_outcome`` or ``last_error``.
    """

    def __init__(
        self,
        account: Account,
        reporter: Optional[ConsoleReporter] = None,
        event_dispatcher: Optional[EventDispatcher] = None
    ):
        config = get_config()

        self._account = account
        if reporter is None and config.console_output:
            reporter = ConsoleReporter()
        self._reporter = reporter
        self._event_dispatcher = event_dispatcher if config.enable_events else None
        self.logger = get_logger("atm_banking.atm")

        self.last_outcome: Optional[TransactionOutcome] = None
        self.last_error: Optional[BankingError] = None

    @property
    def account(self) -> Account:
        return self._account

    def add_amount(self, amount: float) -> 'ATM':
        """Deposit into the bound account"""
        self._run("deposit", amount, self._account.deposit)
        return self

    def withdraw_amount(self, amount: float) -> 'ATM':
        """Withdraw from the bound account"""
        self._run("withdraw", amount, self._account.withdraw)
        return self

    def check_balance(self) -> float:
        """Get the bound account's balance"""
        return self._account.get_balance()

    def apply_specific_behavior(self) -> 'ATM':
        """Apply interest if the bound account earns any; otherwise do nothing"""
        if isinstance(self._account, InterestBearing):
            self._run("apply_interest", None, lambda _: self._account.apply_interest())
        else:
            self.logger.debug(
                f"No specific behavior for {self._account.account_type.label} account "
                f"{self._account.account_number}"
            )
        return self

    def _run(self, operation: str, amount: Optional[float],
             action: Callable[[Optional[float]], TransactionOutcome]) -> None:
        self.last_outcome = None
        self.last_error = None

        try:
            outcome = action(amount)
        except BankingError as e:
            self.last_error = e
            log_action(
                self.logger, "warning",
                f"{operation} failed on {self._account.account_number}: {e}",
                action=operation,
                resource=self._account.account_number,
                data={"amount": amount, "error_type": type(e).__name__}
            )
            if self._reporter:
                self._reporter.report_error(e)
            if self._event_dispatcher:
                self._event_dispatcher.publish(
                    create_failure_event(self._account.account_number, operation, amount, e)
                )
            return

        self.last_outcome = outcome
        log_action(
            self.logger, "info",
            f"{operation} completed on {self._account.account_number}",
            action=operation,
            resource=self._account.account_number,
            data=outcome.to_dict()
        )
        if self._reporter:
            self._reporter.report_outcome(outcome)
        if self._event_dispatcher:
            self._event_dispatcher.publish(create_transaction_event(outcome))

    def __repr__(self) -> str:
        return f"ATM(account={self._account.account_number!r})"
