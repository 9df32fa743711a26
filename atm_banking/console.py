"""
Console Presentation Module

Formats transaction outcomes, failures and account reports as the
human-readable lines shown to ATM users.
"""

import sys
from typing import Iterable, Optional, TextIO

from .transactions import TransactionOutcome, TransactionType


def _number(value: float) -> str:
    return f"{value:g}"


def format_outcome(outcome: TransactionOutcome) -> str:
    """Format a successful operation"""
    if outcome.transaction_type == TransactionType.DEPOSIT:
        return f"Deposited: {_number(outcome.amount)}. New balance: {_number(outcome.balance_after)}"
    elif outcome.transaction_type == TransactionType.WITHDRAWAL:
        return f"Withdrew: {_number(outcome.amount)}. Remaining balance: {_number(outcome.balance_after)}"
    elif outcome.transaction_type == TransactionType.INTEREST_CREDIT:
        return f"Interest Applied: {_number(outcome.amount)}, New Balance: {_number(outcome.balance_after)}"

    raise ValueError(f"Unsupported transaction type: {outcome.transaction_type}")


def format_error(error: Exception) -> str:
    """Format a failed operation"""
    return f"ERROR: {error}"


def format_report(lines: Iterable) -> str:
    """Format BankingSystem report lines as a table"""
    rows = [f"{'Account':<12} {'Type':<10} {'Balance':>12}"]
    for line in lines:
        rows.append(f"{line.account_number:<12} {line.account_type.label:<10} {line.balance:>12.2f}")
    return "\n".join(rows)


class ConsoleReporter:
    """Writes outcomes to stdout and failures to stderr"""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        # Resolved lazily so pytest's capsys and redirected streams are honoured
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def report_outcome(self, outcome: TransactionOutcome) -> None:
        print(format_outcome(outcome), file=self.out)

    def report_error(self, error: Exception) -> None:
        print(format_error(error), file=self.err)

    def report_accounts(self, lines: Iterable) -> None:
        print(format_report(lines), file=self.out)
