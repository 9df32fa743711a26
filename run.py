#!/usr/bin/env python3
"""
ATM Banking Demo Entry Point

Opens a few accounts, drives them through ATMs and prints a report.
"""

import sys

from atm_banking.atm import ATM
from atm_banking.banking_system import BankingSystem
from atm_banking.config import get_config
from atm_banking.console import ConsoleReporter
from atm_banking.fees import FlatFee, PercentageFee
from atm_banking.interest import CompoundInterest
from atm_banking.logging_config import setup_logging_from_config


def main() -> int:
    setup_logging_from_config(get_config())
    reporter = ConsoleReporter()

    with BankingSystem() as bank:
        savings = bank.open_savings_account("12345678", 500.0)
        current = bank.open_current_account("87654321", 1000.0, overdraft_limit=200.0)
        bank.open_savings_account(
            "11223344", 750.0,
            interest_rate=4.5,
            fee_strategy=FlatFee(2.0),
            interest_strategy=CompoundInterest(12)
        )
        bank.open_savings_account("12345", 1000.0, interest_rate=5.0, fee_strategy=PercentageFee(0.5))

        print(f"Total accounts created: {bank.live_accounts}")

        ATM(savings).add_amount(200.0).withdraw_amount(100.0)
        ATM(current).add_amount(300.0).withdraw_amount(150.0).withdraw_amount(2000.0)

        for number in ("11223344", "12345"):
            account = bank.find_account(number)
            ATM(account).add_amount(100.0).apply_specific_behavior()

        print()
        reporter.report_accounts(bank.generate_report())

    print(f"Total accounts remaining: {bank.live_accounts}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
