"""
ATM Banking Core

Savings and current accounts with pluggable fee and interest strategies,
an ATM facade and a banking system registry.
"""

from .accounts import (
    Account, AccountCounter, CheckingAccount, CurrentAccount, InterestBearing,
    ProductType, SavingsAccount
)
from .atm import ATM
from .banking_system import BankingSystem, ReportLine
from .exceptions import (
    AccountClosedError, BankingError, FeeExceedsAmountError, InsufficientFundsError,
    InvalidAmountError, MinimumBalanceViolationError, OverdraftExceededError
)
from .fees import FeeStrategy, FeeType, FlatFee, NoFee, PercentageFee
from .interest import CompoundInterest, CompoundingFrequency, InterestStrategy, InterestType, SimpleInterest

__version__ = "1.0.0"
