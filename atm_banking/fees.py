"""
Fee Strategy Module

Pluggable fee calculators bound to an account at construction. Each strategy
is an immutable value object whose result depends only on the requested
amount and its own captured parameters.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class FeeType(Enum):
    """Fee calculation types"""
    NONE = "none"               # No fee
    PERCENTAGE = "percentage"   # Percentage of amount
    FLAT = "flat"               # Fixed amount per operation


class FeeStrategy(ABC):
    """Calculates the fee charged on a deposit or withdrawal"""

    fee_type: FeeType

    @abstractmethod
    def calculate_fee(self, amount: float) -> float:
        """Return the non-negative fee for an operation of ``amount``"""


@dataclass(frozen=True)
class NoFee(FeeStrategy):
    """Free of charge"""

    fee_type = FeeType.NONE

    def calculate_fee(self, amount: float) -> float:
        return 0.0


@dataclass(frozen=True)
class PercentageFee(FeeStrategy):
    """Fee as a percentage of the operation amount"""
    rate: float  # Percent, e.g. 0.5 for 0.5%

    fee_type = FeeType.PERCENTAGE

    def __post_init__(self):
        if self.rate < 0:
            raise ValueError("Fee percentage must be non-negative")

    def calculate_fee(self, amount: float) -> float:
        return amount * self.rate / 100


@dataclass(frozen=True)
class FlatFee(FeeStrategy):
    """Fixed fee regardless of the operation amount"""
    amount: float

    fee_type = FeeType.FLAT

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("Flat fee must be non-negative")

    def calculate_fee(self, amount: float) -> float:
        return self.amount


def create_fee_strategy(fee_type: FeeType, value: float = 0.0) -> FeeStrategy:
    """
    Build a fee strategy from its type and single parameter

    Args:
        fee_type: Kind of fee
        value: Percentage rate for PERCENTAGE, fee amount for FLAT,
            ignored for NONE

    Returns:
        Configured FeeStrategy
    """
    if fee_type == FeeType.NONE:
        return NoFee()
    elif fee_type == FeeType.PERCENTAGE:
        return PercentageFee(rate=value)
    elif fee_type == FeeType.FLAT:
        return FlatFee(amount=value)

    raise ValueError(f"Unsupported fee type: {fee_type}")
