"""
Interest Strategy Module

Pluggable interest calculators for interest-bearing accounts. Rates are
expressed in percent per period; compound strategies split the period into
``compound_frequency`` equal compounding steps.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class InterestType(Enum):
    """Types of interest calculations"""
    SIMPLE = "simple"          # Simple interest (principal only)
    COMPOUND = "compound"      # Compound interest


class CompoundingFrequency(Enum):
    """How often interest compounds within one period"""
    DAILY = 365
    MONTHLY = 12
    QUARTERLY = 4
    ANNUALLY = 1


class InterestStrategy(ABC):
    """Calculates the interest earned on a balance for one period"""

    interest_type: InterestType

    @abstractmethod
    def calculate_interest(self, balance: float, rate: float) -> float:
        """
        Calculate interest for one period

        Args:
            balance: Balance interest is earned on
            rate: Interest rate in percent per period

        Returns:
            Interest increment (non-positive for non-positive balances)
        """


@dataclass(frozen=True)
class SimpleInterest(InterestStrategy):
    """Interest on the principal only"""

    interest_type = InterestType.SIMPLE

    def calculate_interest(self, balance: float, rate: float) -> float:
        return balance * rate / 100


@dataclass(frozen=True)
class CompoundInterest(InterestStrategy):
    """Interest compounded ``compound_frequency`` times per period"""
    compound_frequency: int = CompoundingFrequency.MONTHLY.value

    interest_type = InterestType.COMPOUND

    def __post_init__(self):
        if isinstance(self.compound_frequency, CompoundingFrequency):
            object.__setattr__(self, 'compound_frequency', self.compound_frequency.value)

        if isinstance(self.compound_frequency, bool) or not isinstance(self.compound_frequency, int):
            raise ValueError("Compound frequency must be an integer")
        if self.compound_frequency <= 0:
            raise ValueError("Compound frequency must be positive")

    def calculate_interest(self, balance: float, rate: float) -> float:
        n = self.compound_frequency
        return balance * ((1 + rate / (100 * n)) ** n - 1)


def create_interest_strategy(
    interest_type: InterestType,
    compound_frequency: Optional[Union[int, CompoundingFrequency]] = None
) -> InterestStrategy:
    """
    Build an interest strategy from its type

    Args:
        interest_type: Simple or compound
        compound_frequency: Compounding steps per period (compound only,
            defaults to monthly)

    Returns:
        Configured InterestStrategy
    """
    if interest_type == InterestType.SIMPLE:
        return SimpleInterest()
    elif interest_type == InterestType.COMPOUND:
        if compound_frequency is None:
            return CompoundInterest()
        return CompoundInterest(compound_frequency=compound_frequency)

    raise ValueError(f"Unsupported interest type: {interest_type}")
