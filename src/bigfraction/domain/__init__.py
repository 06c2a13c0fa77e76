"""
Domain models and value objects.

Contains the BigFraction value type and the RoundedRatio result.
"""

from src.bigfraction.domain.fraction import (
    ONE,
    ONE_HALF,
    ONE_TENTH,
    TEN,
    ZERO,
    BigFraction,
    NonPositiveDenominatorError,
    RoundedRatio,
)

__all__ = [
    # Models
    "BigFraction",
    "RoundedRatio",
    # Exceptions
    "NonPositiveDenominatorError",
    # Constants
    "ZERO",
    "ONE",
    "TEN",
    "ONE_HALF",
    "ONE_TENTH",
]
