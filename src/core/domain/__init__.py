"""
Domain models and value objects.

Contains the BigNumber value type and re-exports its error taxonomy.
"""

from src.core.domain.big_number import ONE, ZERO, BigNumber
from src.core.math.digit_arithmetic import (
    BigNumberError,
    DivisionByZeroError,
    InvalidModulusError,
    NoInverseError,
    ParseError,
)

__all__ = [
    # BigNumber model
    "BigNumber",
    "ZERO",
    "ONE",
    # Exceptions
    "BigNumberError",
    "ParseError",
    "DivisionByZeroError",
    "NoInverseError",
    "InvalidModulusError",
]
