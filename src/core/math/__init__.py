"""
Core math modules для BigNumber

Беззнаковая арифметика над десятичными цифрами и таксономия ошибок.
"""

# Digit Arithmetic
from src.core.math.digit_arithmetic import (
    # Constants
    BASE,
    DECIMAL_DIGITS,
    MAX_DIGIT,
    # Exceptions
    BigNumberError,
    DivisionByZeroError,
    InvalidModulusError,
    NoInverseError,
    ParseError,
    # Normalization & conversion
    digits_from_int,
    format_decimal,
    is_zero_magnitude,
    parse_decimal,
    trim_leading_zeros,
    # Magnitude operations
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    multiply_by_digit,
    multiply_magnitudes,
    subtract_magnitudes,
)

__all__ = [
    # Digit Arithmetic: Constants
    "BASE",
    "DECIMAL_DIGITS",
    "MAX_DIGIT",
    # Digit Arithmetic: Exceptions
    "BigNumberError",
    "DivisionByZeroError",
    "InvalidModulusError",
    "NoInverseError",
    "ParseError",
    # Digit Arithmetic: Normalization & conversion
    "digits_from_int",
    "format_decimal",
    "is_zero_magnitude",
    "parse_decimal",
    "trim_leading_zeros",
    # Digit Arithmetic: Magnitude operations
    "add_magnitudes",
    "compare_magnitudes",
    "divmod_magnitudes",
    "multiply_by_digit",
    "multiply_magnitudes",
    "subtract_magnitudes",
]
