"""
strcalc - A String Calculator

This package contains:
- calculator: Splitting, conversion and summation
- delimiters: Default and custom delimiter resolution
- errors: Exceptions raised on bad input
- config: Configuration loading
- server / cli: HTTP and command-line front-ends
"""

__version__ = "0.1.0"

from .calculator import StringCalculator, SumResult, add
from .delimiters import DelimiterSpec, resolve
from .errors import CalculatorError, NegativeNumberError

__all__ = [
    "StringCalculator",
    "SumResult",
    "add",
    "DelimiterSpec",
    "resolve",
    "CalculatorError",
    "NegativeNumberError",
]
