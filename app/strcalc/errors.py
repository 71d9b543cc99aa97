"""
Errors Module

Exceptions raised by the string calculator.
"""

from typing import List


class CalculatorError(Exception):
    """Base exception for calculator errors."""
    pass


class NegativeNumberError(CalculatorError, ValueError):
    """
    Raised when the input contains negative numbers.

    All negatives are reported at once, in the order they appeared.
    """

    PREFIX = "Negative numbers not allowed: "

    def __init__(self, negatives: List[int]):
        self.negatives = list(negatives)
        super().__init__(self.PREFIX + ", ".join(str(n) for n in self.negatives))
