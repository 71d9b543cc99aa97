"""
Calculator Module

The string calculator itself: split, convert, check for negatives, sum.

Usage:
    from strcalc import add
    add("1,2,3")          # 6
    add("//;\\n1;2")      # 3
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .delimiters import resolve
from .errors import NegativeNumberError
from .logging_config import get_logger

logger = get_logger("calculator")

# Optional whitespace and sign, then ASCII digits. Whatever follows is ignored.
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def to_int(token: str) -> int:
    """
    Read the leading integer of a token, or 0 if there is none.

    "12" -> 12, "12ab" -> 12, "-3x" -> -3, "a" -> 0, "" -> 0
    """
    match = _LEADING_INT.match(token)
    if not match:
        return 0
    return int(match.group(1))


def split_numbers(numbers: str, delimiters: Sequence[str]) -> List[str]:
    """
    Split on any of the delimiters, treated as literal strings.

    Adjacent delimiters give empty tokens. An empty string gives no tokens.
    """
    if not numbers:
        return []
    pattern = "|".join(re.escape(d) for d in delimiters)
    return re.split(pattern, numbers)


@dataclass
class SumResult:
    """
    Outcome of evaluating an input.

    Either a total (success) or the negatives that were rejected.
    """
    success: bool
    total: int = 0
    negatives: List[int] = field(default_factory=list)
    tokens: List[str] = field(default_factory=list)

    @property
    def error(self) -> Optional[str]:
        if self.success:
            return None
        return str(NegativeNumberError(self.negatives))

    def __str__(self) -> str:
        if self.success:
            return str(self.total)
        return f"Error: {self.error}"

    @classmethod
    def ok(cls, total: int, tokens: Optional[List[str]] = None) -> "SumResult":
        """Create a successful result."""
        return cls(success=True, total=total, tokens=tokens or [])

    @classmethod
    def fail(cls, negatives: List[int], tokens: Optional[List[str]] = None) -> "SumResult":
        """Create a rejected result."""
        return cls(success=False, negatives=list(negatives), tokens=tokens or [])

    def unwrap(self) -> int:
        """Return the total, or raise NegativeNumberError."""
        if not self.success:
            raise NegativeNumberError(self.negatives)
        return self.total


class StringCalculator:
    """
    Sums numbers written in a delimited string.

    Holds no state, so one instance can be shared freely.
    """

    def evaluate(self, numbers: str) -> SumResult:
        """
        Evaluate an input without raising.

        Args:
            numbers: Delimited numbers, optionally with a "//" header

        Returns:
            SumResult with the total, or the negatives found
        """
        if not numbers:
            return SumResult.ok(0)

        spec = resolve(numbers)
        tokens = split_numbers(spec.numbers, spec.delimiters)
        values = [to_int(token) for token in tokens]

        negatives = [value for value in values if value < 0]
        if negatives:
            logger.debug(f"Rejected negatives: {negatives}")
            return SumResult.fail(negatives, tokens)

        return SumResult.ok(sum(values), tokens)

    def add(self, numbers: str) -> int:
        """
        Sum the numbers in `numbers`.

        Raises:
            NegativeNumberError: If any value is negative
        """
        return self.evaluate(numbers).unwrap()


_calculator = StringCalculator()


def add(numbers: str) -> int:
    """Module-level shortcut for StringCalculator().add()."""
    return _calculator.add(numbers)
