"""
Delimiter Module

Works out which delimiters an input uses and where its numbers start.

Two formats are understood:
- Plain input, split on commas and newlines: "1,2\\n3"
- A custom declaration line: "//;\\n1;2" or "//[***][%%]\\n1***2%%3"
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

from .logging_config import get_logger

logger = get_logger("delimiters")

DEFAULT_DELIMITERS: Tuple[str, ...] = (",", "\n")
CUSTOM_MARKER = "//"


@dataclass(frozen=True)
class DelimiterSpec:
    """Resolved delimiters plus the part of the input holding the numbers."""
    delimiters: Tuple[str, ...]
    numbers: str


class BaseDelimiter(ABC):
    """A strategy for pulling delimiters out of an input string."""

    @abstractmethod
    def resolve(self, text: str) -> DelimiterSpec:
        pass


class DefaultDelimiter(BaseDelimiter):
    """Comma and newline, with the whole input as numbers."""

    def resolve(self, text: str) -> DelimiterSpec:
        return DelimiterSpec(delimiters=DEFAULT_DELIMITERS, numbers=text)


class CustomDelimiter(BaseDelimiter):
    """
    Reads a "//<declaration>\\n" header.

    A declaration wrapped in brackets holds one delimiter per [group].
    Anything else is taken as a single literal delimiter.
    """

    def resolve(self, text: str) -> DelimiterSpec:
        header, newline, numbers = text[len(CUSTOM_MARKER):].partition("\n")
        if not newline:
            # Declaration with no numbers line
            numbers = ""

        delimiters = self.parse_declaration(header)
        logger.debug(f"Custom delimiters resolved: {delimiters!r}")
        return DelimiterSpec(delimiters=delimiters, numbers=numbers)

    @staticmethod
    def parse_declaration(header: str) -> Tuple[str, ...]:
        """
        Turn a declaration into delimiter tokens.

        Args:
            header: Text between "//" and the first newline

        Returns:
            Tuple of non-empty delimiters (defaults if the header is empty)
        """
        if not header:
            return DEFAULT_DELIMITERS

        if header.startswith("[") and header.endswith("]"):
            groups = scan_brackets(header)
            if groups:
                return tuple(groups)
            logger.debug(f"No bracket groups in {header!r}, using it literally")

        return (header,)


def scan_brackets(header: str) -> List[str]:
    """
    Collect the contents of every non-empty [...] group, left to right.

    Groups do not nest: a group ends at the first "]" after its "[".
    Empty groups and text between groups are skipped.
    """
    groups = []
    i = 0
    while i < len(header):
        if header[i] != "[":
            i += 1
            continue
        close = header.find("]", i + 1)
        if close == -1:
            break
        if close == i + 1:
            i += 1
            continue
        groups.append(header[i + 1:close])
        i = close + 1
    return groups


def get_delimiter(text: str) -> BaseDelimiter:
    """Pick the delimiter strategy for this input."""
    if text.startswith(CUSTOM_MARKER):
        return CustomDelimiter()
    return DefaultDelimiter()


def resolve(text: str) -> DelimiterSpec:
    """Resolve delimiters and the numbers section of `text`."""
    return get_delimiter(text).resolve(text)
