"""
Tests for delimiter resolution.

Run with: pytest app/tests/test_delimiters.py -v
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from strcalc.delimiters import (
    DEFAULT_DELIMITERS,
    CustomDelimiter,
    DefaultDelimiter,
    DelimiterSpec,
    get_delimiter,
    resolve,
    scan_brackets,
)


class TestResolve:
    """Tests for resolve()."""

    def test_defaults_without_marker(self):
        """Should use comma and newline without a declaration."""
        spec = resolve("1,2\n3")
        assert spec == DelimiterSpec(delimiters=(",", "\n"), numbers="1,2\n3")

    def test_single_literal_delimiter(self):
        """Should read a single-character declaration."""
        spec = resolve("//;\n1;2")
        assert spec.delimiters == (";",)
        assert spec.numbers == "1;2"

    def test_multi_char_literal_delimiter(self):
        """Should keep an unbracketed declaration whole."""
        assert resolve("//***\n1***2").delimiters == ("***",)

    def test_bracketed_delimiters_in_order(self):
        """Should extract bracket groups in order."""
        spec = resolve("//[*][%%]\n1*2%%3")
        assert spec.delimiters == ("*", "%%")
        assert spec.numbers == "1*2%%3"

    def test_only_first_newline_ends_declaration(self):
        """Should keep later newlines in the numbers section."""
        spec = resolve("//;\n1\n2")
        assert spec.numbers == "1\n2"

    def test_empty_remainder(self):
        """Should allow an empty numbers section."""
        assert resolve("//;\n").numbers == ""

    def test_missing_newline(self):
        """Should treat a header with no newline as having no numbers."""
        spec = resolve("//;")
        assert spec.delimiters == (";",)
        assert spec.numbers == ""

    def test_empty_declaration_uses_defaults(self):
        """Should fall back to defaults for an empty declaration."""
        spec = resolve("//\n1,2")
        assert spec.delimiters == DEFAULT_DELIMITERS
        assert spec.numbers == "1,2"

    def test_bracketed_without_groups_is_literal(self):
        """Should use the declaration literally when no group is found."""
        assert resolve("//[]\n1[]2").delimiters == ("[]",)

    def test_partial_brackets_are_literal(self):
        """Should use unbalanced brackets literally."""
        assert resolve("//[*\n1[*2").delimiters == ("[*",)


class TestScanBrackets:
    """Tests for scan_brackets()."""

    @pytest.mark.parametrize("header,expected", [
        ("[*]", ["*"]),
        ("[***][%]", ["***", "%"]),
        ("[a]x[b]", ["a", "b"]),
        ("[][x]", ["x"]),
        ("[[x]", ["[x"]),
        ("[", []),
        ("[]", []),
    ])
    def test_groups(self, header, expected):
        """Should collect non-empty groups left to right."""
        assert scan_brackets(header) == expected


class TestStrategies:
    """Tests for strategy selection."""

    def test_get_delimiter_default(self):
        """Should pick the default strategy for plain input."""
        assert isinstance(get_delimiter("1,2"), DefaultDelimiter)

    def test_get_delimiter_custom(self):
        """Should pick the custom strategy for '//' input."""
        assert isinstance(get_delimiter("//;\n1"), CustomDelimiter)

    def test_parse_declaration(self):
        """Should parse bracketed, literal and empty declarations."""
        assert CustomDelimiter.parse_declaration("[**][%%]") == ("**", "%%")
        assert CustomDelimiter.parse_declaration(";") == (";",)
        assert CustomDelimiter.parse_declaration("") == DEFAULT_DELIMITERS
