#!/usr/bin/env python3
"""
Quick demonstration of the string calculator
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "app"))

from strcalc import add, NegativeNumberError


def demonstrate_calculator():
    """Show examples of calculator usage"""

    print("STRING CALCULATOR DEMONSTRATION")
    print("=" * 50)

    examples = [
        ("Empty input", "", 0),
        ("Commas", "1,2,3", 6),
        ("Commas and newlines", "1\n2,3", 6),
        ("Custom delimiter", "//;\n1;2;3", 6),
        ("Long delimiter", "//[***]\n1***2***3", 6),
        ("Several delimiters", "//[**][%%]\n1**2%%3", 6),
        ("Non-numeric token", "1,a,3", 4),
    ]

    print("\nValid Examples:")
    print("-" * 30)

    for name, numbers, expected in examples:
        result = add(numbers)
        print(f"{name}:")
        print(f"  {numbers!r}")
        print(f"  Result: {result} {'✓' if result == expected else '✗'}")
        print()

    print("\nInvalid Examples (should fail):")
    print("-" * 30)

    for name, numbers in [("One negative", "-5"), ("Two negatives", "1,-2,3,-4")]:
        try:
            result = add(numbers)
            print(f"{name}: UNEXPECTED SUCCESS: Got {result}")
        except NegativeNumberError as e:
            print(f"{name}:")
            print(f"  {numbers!r}")
            print(f"  Expected error: {e}")
        print()


if __name__ == "__main__":
    demonstrate_calculator()
