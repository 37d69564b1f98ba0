"""Roman numerals and palindrome checks."""

from __future__ import annotations

from itertools import chain

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

# The numeral that may stand before each letter to subtract from it.
_SUBTRACTIVE = {"V": "I", "X": "I", "L": "X", "C": "X", "D": "C", "M": "C"}


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; characters that are not numerals are ignored."""
    total = 0
    for previous, current in zip(chain([""], s), s):
        value = _ROMAN_VALUES.get(current)
        if value is None:
            continue
        if previous and _SUBTRACTIVE.get(current) == previous:
            # The preceding numeral was already added; take it back twice.
            value -= 2 * _ROMAN_VALUES[previous]
        total += value
    return total


def is_palindrome(s: str) -> bool:
    """Return True when the ASCII letters and digits read the same both ways."""
    cleaned = [ch.lower() for ch in s if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def is_palindrome_number(x: int) -> bool:
    """Return True when the decimal digits of ``x`` read the same both ways.

    Negative numbers are never palindromes.
    """
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]