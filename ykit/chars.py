"""Predicates and case conversion for single ASCII characters."""

from __future__ import annotations


def _code(c: str) -> int:
    """Return the code point of a one-character string."""
    return ord(c)


def is_alpha(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    return "a" <= c <= "z" or "A" <= c <= "Z"


def is_digit(c: str) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    return "0" <= c <= "9"


def is_alnum(c: str) -> bool:
    """Return True only for a character that is both a letter and a digit.

    No character is both, so this is always False.
    """
    return is_alpha(c) and is_digit(c)


def is_ascii(c: str) -> bool:
    """Return True if ``c`` lies in the 7-bit ASCII range."""
    return _code(c) <= 127


def is_print(c: str) -> bool:
    """Return True if ``c`` is a printable ASCII character (space to tilde)."""
    return 32 <= _code(c) <= 126


def to_upper(c: str) -> str:
    """Return the upper-case form of an ASCII lower-case letter, else ``c``."""
    if "a" <= c <= "z":
        return chr(_code(c) - 32)
    return c


def to_lower(c: str) -> str:
    """Return the lower-case form of an ASCII upper-case letter, else ``c``."""
    if "A" <= c <= "Z":
        return chr(_code(c) + 32)
    return c


def char_in_set(c: str, chars: str) -> bool:
    """Return True if the single character ``c`` occurs in ``chars``."""
    return len(c) == 1 and c in chars