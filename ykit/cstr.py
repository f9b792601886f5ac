"""Helpers for NUL-terminated-string style operations on Python text."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def atoi(text: str | None) -> int:
    """Parse a leading decimal integer, the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. Text with no digits yields 0.
    """
    if not text:
        return 0
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("+", "-"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return -value if negative else value


def _code_at(text: str, i: int) -> int:
    return ord(text[i]) if i < len(text) else 0


def ncmp(s1: str | None, s2: str | None, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0. ``None`` stands for a missing string.
    """
    if n == 0 or (s1 is None and s2 is None):
        return 0
    if s1 is None:
        return -_code_at(s2 or "", 0)
    if s2 is None:
        return _code_at(s1, 0)
    for i in range(n):
        a = _code_at(s1, i)
        b = _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def trim(text: str | None, chars: str | None) -> str | None:
    """Remove every character in ``chars`` from both ends of ``text``.

    With ``chars`` of ``None`` the text is returned unchanged.
    """
    if text is None:
        return None
    if chars is None:
        return text
    return text.strip(chars)


def sub(text: str | None, start: int, length: int) -> str | None:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string; the length is cut to what
    remains.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    start = min(start, len(text))
    length = min(length, len(text) - start)
    return text[start:start + length]


def lcat(dst: str, src: str, dsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dsize`` slots.

    The buffer keeps one slot for the terminator, so the result holds at most
    ``dsize - 1`` characters. Returns the resulting text and the length the
    full concatenation would have needed.
    """
    if dsize < 0:
        raise ValueError("dsize must not be negative")
    if len(dst) > dsize or dsize == 0:
        return dst, dsize + len(src)
    limit = max(dsize - 1, len(dst))
    return (dst + src)[:limit], len(dst) + len(src)