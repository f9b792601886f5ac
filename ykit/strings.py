"""Operations on text values: lookup, comparison, trimming and splitting."""

from __future__ import annotations


def char_at(text: str, i: int) -> str:
    """Return the character at ``i``, or an empty string when out of range."""
    if 0 <= i < len(text):
        return text[i]
    return ""


def resize(text: str, size: int) -> str:
    """Return ``text`` cut or padded with NUL characters to exactly ``size``."""
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(text):
        return text[:size]
    return text + "\0" * (size - len(text))


def find_char(text: str, c: str) -> int:
    """Return the index of the first ``c`` in ``text``, or -1."""
    for index, ch in enumerate(text):
        if ch == c:
            return index
    return -1


def find_last_char(text: str, c: str) -> int:
    """Return the index of the last ``c`` in ``text``, or -1."""
    for index in reversed(range(len(text))):
        if text[index] == c:
            return index
    return -1


def compare(a: str, b: str) -> int:
    """Compare two strings character by character.

    Returns 0 when they are equal, otherwise the difference of the first
    differing character codes. When one string is a prefix of the other, the
    code of the first extra character is returned, negated if it belongs to
    ``b``.
    """
    for index in range(max(len(a), len(b))):
        if index >= len(b):
            return ord(a[index])
        if index >= len(a):
            return -ord(b[index])
        if a[index] != b[index]:
            return ord(a[index]) - ord(b[index])
    return 0


def find(text: str, sub: str) -> int:
    """Return the index where ``sub`` is found in ``text``, or -1.

    The scan visits positions up to ``len(text) - len(sub)`` only and restarts
    the match after a mismatch without re-examining the mismatched
    character. An empty ``sub`` is never found.
    """
    length = len(sub)
    if length == 0 or length > len(text):
        return -1
    matched = 0
    for index, ch in enumerate(text[: len(text) - length + 1]):
        if ch == sub[matched]:
            matched += 1
            if matched == length:
                return index - matched + 1
        else:
            matched = 0
    return -1


def trim(text: str, chars: str | None) -> str:
    """Remove every character in ``chars`` from both ends of ``text``.

    With ``chars`` of ``None`` the text is returned unchanged.
    """
    if chars is None or not text:
        return text
    return text.strip(chars)


def substring(text: str, start: int, end: int) -> str:
    """Return ``text[start:end]``.

    Raises ValueError when ``start`` is after ``end`` or ``end`` lies past
    the end of ``text``.
    """
    if start < 0 or start > end or end > len(text):
        raise ValueError(
            f"invalid range [{start}, {end}) for text of length {len(text)}"
        )
    return text[start:end]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def reverse(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]