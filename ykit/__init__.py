"""Utility helpers: ASCII characters, sign and clamp, 2D vectors, string helpers, line reading, printf-style formatting and lists."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "mathutil",
    "vec2",
    "cstr",
    "lineio",
    "strings",
    "listiter",
    "printf",
    "seqlist",
]