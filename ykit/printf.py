"""A small printf-style formatter supporting c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ykit.cstr import atoi, itoa

_UNKNOWN_MESSAGE = "Unknown flag specified\n"
_FLAG_FIELDS = {
    "#": "alt_form",
    "-": "left_adjust",
    "+": "sign_flag",
    " ": "space_flag",
    "0": "zero_padding",
}
_MISSING = object()
_UINT32 = 0xFFFFFFFF
_UINTPTR = 0xFFFFFFFFFFFFFFFF


class ConvType(Enum):
    """The kind of conversion a specification asks for."""

    UNKNOWN = "unknown"
    CHAR = "c"
    STRING = "s"
    HEXPTR = "p"
    DECIMAL = "d"
    INTEGER = "i"
    UDECIMAL = "u"
    HEX = "x"
    UHEX = "X"
    PERCENT = "%"


_CONV_BY_CHAR = {t.value: t for t in ConvType if t is not ConvType.UNKNOWN}


@dataclass
class ConvSpec:
    """Flags, width and precision of one conversion specification."""

    kind: ConvType = ConvType.UNKNOWN
    alt_form: bool = False
    left_adjust: bool = False
    sign_flag: bool = False
    space_flag: bool = False
    zero_padding: bool = False
    precision_flag: bool = False
    precision: int = 0
    field_width: int = 0


def conv_type(c: str) -> ConvType:
    """Return the conversion type named by the character ``c``."""
    return _CONV_BY_CHAR.get(c, ConvType.UNKNOWN)


def _skip_digits(fmt: str, pos: int) -> int:
    while pos < len(fmt) and "0" <= fmt[pos] <= "9":
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int = 0) -> tuple[ConvSpec, int]:
    """Parse a specification starting at ``pos``, just after the ``%``.

    Returns the specification and the index following its type character.
    """
    spec = ConvSpec()
    end = len(fmt)
    while pos < end and fmt[pos] in _FLAG_FIELDS:
        setattr(spec, _FLAG_FIELDS[fmt[pos]], True)
        pos += 1
    spec.field_width = max(0, atoi(fmt[pos:]))
    pos = _skip_digits(fmt, pos)
    if pos < end and fmt[pos] == ".":
        pos += 1
        spec.precision_flag = True
        spec.precision = max(0, atoi(fmt[pos:]))
        pos = _skip_digits(fmt, pos)
    if pos < end:
        spec.kind = conv_type(fmt[pos])
        pos += 1
    return spec, pos


def hex_string(value: int, uppercase: bool = False) -> str:
    """Return ``value`` in hexadecimal without prefix; zero gives ``"0"``."""
    if value < 0:
        raise ValueError("value must not be negative")
    return format(value, "X" if uppercase else "x")


def pad_number(digits: str, value: int, sign: str, spec: ConvSpec) -> str:
    """Apply precision or zero padding to a decimal and put ``sign`` in front.

    ``digits`` is the decimal text of ``value``, including its minus sign
    when negative; that minus is replaced by ``sign``.
    """
    negative = value < 0
    body = digits[1:] if negative else digits
    width = len(body)
    if spec.precision_flag and spec.precision > width:
        width = spec.precision
    elif not spec.precision_flag and spec.zero_padding and spec.field_width > width:
        width = spec.field_width - negative
    return sign + body.rjust(width, "0")


def _next_arg(args: Iterator[Any]) -> Any:
    arg = next(args, _MISSING)
    if arg is _MISSING:
        raise TypeError("not enough arguments for format string")
    return arg


def _int_arg(args: Iterator[Any]) -> int:
    arg = _next_arg(args)
    if not isinstance(arg, int):
        raise TypeError(f"an integer is required, not {type(arg).__name__}")
    return arg


def _to_int32(value: int) -> int:
    return ((value + 2**31) & _UINT32) - 2**31


def _zero_fill(text: str, precision: int) -> str:
    return text.rjust(precision, "0")


def _format_char(args: Iterator[Any]) -> str:
    arg = _next_arg(args)
    if isinstance(arg, int):
        return chr(arg & 0xFF)
    if isinstance(arg, str) and len(arg) == 1:
        return arg
    raise TypeError("%c requires an integer or a single character")


def _format_pointer(args: Iterator[Any]) -> str:
    arg = _next_arg(args)
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = arg & _UINTPTR
    else:
        address = id(arg)
    return "0x" + hex_string(address)


def _format_decimal(args: Iterator[Any], spec: ConvSpec) -> str:
    value = _to_int32(_int_arg(args))
    if value < 0:
        sign = "-"
    elif spec.sign_flag:
        sign = "+"
    elif spec.space_flag:
        sign = " "
    else:
        sign = ""
    return pad_number(itoa(value), value, sign, spec)


def _format_hex(args: Iterator[Any], spec: ConvSpec, uppercase: bool) -> str:
    value = _int_arg(args) & _UINT32
    text = hex_string(value, uppercase)
    if spec.alt_form and value != 0:
        text = ("0X" if uppercase else "0x") + text
    return _zero_fill(text, spec.precision)


def format_argument(spec: ConvSpec, args: Iterator[Any]) -> str | None:
    """Format the next argument from ``args`` as ``spec`` asks.

    Field width and string precision are not applied here. Returns None for
    an unknown conversion, which consumes no argument; so does ``%``.
    """
    kind = spec.kind
    if kind is ConvType.UNKNOWN:
        return None
    if kind is ConvType.PERCENT:
        return "%"
    if kind is ConvType.CHAR:
        return _format_char(args)
    if kind is ConvType.STRING:
        arg = _next_arg(args)
        return "(null)" if arg is None else str(arg)
    if kind is ConvType.HEXPTR:
        return _format_pointer(args)
    if kind in (ConvType.DECIMAL, ConvType.INTEGER):
        return _format_decimal(args, spec)
    if kind is ConvType.UDECIMAL:
        return _zero_fill(str(_int_arg(args) & _UINT32), spec.precision)
    return _format_hex(args, spec, kind is ConvType.UHEX)


def _fit(text: str, spec: ConvSpec) -> str:
    """Apply string precision and field width to formatted text."""
    if spec.kind is ConvType.CHAR:
        text = text[:1]
    elif spec.kind is ConvType.STRING and spec.precision_flag:
        text = text[: spec.precision]
    if len(text) >= spec.field_width:
        return text
    fill = ("0" if spec.zero_padding else " ") * (spec.field_width - len(text))
    return text + fill if spec.left_adjust else fill + text


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[tuple[str, bool]]:
    """Yield output pieces and whether each counts toward the printed length."""
    arg_iter = iter(args)
    pos = 0
    end = len(fmt)
    while pos < end:
        ch = fmt[pos]
        if ch != "%":
            yield ch, True
            pos += 1
            continue
        spec, pos = parse_spec(fmt, pos + 1)
        text = format_argument(spec, arg_iter)
        if text is None:
            yield _UNKNOWN_MESSAGE, False
        else:
            yield _fit(text, spec), True


def sformat(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by formatted ``args``.

    Unknown conversions produce no text.
    """
    return "".join(text for text, counted in _render(fmt, args) if counted)


def yprintf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Each unknown conversion writes a warning line instead, which is not
    counted.
    """
    count = 0
    out = sys.stdout
    for text, counted in _render(fmt, args):
        out.write(text)
        if counted:
            count += len(text)
    out.flush()
    return count