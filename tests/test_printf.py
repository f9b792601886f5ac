import pytest

from ykit.printf import (
    ConvSpec,
    ConvType,
    conv_type,
    format_argument,
    hex_string,
    pad_number,
    parse_spec,
    sformat,
    yprintf,
)


@pytest.mark.parametrize(
    "char, expected",
    [
        ("c", ConvType.CHAR),
        ("s", ConvType.STRING),
        ("p", ConvType.HEXPTR),
        ("d", ConvType.DECIMAL),
        ("i", ConvType.INTEGER),
        ("u", ConvType.UDECIMAL),
        ("x", ConvType.HEX),
        ("X", ConvType.UHEX),
        ("%", ConvType.PERCENT),
        ("z", ConvType.UNKNOWN),
        ("f", ConvType.UNKNOWN),
    ],
)
def test_conv_type(char, expected):
    assert conv_type(char) is expected


def test_parse_spec_reads_flags_width_precision():
    fmt = "-08.3d"
    spec, pos = parse_spec(fmt, 0)
    assert spec.left_adjust
    assert spec.zero_padding
    assert not spec.alt_form
    assert spec.field_width == 8
    assert spec.precision_flag
    assert spec.precision == 3
    assert spec.kind is ConvType.DECIMAL
    assert pos == len(fmt)


def test_parse_spec_stops_after_type_char():
    fmt = "a%#xrest"
    spec, pos = parse_spec(fmt, 2)
    assert spec.alt_form
    assert spec.kind is ConvType.HEX
    assert fmt[pos:] == "rest"


def test_parse_spec_at_end_of_string():
    spec, pos = parse_spec("%", 1)
    assert spec.kind is ConvType.UNKNOWN
    assert pos == 1


def test_hex_string_zero_and_values():
    assert hex_string(0) == "0"
    assert hex_string(48879, False) == format(48879, "x")
    assert hex_string(48879, True) == format(48879, "X")


def test_hex_string_rejects_negative():
    with pytest.raises(ValueError):
        hex_string(-1)


def test_sformat_percent_does_not_consume_argument():
    assert sformat("%d%%%d", 1, 2) == "%d%%%d" % (1, 2)


def test_sformat_null_string():
    assert sformat("%s", None) == "(null)"


def test_sformat_pointer():
    assert sformat("%p", 255) == "0x" + format(255, "x")
    assert sformat("%p", None) == "0x0"


def test_sformat_decimal_wraps_to_32_bits():
    assert sformat("%d", 2**31) == "-2147483648"
    assert sformat("%d", -2147483648) == "-2147483648"


def test_sformat_unsigned_and_hex_of_negative():
    assert sformat("%u", -1) == str(2**32 - 1)
    assert sformat("%x", -1) == format(2**32 - 1, "x")


def test_sformat_sign_with_zero_padding_widens_field():
    assert sformat("%+05d", 42) == "+00042"


def test_sformat_left_adjusted_zero_padded_string():
    assert sformat("%-05s", "ab") == "ab000"


def test_sformat_alt_hex_precision_pads_before_prefix():
    result = sformat("%#.8x", 255)
    assert len(result) == 8
    assert result.endswith("0x" + format(255, "x"))
    assert set(result[: -len("0xff")]) == {"0"}


def test_sformat_unknown_conversion_is_dropped_and_consumes_nothing():
    assert sformat("a%qb") == "ab"
    assert sformat("%q%d", 7) == "7"


def test_sformat_missing_argument_raises():
    with pytest.raises(TypeError):
        sformat("%d %d", 1)


def test_sformat_rejects_non_integer_for_decimal():
    with pytest.raises(TypeError):
        sformat("%d", "12")


def test_pad_number_precision():
    spec = ConvSpec(kind=ConvType.DECIMAL, precision_flag=True, precision=5)
    assert pad_number("42", 42, "+", spec) == "%+.5d" % 42


def test_pad_number_negative_zero_padding():
    spec = ConvSpec(kind=ConvType.DECIMAL, zero_padding=True, field_width=6)
    assert pad_number("-42", -42, "-", spec) == "%06d" % -42


def test_format_argument_unknown_returns_none():
    args = iter([5])
    assert format_argument(ConvSpec(), args) is None
    assert next(args) == 5


def test_format_argument_string_ignores_precision():
    spec = ConvSpec(kind=ConvType.STRING, precision_flag=True, precision=2)
    assert format_argument(spec, iter(["hello"])) == "hello"


def test_yprintf_returns_printed_length(capsys):
    count = yprintf("%s=%5d|%x\n", "key", 12, 255)
    out = capsys.readouterr().out
    assert out == "%s=%5d|%x\n" % ("key", 12, 255)
    assert count == len(out)


def test_yprintf_unknown_conversion_writes_warning(capsys):
    count = yprintf("x%qy")
    out = capsys.readouterr().out
    assert out == "xUnknown flag specified\ny"
    assert count == 2