import errno

import pytest

from ftls.printf import COLOR_LENGTH, Formatted, format_printf, printf

RED = "\033[31m"
EOC = "\033[37m\033[0m"


def test_plain_text():
    result = format_printf("hello")
    assert result == Formatted(b"hello", len(b"hello"))


def test_non_ascii_text_counts_bytes():
    result = format_printf("é")
    assert result.data == "é".encode()
    assert result.length == len("é".encode())


@pytest.mark.parametrize("value", [0, 7, -42, 123456, 2**31 - 1, -(2**31)])
def test_decimal(value):
    result = format_printf("%d", value)
    assert result.data == str(value).encode()
    assert result.length == len(result.data)


def test_decimal_wraps_to_int():
    assert format_printf("%i", 2**31).data == str(-(2**31)).encode()


@pytest.mark.parametrize("conv, pyfmt", [("x", "x"), ("X", "X"), ("o", "o"), ("b", "b"), ("u", "d")])
@pytest.mark.parametrize("value", [1, 255, 4096, 123456789])
def test_unsigned_bases(conv, pyfmt, value):
    result = format_printf("%" + conv, value)
    assert result.data == format(value, pyfmt).encode()
    assert result.length == len(result.data)


def test_length_modifiers():
    assert format_printf("%u", -1).data == str(2**32 - 1).encode()
    assert format_printf("%hhu", 261).data == str(261 % 256).encode()
    assert format_printf("%hd", 65535).data == b"-1"
    assert format_printf("%lld", 2**40).data == str(2**40).encode()


def test_field_width_right_aligns():
    result = format_printf("%5d", 42)
    assert result.data == b"42".rjust(5)
    assert result.length == 5


def test_minus_flag_left_aligns():
    result = format_printf("%-5d|", 42)
    assert result.data == b"42".ljust(5) + b"|"


def test_zero_flag_pads_with_zeros():
    assert format_printf("%05d", 42).data == b"42".rjust(5, b"0")


def test_precision_gives_minimum_digits():
    assert format_printf("%5.3d", 7).data == b"007".rjust(5)


def test_sign_flags():
    assert format_printf("%+d", 7).data == b"+" + b"7"
    assert format_printf("% d", 5).data == b" " + b"5"


def test_zero_with_zero_precision_is_empty():
    assert format_printf("%.0d", 0) == Formatted(b"", 0)


def test_sharp_prefixes():
    assert format_printf("%#x", 255).data == b"0x" + format(255, "x").encode()
    assert format_printf("%#X", 255).data == b"0X" + format(255, "X").encode()
    assert format_printf("%#o", 8).data == b"0" + format(8, "o").encode()


def test_strings():
    assert format_printf("%s!", "abc").data == b"abc!"
    assert format_printf("%.2s", "abcdef").data == b"ab"
    assert format_printf("%-6s|", "ab").data == b"ab".ljust(6) + b"|"
    assert format_printf("%s", "héllo").text == "héllo"


def test_null_strings():
    assert format_printf("%s", None) == Formatted(b"(null)", len(b"(null)"))
    assert format_printf("%S", None).data == b"(null)"
    assert format_printf("%05s", None) == Formatted(b"0" * 5, 5)


def test_wide_string():
    result = format_printf("%ls", "héllo")
    assert result.data == "héllo".encode()
    assert result.length == len("héllo".encode())


def test_wide_string_precision_counts_bytes():
    result = format_printf("%.3ls", "héllo")
    assert result.data == "hé".encode()
    assert len(result.data) <= 3


def test_characters():
    assert format_printf("%c", "A").data == b"A"
    assert format_printf("%c", 65).data == chr(65).encode()
    assert format_printf("%lc", 0xE9).data == chr(0xE9).encode("utf-8")
    padded = format_printf("%-3c|", "z")
    assert padded.data.startswith(b"z")
    assert padded.data.endswith(b"|")
    assert len(padded.data) == 4


def test_percent():
    assert format_printf("%%") == Formatted(b"%", 1)
    assert format_printf("%5%") == Formatted(b"%".rjust(5), 5)
    assert format_printf("%-5%|").data == b"%".ljust(5) + b"|"


def test_pointer():
    result = format_printf("%p", 0x1234)
    assert result.data == b"0x" + format(0x1234, "x").encode()
    assert result.length == len(result.data)


def test_n_stores_count():
    target = []
    result = format_printf("abc%n!", target)
    assert target == [len("abc")]
    assert result.data == b"abc!"


def test_m_prints_current_os_error():
    try:
        raise OSError(errno.ENOENT, "No such file")
    except OSError:
        result = format_printf("%m")
    assert result.data == b"No such file"
    assert result.length == len(b"No such file")


@pytest.mark.parametrize("value", [1.5, 2.25, 10.125, -3.5])
def test_float_default_precision(value):
    result = format_printf("%f", value)
    assert result.data == f"{value:f}".encode()
    assert result.length == len(result.data)


def test_float_precision():
    assert format_printf("%.3f", 10.125).data == f"{10.125:.3f}".encode()
    assert format_printf("%.1f", 2.25).data == b"2.3"
    assert format_printf("%.0f", 7.9).data == b"7"


def test_colors():
    result = format_printf("%{red}x%{eoc}")
    assert result.data == (RED + "x" + EOC).encode()
    assert result.length == 2 * COLOR_LENGTH + 1


def test_unknown_color_is_printed_verbatim():
    assert format_printf("%{foo}").data == b"{foo}"


def test_unknown_conversion():
    assert format_printf("%k") == Formatted(b"k", 1)
    assert format_printf("%3k") == Formatted(b"k".rjust(3), 3)


@pytest.mark.parametrize("fmt, expected", [("abc%", b"abc"), ("ab% ", b"ab"), ("ab% h", b"ab")])
def test_format_ending_in_percent_stops(fmt, expected):
    result = format_printf(fmt)
    assert result.data == expected
    assert result.length == len(expected)


def test_wildcard_width():
    assert format_printf("%*d", 5, 42) == format_printf("%5d", 42)
    assert format_printf("%*d|", -5, 42) == format_printf("%-5d|", 42)


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_printf("%d")
    with pytest.raises(ValueError):
        format_printf("%*d")


def test_wrong_argument_type_raises():
    with pytest.raises(TypeError):
        format_printf("%d", "x")
    with pytest.raises(TypeError):
        format_printf("%f", "x")


def test_printf_writes_to_stdout(capsys):
    length = printf("hi %d", 42)
    assert capsys.readouterr().out == "hi 42"
    assert length == len("hi 42")