import io

import pytest

from solong.format import c_format, c_printf


def test_null_string():
    assert c_format("%s", None) == "(null)"


def test_plain_string():
    assert c_format("hello %s!", "world") == "hello world!"


def test_null_pointer():
    assert c_format("%p", 0) == "(nil)"


@pytest.mark.parametrize("value", [1, 16, 255, 0xDEADBEEF, 2**40 + 7])
def test_pointer_round_trip(value):
    out = c_format("%p", value)
    assert out.startswith("0x")
    assert int(out[2:], 16) == value


def test_int_min():
    assert c_format("%d", -2147483648) == "-2147483648"


@pytest.mark.parametrize("value", [0, 7, -7, 10, 123456, -2147483647, 2147483647])
def test_decimal_round_trip(value):
    assert int(c_format("%d", value)) == value
    assert c_format("%i", value) == c_format("%d", value)


def test_decimal_wraps_to_32_bits():
    assert c_format("%d", 2**32 + 5) == c_format("%d", 5)


def test_unsigned_of_negative_one():
    assert int(c_format("%u", -1)) == 0xFFFFFFFF


@pytest.mark.parametrize("value", [0, 1, 9, 10, 255, 4096, 0xCAFEBABE])
def test_hex_round_trip(value):
    lower = c_format("%x", value)
    upper = c_format("%X", value)
    assert int(lower, 16) == value
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_char_from_int_and_str():
    assert c_format("%c", ord("A")) == "A"
    assert c_format("%c%c", "o", "k") == "ok"


def test_char_rejects_long_string():
    with pytest.raises(TypeError):
        c_format("%c", "ab")


def test_percent_literal():
    assert c_format("100%%") == "100%"


def test_unknown_conversion_kept():
    assert c_format("a%qb") == "a%qb"


def test_trailing_percent_kept():
    assert c_format("abc%") == "abc%"


def test_missing_argument():
    with pytest.raises(TypeError):
        c_format("%d %d", 1)


def test_none_template():
    with pytest.raises(TypeError):
        c_format(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = c_printf("%d steps \n", 3, stream=stream)
    assert stream.getvalue() == c_format("%d steps \n", 3)
    assert count == len(stream.getvalue())


def test_printf_null_string_count():
    stream = io.StringIO()
    assert c_printf("%s", None, stream=stream) == len("(null)")