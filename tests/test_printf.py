import io

import pytest

from sigtalk.printf import cformat, printf


def test_plain_text_passes_through():
    assert cformat("hello world") == "hello world"


def test_percent_escape():
    assert cformat("100%%") == "100%"


def test_string_conversion():
    assert cformat("Server PID: %s!", "abc") == "Server PID: abc!"


def test_null_string():
    assert cformat("%s", None) == "(null)"


def test_nil_pointer():
    assert cformat("%p", None) == "(nil)"
    assert cformat("%p", 0) == "(nil)"


def test_pointer_round_trip():
    result = cformat("%p", 255)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 255
    assert result == result.lower()


@pytest.mark.parametrize("number", [0, 7, -7, 42, 123456, -98765, 2**31 - 1])
def test_signed_round_trip(number):
    assert cformat("%d", number) == str(number)
    assert cformat("%i", number) == str(number)


def test_int_min():
    assert cformat("%d", -(2**31)) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert int(cformat("%d", 2**31)) == -(2**31)


@pytest.mark.parametrize("number", [0, 1, -1, 2**31, 2**32 + 5])
def test_unsigned_wraps(number):
    result = int(cformat("%u", number))
    assert 0 <= result < 2**32
    assert result % 2**32 == number % 2**32


@pytest.mark.parametrize("number", [0, 10, 255, 4096, -1, 0xDEADBEEF])
def test_hex_round_trip(number):
    lower = cformat("%x", number)
    upper = cformat("%X", number)
    assert int(lower, 16) == number % 2**32
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_char_from_int_and_str():
    assert cformat("%c", ord("A")) == "A"
    assert cformat("%c%c", "o", "k") == "ok"


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert cformat("a%qb%s", "x") == "abx"


def test_trailing_percent_is_dropped():
    assert cformat("end%") == "end"


def test_format_stops_at_nul():
    assert cformat("abc\0def") == "abc"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        cformat("%d")


def test_wrong_type_raises():
    with pytest.raises(TypeError):
        cformat("%d", "12")
    with pytest.raises(TypeError):
        cformat("%s", 12)


def test_surplus_arguments_ignored():
    assert cformat("%s", "one", "two") == "one"


def test_printf_to_stream_returns_count():
    stream = io.StringIO()
    count = printf("Server PID: %d\n", 42, file=stream)
    written = stream.getvalue()
    assert written == cformat("Server PID: %d\n", 42)
    assert count == len(written)


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s-%u", "msg", 9)
    out = capsys.readouterr().out
    assert out == "msg-9"
    assert count == len(out)