import pytest

from fdfkit.printf import format_printf, printf


def test_plain_text_passes_through():
    assert format_printf("hello world") == "hello world"


def test_double_percent_prints_percent():
    assert format_printf("100%%") == "100%"


@pytest.mark.parametrize("spec", ["d", "i"])
@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_signed_round_trip(spec, n):
    assert int(format_printf("%" + spec, n)) == n


def test_int_min():
    assert format_printf("%d", -2147483648) == "-2147483648"


def test_signed_wraps_to_32_bits():
    assert format_printf("%d", 2**32 + 5) == format_printf("%d", 5)


@pytest.mark.parametrize("n", [0, 9, 10, 4000000000])
def test_unsigned_round_trip(n):
    assert int(format_printf("%u", n)) == n


def test_unsigned_of_negative_wraps():
    assert format_printf("%u", -1) == format_printf("%u", 2**32 - 1)


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 48879, 2**32 - 1])
def test_hex_round_trip(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert int(lower, 16) == n
    assert int(upper, 16) == n
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert upper == lower.upper()


def test_hex_of_negative_is_twos_complement():
    assert format_printf("%x", -1) == format_printf("%x", 2**32 - 1)


def test_string_and_null_string():
    assert format_printf("[%s]", "abc") == "[abc]"
    assert format_printf("%s", None) == "(null)"


def test_char_from_code_and_string():
    assert format_printf("%c", ord("A")) == "A"
    assert format_printf("%c%c", "o", "k") == "ok"


def test_pointer_null():
    assert format_printf("%p", 0) == "(nil)"
    assert format_printf("%p", None) == "(nil)"


def test_pointer_value():
    text = format_printf("%p", 0xDEADBEEF)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 0xDEADBEEF


def test_unknown_conversion_prints_nothing_and_keeps_argument():
    assert format_printf("a%qb%d", 3) == "ab3"


def test_trailing_percent_is_dropped():
    assert format_printf("abc%") == "abc"


def test_mixed_format():
    assert format_printf("%s=%d (%c)", "x", -4, "y") == "x=-4 (y)"


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_printf(None)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_string_conversion_rejects_non_string():
    with pytest.raises(TypeError):
        format_printf("%s", 12)


def test_printf_writes_stdout_and_counts(capsys):
    count = printf("%s-%d%%", "abc", 42)
    out = capsys.readouterr().out
    assert out == "abc-42%"
    assert count == len(out)