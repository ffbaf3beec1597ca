import pytest

from enumpress.formatting import DecimalText, format_decimal, parse_decimal


@pytest.mark.parametrize("value", [0, 7, 999, 10**999, 10**1000, 10**1000 - 1, 10**1000 + 1])
def test_format_decimal_matches_str_for_small_values(value: int) -> None:
    assert format_decimal(value) == str(value)
    assert format_decimal(-value) == str(-value)


def test_format_decimal_past_digit_cap(default_digit_limit) -> None:
    assert format_decimal(10**5000) == "1" + "0" * 5000
    assert format_decimal(10**5000 + 42) == "1" + "0" * 4997 + "042"


def test_parse_decimal_past_digit_cap(default_digit_limit) -> None:
    assert parse_decimal("1" + "0" * 5000) == 10**5000
    assert parse_decimal("0042") == 42


def test_decimal_text_renders_lazily(default_digit_limit) -> None:
    text = DecimalText(7 * 10**6000)
    assert str(text) == "7" + "0" * 6000
    assert f"{DecimalText(12)}" == "12"
