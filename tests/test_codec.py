import pytest
from hypothesis import given
from hypothesis import strategies as st

import enumpress


@pytest.mark.parametrize(
    "size,expected",
    [(0, 0), (1, 1), (2, 257), (3, 65793), (4, 16843009)],
)
def test_interval_base_values(size: int, expected: int) -> None:
    assert enumpress.interval_base(size) == expected


@pytest.mark.parametrize("size", range(0, 40))
def test_interval_base_matches_recurrence(size: int) -> None:
    assert enumpress.interval_base(size + 1) == enumpress.interval_base(size) + 256**size


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"", 0),
        (b"\x00", 1),
        (b"\x01", 2),
        (b"\xff", 256),
        (b"\x00\x00", 257),
        (b"\x01\x00", 258),
        (b"\x00\x01", 513),
        (b"\xff\xff", 65792),
        (b"\x00\x00\x00", 65793),
    ],
)
def test_encode_known_values(data: bytes, expected: int) -> None:
    assert enumpress.encode_bytes_to_number(data) == expected
    assert enumpress.decode_number_to_bytes(expected) == data


def test_encode_is_little_endian() -> None:
    """The first byte is the least significant digit of the offset."""
    low = enumpress.encode_bytes_to_number(b"\x01\x00\x00")
    high = enumpress.encode_bytes_to_number(b"\x00\x00\x01")
    assert high - low == 65536 - 1


@pytest.mark.parametrize("size", [0, 1, 2, 3, 7, 16, 100, 1000])
def test_size_class_boundaries(size: int) -> None:
    """First and last string of each length sit exactly on the interval edges."""
    base = enumpress.interval_base(size)
    next_base = enumpress.interval_base(size + 1)

    assert enumpress.encode_bytes_to_number(b"\x00" * size) == base
    assert enumpress.encode_bytes_to_number(b"\xff" * size) == next_base - 1

    assert enumpress.decode_number_to_bytes(base) == b"\x00" * size
    assert enumpress.decode_number_to_bytes(next_base - 1) == b"\xff" * size
    assert enumpress.decode_number_to_bytes(next_base) == b"\x00" * (size + 1)

    assert enumpress.size_for_number(base) == size
    assert enumpress.size_for_number(next_base - 1) == size
    assert enumpress.size_for_number(next_base) == size + 1


def test_decode_pads_zero_offset_to_full_length() -> None:
    decoded = enumpress.decode_number_to_bytes(enumpress.interval_base(5))
    assert decoded == b"\x00\x00\x00\x00\x00"


def test_hi_newline_example() -> None:
    payload = bytes([0x48, 0x69, 0x0A])
    expected = enumpress.interval_base(3) + 0x48 + 0x69 * 256 + 0x0A * 65536
    assert expected == 748105
    assert enumpress.encode_bytes_to_number(payload) == expected


def test_describe_bytes_fields() -> None:
    encoded = enumpress.describe_bytes(b"\x02\x01")
    assert encoded.size == 2
    assert encoded.base == 257
    assert encoded.offset == 0x0102
    assert encoded.number == 257 + 0x0102
    assert enumpress.describe_number(encoded.number) == encoded


def test_decode_negative_number_rejected() -> None:
    with pytest.raises(enumpress.DomainError, match="negative"):
        enumpress.decode_number_to_bytes(-1)


def test_interval_base_negative_size_rejected() -> None:
    with pytest.raises(enumpress.DomainError):
        enumpress.interval_base(-1)


def test_domain_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        enumpress.size_for_number(-5)


@given(st.binary(max_size=512))
def test_bytes_round_trip(data: bytes) -> None:
    assert enumpress.decode_number_to_bytes(enumpress.encode_bytes_to_number(data)) == data


@given(st.integers(min_value=0, max_value=2**512))
def test_number_round_trip(number: int) -> None:
    assert enumpress.encode_bytes_to_number(enumpress.decode_number_to_bytes(number)) == number


def test_number_round_trip_exhaustive_small_range() -> None:
    for number in range(0, 70000):
        assert enumpress.encode_bytes_to_number(enumpress.decode_number_to_bytes(number)) == number


@given(st.binary(max_size=64), st.binary(max_size=64))
def test_encode_orders_by_length_then_value(a: bytes, b: bytes) -> None:
    key_a = (len(a), int.from_bytes(a, "little"))
    key_b = (len(b), int.from_bytes(b, "little"))
    num_a = enumpress.encode_bytes_to_number(a)
    num_b = enumpress.encode_bytes_to_number(b)
    assert (key_a < key_b) == (num_a < num_b)
    assert (key_a == key_b) == (num_a == num_b)
