"""Tests for the binary and hexadecimal shortcuts."""
from __future__ import annotations

import pytest

from intradix.formatting.domain.models import Int8, Int16, UInt8, UInt64
from intradix.formatting.wrappers import format_binary, format_hex


class _Index:
    def __init__(self, value: int) -> None:
        self._value = value

    def __index__(self) -> int:
        return self._value


def test_format_binary_examples() -> None:
    assert format_binary(123) == "0b1111011"
    assert format_binary(-123) == "-0b1111011"
    assert format_binary(0) == "0b0"


def test_format_hex_examples() -> None:
    assert format_hex(255) == "0xff"
    assert format_hex(-255) == "-0xff"
    assert format_hex(UInt8(255)) == "0xff"


def test_format_hex_int8_minimum_does_not_overflow() -> None:
    assert format_hex(Int8(-128)) == "-0x80"
    assert format_binary(Int8(-128)) == "-0b10000000"


def test_prefix_can_be_overridden() -> None:
    assert format_hex(255, prefix="") == "ff"
    assert format_hex(-1, prefix="") == "-1"
    assert format_binary(5, prefix="%") == "%101"


def test_booleans_are_widened() -> None:
    assert format_hex(True) == "0x1"
    assert format_hex(False) == "0x0"
    assert format_binary(True) == "0b1"


def test_index_like_values_are_formatted_as_native_ints() -> None:
    assert format_hex(_Index(4096)) == "0x1000"
    assert format_binary(_Index(-2)) == "-0b10"


def test_index_like_values_must_fit_native_signed_width() -> None:
    with pytest.raises(OverflowError):
        format_hex(_Index(1 << 63))


def test_unsigned_64_bit_maximum() -> None:
    assert format_hex(UInt64((1 << 64) - 1)) == "0x" + "f" * 16
    assert format_hex((1 << 64) - 1) == "0x" + "f" * 16


def test_wrappers_agree_across_widths() -> None:
    assert format_hex(Int16(-1)) == format_hex(Int8(-1)) == "-0x1"


@pytest.mark.parametrize("value", [1.0, "ff", None, b"\x01"])
def test_wrappers_reject_non_integral_values(value: object) -> None:
    with pytest.raises(TypeError):
        format_hex(value)
    with pytest.raises(TypeError):
        format_binary(value)
