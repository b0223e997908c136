"""Fixed-radix shortcuts built on the unchecked renderer."""
from __future__ import annotations

from .coercion import coerce_integral
from .radix import render_unchecked, validate_radix
from .utils.constants import (
    BINARY_PREFIX,
    BINARY_RADIX,
    DEFAULT_ALPHABET,
    HEX_PREFIX,
    HEX_RADIX,
)
from .utils.errors import FormatError, FormatInvariantError


def _checked_constant(radix: int, digits: str) -> int:
    try:
        validate_radix(radix, digits)
    except FormatError as exc:
        raise FormatInvariantError(f"built-in radix {radix} is invalid: {exc}") from exc
    return radix


_BINARY = _checked_constant(BINARY_RADIX, DEFAULT_ALPHABET)
_HEX = _checked_constant(HEX_RADIX, DEFAULT_ALPHABET)


def format_binary(value: object, prefix: str = BINARY_PREFIX) -> str:
    """Format ``value`` in base 2, e.g. ``format_binary(-123) == "-0b1111011"``."""

    return render_unchecked(coerce_integral(value), _BINARY, DEFAULT_ALPHABET, prefix)


def format_hex(value: object, prefix: str = HEX_PREFIX) -> str:
    """Format ``value`` in base 16 with lowercase digits, e.g. ``format_hex(255) == "0xff"``."""

    return render_unchecked(coerce_integral(value), _HEX, DEFAULT_ALPHABET, prefix)
