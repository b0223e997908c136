"""Integer to text conversion in an arbitrary radix."""
from __future__ import annotations

from typing import List

from .coercion import coerce_integral
from .domain.models import FormatOptions
from .utils.constants import DEFAULT_ALPHABET, DEFAULT_RADIX, SCRATCH_CAPACITY
from .utils.errors import (
    AlphabetTooSmallError,
    RadixExceedsAlphabetError,
    RadixTooSmallError,
    ScratchBufferOverflowError,
)
from .utils.logging import get_logger

LOG = get_logger()


def validate_radix(radix: int, digits: str) -> None:
    """Raise a :class:`FormatError` subclass unless ``digits`` can express ``radix``."""

    alphabet_size = len(digits)
    if radix < 2:
        LOG.debug("rejected radix=%d: radix too small", radix)
        raise RadixTooSmallError("radix too small", radix=radix, alphabet_size=alphabet_size)
    if alphabet_size < 2:
        LOG.debug("rejected alphabet of size %d: alphabet too small", alphabet_size)
        raise AlphabetTooSmallError("alphabet too small", radix=radix, alphabet_size=alphabet_size)
    if radix > alphabet_size:
        LOG.debug("rejected radix=%d for alphabet of size %d", radix, alphabet_size)
        raise RadixExceedsAlphabetError(
            "radix exceeds alphabet size", radix=radix, alphabet_size=alphabet_size
        )


def _fill_digits(value: int, radix: int, digits: str) -> str:
    scratch: List[str] = [""] * SCRATCH_CAPACITY
    pos = SCRATCH_CAPACITY
    remaining = value
    while remaining != 0:
        if pos == 0:
            raise ScratchBufferOverflowError(
                f"{value} needs more than {SCRATCH_CAPACITY} digits in radix {radix}"
            )
        if remaining < 0:
            # Stay on the negative side: -2**63 has no positive counterpart in 64 bits.
            # ``% -radix`` lands in (-radix, 0], the truncating remainder for a negative dividend.
            rem = remaining % -radix
            remaining = (remaining - rem) // radix
            digit = -rem
        else:
            remaining, digit = divmod(remaining, radix)
        pos -= 1
        scratch[pos] = digits[digit]
    return "".join(scratch[pos:])


def render_unchecked(value: int, radix: int, digits: str, prefix: str) -> str:
    """Render ``value`` without validating ``radix``/``digits``.

    Only for callers whose arguments are already known to be valid. ``value``
    must be a plain ``int`` within the 64-bit range.
    """

    sign = "-" if value < 0 else ""
    if value == 0:
        return sign + prefix + digits[0]
    return sign + prefix + _fill_digits(value, radix, digits)


def format_radix(
    value: object,
    radix: int = DEFAULT_RADIX,
    digits: str = DEFAULT_ALPHABET,
    prefix: str = "",
) -> str:
    """Format an integer as text in ``radix`` using ``digits`` as the alphabet.

    The output is an optional ``"-"``, then ``prefix``, then the digits most
    significant first. Zero renders as ``digits[0]``.

    The value is checked before the radix. Radix problems are reported in the
    order ``radix < 2``, ``len(digits) < 2``, ``radix > len(digits)``, so
    ``format_radix(1, 2, "0")`` raises :class:`AlphabetTooSmallError`.

    Raises:
        TypeError: ``value`` is not integral.
        OverflowError: ``value`` does not fit in 64 bits.
        RadixTooSmallError: ``radix < 2``.
        AlphabetTooSmallError: ``len(digits) < 2``.
        RadixExceedsAlphabetError: ``radix > len(digits)``.
    """

    number = coerce_integral(value)
    validate_radix(radix, digits)
    return render_unchecked(number, radix, digits, prefix)


def format_with_options(value: object, options: FormatOptions) -> str:
    return format_radix(value, radix=options.radix, digits=options.digits, prefix=options.prefix)
