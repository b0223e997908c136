"""Text to integer conversion, the inverse of :func:`format_radix`."""
from __future__ import annotations

from collections import Counter
from typing import Dict

from .radix import validate_radix
from .utils.constants import DEFAULT_ALPHABET, DEFAULT_RADIX, INT64_MIN, UINT64_MAX
from .utils.errors import AmbiguousSignError, DuplicateDigitError, InvalidDigitError

SIGN = "-"


def _digit_values(radix: int, digits: str, prefix: str) -> Dict[str, int]:
    lookup = {char: index for index, char in enumerate(digits)}
    if len(lookup) != len(digits):
        duplicates = sorted(char for char, count in Counter(digits).items() if count > 1)
        raise DuplicateDigitError(
            f"duplicate characters in alphabet: {''.join(duplicates)!r}",
            radix=radix,
            alphabet_size=len(digits),
        )
    if SIGN in digits or SIGN in prefix:
        where = "alphabet" if SIGN in digits else "prefix"
        raise AmbiguousSignError(
            f"{SIGN!r} in the {where} cannot be told apart from the sign",
            radix=radix,
            alphabet_size=len(digits),
        )
    return {char: index for char, index in lookup.items() if index < radix}


def parse_radix(
    text: str,
    radix: int = DEFAULT_RADIX,
    digits: str = DEFAULT_ALPHABET,
    prefix: str = "",
) -> int:
    """Parse ``[-]<prefix><digits>`` produced by :func:`format_radix` back into an int."""

    validate_radix(radix, digits)
    values = _digit_values(radix, digits, prefix)

    negative = text.startswith(SIGN)
    body = text[1:] if negative else text
    if not body.startswith(prefix):
        raise InvalidDigitError(f"missing prefix {prefix!r} in {text!r}", radix=radix, alphabet_size=len(digits))
    body = body[len(prefix):]
    if not body:
        raise InvalidDigitError(f"no digits in {text!r}", radix=radix, alphabet_size=len(digits))

    # Accumulate on the sign's own side so -2**63 never passes through +2**63.
    sign = -1 if negative else 1
    acc = 0
    for char in body:
        digit = values.get(char)
        if digit is None:
            raise InvalidDigitError(
                f"invalid digit {char!r} for radix {radix} in {text!r}",
                radix=radix,
                alphabet_size=len(digits),
            )
        acc = acc * radix + sign * digit
        if not INT64_MIN <= acc <= UINT64_MAX:
            raise OverflowError(f"{text!r} does not fit in a 64-bit integer")
    return acc
