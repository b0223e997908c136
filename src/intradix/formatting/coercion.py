"""Call-boundary checks that turn caller values into plain 64-bit integers."""
from __future__ import annotations

import operator

from .domain.models import FixedInt, Int8, Int64
from .utils.constants import INT64_MIN, UINT64_MAX


def coerce_integral(value: object) -> int:
    """Return ``value`` as a plain ``int`` inside the 64-bit register range.

    * fixed-width wrappers are unwrapped (their constructor already checked the range);
    * ``bool`` is widened to an 8-bit integer;
    * ``int`` must lie within ``[-2**63, 2**64 - 1]``;
    * any other index-like object is converted to the native signed width (``Int64``).

    Non-integral values raise :class:`TypeError`; out-of-range values raise
    :class:`OverflowError`.
    """

    if isinstance(value, FixedInt):
        return value.value
    if isinstance(value, bool):
        return Int8(int(value)).value
    if isinstance(value, int):
        if not INT64_MIN <= value <= UINT64_MAX:
            raise OverflowError(f"{value} does not fit in a 64-bit integer")
        return int(value)
    try:
        index = operator.index(value)
    except TypeError as exc:
        raise TypeError(f"cannot format non-integral value of type {type(value).__name__}") from exc
    return Int64(index).value
