"""Domain models for fixed-width integers and formatting configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple

from ..utils.constants import DEFAULT_ALPHABET, DEFAULT_RADIX


class IntKind(str, Enum):
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def bits(self) -> int:
        return int(self.value.rsplit("int", 1)[1])

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    @classmethod
    def from_string(cls, token: str) -> "IntKind":
        normalized = token.strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            choices = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Unsupported integer width {token!r} (expected one of: {choices})") from exc


@dataclass(frozen=True)
class FixedInt:
    """An integer tagged with the machine width it is meant to occupy.

    Instances are created through the concrete subclasses (``Int8(-128)``,
    ``UInt64(2**64 - 1)``); the constructor rejects values that the width
    cannot represent with :class:`OverflowError`, the same way
    :meth:`int.to_bytes` does.
    """

    value: int
    kind: ClassVar[IntKind] = IntKind.INT64

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} requires an int (got {type(self.value).__name__})")
        if not self.kind.contains(self.value):
            raise OverflowError(
                f"{self.value} does not fit in {self.kind.value} "
                f"[{self.kind.min_value}, {self.kind.max_value}]"
            )

    def __index__(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value


class Int8(FixedInt):
    kind = IntKind.INT8


class Int16(FixedInt):
    kind = IntKind.INT16


class Int32(FixedInt):
    kind = IntKind.INT32


class Int64(FixedInt):
    kind = IntKind.INT64


class UInt8(FixedInt):
    kind = IntKind.UINT8


class UInt16(FixedInt):
    kind = IntKind.UINT16


class UInt32(FixedInt):
    kind = IntKind.UINT32


class UInt64(FixedInt):
    kind = IntKind.UINT64


FIXED_INT_TYPES: Dict[IntKind, type] = {
    IntKind.INT8: Int8,
    IntKind.INT16: Int16,
    IntKind.INT32: Int32,
    IntKind.INT64: Int64,
    IntKind.UINT8: UInt8,
    IntKind.UINT16: UInt16,
    IntKind.UINT32: UInt32,
    IntKind.UINT64: UInt64,
}


def fixed_int(value: int, kind: IntKind) -> FixedInt:
    """Wrap ``value`` in the fixed-width type registered for ``kind``."""

    return FIXED_INT_TYPES[kind](value)


@dataclass(frozen=True)
class FormatOptions:
    """One radix formatting configuration.

    Options are not validated on construction; the formatter validates them
    on every call so that an invalid configuration surfaces as a
    :class:`~intradix.formatting.utils.errors.FormatError` at the point of use.
    """

    radix: int = DEFAULT_RADIX
    digits: str = DEFAULT_ALPHABET
    prefix: str = ""


@dataclass(frozen=True)
class FormatJob:
    """A batch of values formatted with a single set of options."""

    values: Tuple[int, ...]
    options: FormatOptions = field(default_factory=FormatOptions)
    name: Optional[str] = None
    width: Optional[IntKind] = None


@dataclass(frozen=True)
class FormatResult:
    value: int
    text: str


def results_as_lines(results: List[FormatResult]) -> List[str]:
    return [result.text for result in results]
