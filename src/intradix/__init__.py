"""Top-level package for integer radix formatting utilities."""
from __future__ import annotations

from . import formatting
from .formatting import (
    DEFAULT_ALPHABET,
    FormatError,
    FormatOptions,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    format_binary,
    format_hex,
    format_radix,
    format_with_options,
    parse_radix,
)

__all__ = [
    "formatting",
    "DEFAULT_ALPHABET",
    "FormatError",
    "FormatOptions",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "format_binary",
    "format_hex",
    "format_radix",
    "format_with_options",
    "parse_radix",
]
