"""Public API for the integer radix formatter."""
from .domain.models import (
    FixedInt,
    FormatJob,
    FormatOptions,
    FormatResult,
    Int8,
    Int16,
    Int32,
    Int64,
    IntKind,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    fixed_int,
)
from .parser.job_loader import load_job, run_job
from .parsing import parse_radix
from .radix import format_radix, format_with_options
from .utils.constants import DEFAULT_ALPHABET
from .utils.errors import (
    AlphabetTooSmallError,
    AmbiguousSignError,
    DuplicateDigitError,
    FormatError,
    FormatInvariantError,
    IntradixError,
    InvalidDigitError,
    InvalidJobFile,
    JobError,
    RadixExceedsAlphabetError,
    RadixTooSmallError,
)
from .wrappers import format_binary, format_hex

__all__ = [
    "DEFAULT_ALPHABET",
    "format_binary",
    "format_hex",
    "format_radix",
    "format_with_options",
    "parse_radix",
    "load_job",
    "run_job",
    "FixedInt",
    "FormatJob",
    "FormatOptions",
    "FormatResult",
    "IntKind",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "fixed_int",
    "IntradixError",
    "FormatError",
    "RadixTooSmallError",
    "RadixExceedsAlphabetError",
    "AlphabetTooSmallError",
    "DuplicateDigitError",
    "InvalidDigitError",
    "AmbiguousSignError",
    "JobError",
    "InvalidJobFile",
    "FormatInvariantError",
]
