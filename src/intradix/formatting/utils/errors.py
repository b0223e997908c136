"""Exception hierarchy shared across the formatter."""
from __future__ import annotations

from typing import Optional


class IntradixError(Exception):
    """Base class for all intradix failures."""


class FormatError(IntradixError):
    """Invalid radix/alphabet combination passed to a fallible entry point."""

    def __init__(self, message: str, *, radix: Optional[int] = None, alphabet_size: Optional[int] = None) -> None:
        super().__init__(message)
        self.radix = radix
        self.alphabet_size = alphabet_size


class RadixTooSmallError(FormatError):
    pass


class RadixExceedsAlphabetError(FormatError):
    pass


class AlphabetTooSmallError(FormatError):
    pass


class DuplicateDigitError(FormatError):
    pass


class InvalidDigitError(FormatError):
    pass


class AmbiguousSignError(FormatError):
    pass


class JobError(IntradixError):
    """Base class for job file failures."""


class JobFileNotFound(JobError):
    pass


class InvalidJobFile(JobError):
    pass


class SchemaFileNotFound(JobError):
    pass


class SchemaValidationError(JobError):
    pass


class UnsupportedVersionError(JobError):
    pass


class FormatInvariantError(IntradixError, AssertionError):
    """Raised when the formatter's own invariants are broken.

    Callers cannot avoid these by passing different arguments, so they are not
    part of :class:`FormatError`.
    """


class ScratchBufferOverflowError(FormatInvariantError):
    pass
