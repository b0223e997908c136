"""Shared constants for the radix formatter."""
from __future__ import annotations

import string
from pathlib import Path

DEFAULT_ALPHABET = string.digits + string.ascii_lowercase
DEFAULT_RADIX = 10

# One slot per digit of a 64-bit value in radix 2. Sign and prefix are not stored here.
SCRATCH_CAPACITY = 64

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT64_MAX = (1 << 64) - 1

BINARY_PREFIX = "0b"
HEX_PREFIX = "0x"
BINARY_RADIX = 2
HEX_RADIX = 16

LOGGER_NAME = "intradix"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

JOB_SCHEMA_PATH = Path(__file__).resolve().parents[1] / "data" / "job_schema.json"
SUPPORTED_JOB_VERSION_PREFIX = "1."
