from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from intradix.formatting.domain.models import FormatJob, FormatOptions, IntKind
from intradix.formatting.parser.job_loader import load_job, parse_job, run_job
from intradix.formatting.utils.errors import (
    InvalidJobFile,
    JobFileNotFound,
    RadixExceedsAlphabetError,
    SchemaFileNotFound,
    SchemaValidationError,
    UnsupportedVersionError,
)


def _write_job(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "job.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_job_reads_all_fields(tmp_path: Path) -> None:
    path = _write_job(
        tmp_path,
        {
            "version": "1.0",
            "name": "bytes",
            "radix": 16,
            "digits": "0123456789ABCDEF",
            "prefix": "0x",
            "width": "int8",
            "values": [-128, 0, 127],
        },
    )

    job = load_job(path)

    assert job.name == "bytes"
    assert job.values == (-128, 0, 127)
    assert job.width is IntKind.INT8
    assert job.options == FormatOptions(radix=16, digits="0123456789ABCDEF", prefix="0x")


def test_load_job_applies_defaults(tmp_path: Path) -> None:
    job = load_job(_write_job(tmp_path, {"values": [1, 2]}))

    assert job.options == FormatOptions()
    assert job.width is None
    assert job.name is None


def test_load_job_logs_progress(tmp_path: Path, caplog) -> None:
    path = _write_job(tmp_path, {"name": "demo", "values": [5]})

    with caplog.at_level(logging.INFO, logger="intradix"):
        load_job(path)

    assert "schema validation: PASSED" in caplog.text
    assert "job demo: 1 value(s)" in caplog.text


def test_missing_job_file(tmp_path: Path) -> None:
    with pytest.raises(JobFileNotFound):
        load_job(tmp_path / "absent.json")


def test_missing_schema_file(tmp_path: Path) -> None:
    path = _write_job(tmp_path, {"values": [1]})

    with pytest.raises(SchemaFileNotFound):
        load_job(path, tmp_path / "absent_schema.json")


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"values": ["1"]},
        {"values": [1], "radix": "16"},
        {"values": [1], "width": "int128"},
        {"values": [1], "unexpected": True},
    ],
)
def test_schema_violations_are_reported(tmp_path: Path, payload: dict, caplog) -> None:
    path = _write_job(tmp_path, payload)

    with caplog.at_level(logging.ERROR, logger="intradix"):
        with pytest.raises(SchemaValidationError):
            load_job(path)

    assert "[SCH] schema validation: FAILED" in caplog.text


def test_unsupported_version_is_rejected(tmp_path: Path) -> None:
    path = _write_job(tmp_path, {"version": "2.0", "values": [1]})

    with pytest.raises(UnsupportedVersionError):
        load_job(path)


def test_run_job_formats_each_value_with_width() -> None:
    job = parse_job({"radix": 16, "prefix": "0x", "width": "int8", "values": [-128, 0, 127]})

    results = run_job(job)

    assert [r.value for r in results] == [-128, 0, 127]
    assert [r.text for r in results] == ["-0x80", "0x0", "0x7f"]


def test_run_job_rejects_values_outside_width() -> None:
    job = FormatJob(values=(300,), width=IntKind.UINT8)

    with pytest.raises(OverflowError):
        run_job(job)


def test_run_job_propagates_format_errors() -> None:
    job = FormatJob(values=(1,), options=FormatOptions(radix=11, digits="0123456789"))

    with pytest.raises(RadixExceedsAlphabetError):
        run_job(job)


def test_malformed_json_raises_invalid_job_file(tmp_path: Path, caplog) -> None:
    path = tmp_path / "job.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="intradix"):
        with pytest.raises(InvalidJobFile, match="line 1, column 2"):
            load_job(path)

    assert "is not valid JSON" in caplog.text


def test_schema_errors_name_the_offending_field(tmp_path: Path) -> None:
    path = _write_job(tmp_path, {"values": [1, "2"]})

    with pytest.raises(SchemaValidationError, match=r"values\[1\]"):
        load_job(path)


def test_job_path_must_be_a_file(tmp_path: Path) -> None:
    with pytest.raises(JobFileNotFound):
        load_job(tmp_path)
