"""Load and validate JSON format jobs."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from jsonschema import Draft7Validator  # type: ignore

from ..domain.models import FormatJob, FormatOptions, FormatResult, IntKind, fixed_int
from ..radix import format_with_options
from ..utils.constants import (
    DEFAULT_ALPHABET,
    DEFAULT_RADIX,
    JOB_SCHEMA_PATH,
    SUPPORTED_JOB_VERSION_PREFIX,
)
from ..utils.errors import (
    InvalidJobFile,
    JobFileNotFound,
    SchemaFileNotFound,
    SchemaValidationError,
    UnsupportedVersionError,
)
from ..utils.logging import get_logger

LOG = get_logger()


def load_job_json(job_path: Path) -> Dict:
    """Read a job document, turning unreadable JSON into :class:`InvalidJobFile`."""

    if not job_path.is_file():
        raise JobFileNotFound(f"job file not found: {job_path}")
    text = job_path.read_text(encoding="utf-8")
    try:
        job_json = json.loads(text)
    except json.JSONDecodeError as exc:
        LOG.error("job file %s is not valid JSON (line %d, column %d)", job_path, exc.lineno, exc.colno)
        raise InvalidJobFile(f"{job_path}: invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}") from exc
    LOG.info("loaded job: %s (%d byte(s))", job_path, len(text))
    return job_json


def load_schema_file(schema_path: Path) -> Dict:
    if not schema_path.exists():
        raise SchemaFileNotFound(f"Schema not found: {schema_path}")
    with schema_path.open("r", encoding="utf-8") as f:
        schema_json = json.load(f)
    LOG.info("loaded Schema: %s", schema_path)
    return schema_json


def _job_field(path) -> str:
    """Render a jsonschema error path as ``values[2]``; the document itself is ``<job>``."""

    field_name = ""
    for token in path:
        field_name += f"[{token}]" if isinstance(token, int) else f".{token}"
    return field_name.lstrip(".") or "<job>"


def validate_json_schema(job_json: Dict, schema_json: Dict) -> None:
    problems = [
        f"{_job_field(err.path)}: {err.message}"
        for err in sorted(Draft7Validator(schema_json).iter_errors(job_json), key=lambda e: list(e.path))
    ]
    if not problems:
        LOG.info("schema validation: PASSED")
        return
    LOG.error("[SCH] schema validation: FAILED (count=%d)", len(problems))
    for problem in problems:
        LOG.error("[SCH] %s", problem)
    raise SchemaValidationError(f"schema validation failed with {len(problems)} error(s); first: {problems[0]}")


def ensure_supported_version(job_json: Dict) -> None:
    if "version" not in job_json:
        return
    version = str(job_json["version"])
    if not version.startswith(SUPPORTED_JOB_VERSION_PREFIX):
        raise UnsupportedVersionError(
            f'unsupported "version": {version} (expected {SUPPORTED_JOB_VERSION_PREFIX}*)'
        )


def parse_job(job_json: Dict) -> FormatJob:
    options = FormatOptions(
        radix=int(job_json.get("radix", DEFAULT_RADIX)),
        digits=str(job_json.get("digits", DEFAULT_ALPHABET)),
        prefix=str(job_json.get("prefix", "")),
    )
    width = IntKind.from_string(job_json["width"]) if "width" in job_json else None
    job = FormatJob(
        values=tuple(int(v) for v in job_json["values"]),
        options=options,
        name=job_json.get("name"),
        width=width,
    )
    LOG.info(
        "job %s: %d value(s), radix=%d, alphabet=%d char(s), width=%s",
        job.name or "<unnamed>",
        len(job.values),
        options.radix,
        len(options.digits),
        width.value if width else "native",
    )
    return job


def load_job(job_path: Path, schema_path: Path = JOB_SCHEMA_PATH) -> FormatJob:
    job_json = load_job_json(job_path)
    schema_json = load_schema_file(schema_path)
    validate_json_schema(job_json, schema_json)
    ensure_supported_version(job_json)
    return parse_job(job_json)


def run_job(job: FormatJob) -> List[FormatResult]:
    """Format every value of ``job``; the first failure aborts the whole job."""

    results: List[FormatResult] = []
    for value in job.values:
        subject = fixed_int(value, job.width) if job.width is not None else value
        results.append(FormatResult(value=value, text=format_with_options(subject, job.options)))
    LOG.debug("job %s: formatted %d value(s)", job.name or "<unnamed>", len(results))
    return results
