"""Reading cutting jobs from JSON.

Every way a job can fail to load, from a missing file to a negative piece
length, surfaces as a ConfigError whose ``error_type`` names the stage
that failed.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cutstock.application.config.schema import CuttingJobConfig


class ConfigError(Exception):
    """A job could not be loaded.

    Attributes:
        message: Summary suitable for printing.
        error_type: One of file_not_found, permission_denied, file_read_error,
            json_parse or validation.
        path: Job file, when loading from disk.
        details: Per-problem dicts. JSON syntax errors carry ``line`` and
            ``column``; schema errors carry ``path``, ``message`` and ``value``.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _field_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location, e.g. ``items[0].length``."""
    text = "".join(f"[{part}]" if isinstance(part, int) else f".{part}" for part in loc)
    return text.lstrip(".")


def _schema_problems(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _field_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _build_job(data: Any, path: Path | None = None) -> CuttingJobConfig:
    try:
        return CuttingJobConfig.model_validate(data)
    except PydanticValidationError as e:
        problems = _schema_problems(e)
        lines = ["Job validation failed:"]
        for problem in problems:
            line = f"  - {problem['path']}: {problem['message']}"
            if problem["value"] is not None:
                line += f" (got: {problem['value']!r})"
            lines.append(line)
        raise ConfigError(
            message="\n".join(lines),
            error_type="validation",
            path=path,
            details=problems,
        )


def _read_job_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            f"Job file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading job file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Error reading job file {path}: {e}", error_type="file_read_error", path=path
        )


def load_config(path: Path) -> CuttingJobConfig:
    """Load and validate a cutting job from a JSON file.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    text = _read_job_text(path)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in job file {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )
    return _build_job(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CuttingJobConfig:
    """Validate an already-parsed job, e.g. a REST request body.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _build_job(data)
