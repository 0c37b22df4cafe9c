"""The ``cutstock validate`` command."""

from pathlib import Path
from typing import Annotated, Any, Iterable

import typer

from cutstock.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Check a job file without running the optimizer.

    Exit codes: 0 when the job is clean, 1 when it has errors (including
    pieces longer than the stock), 2 when it only has warnings.

    Example:
        cutstock validate job.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report(result)
    raise typer.Exit(code=result.exit_code)


def _echo_lines(lines: Iterable[str], err: bool = False) -> None:
    for line in lines:
        typer.echo(line, err=err)


def _field_lines(path: str, message: str, value: Any = None) -> list[str]:
    lines = [f"  {path}: {message}"]
    if value is not None:
        lines.append(f"    Value: {value!r}")
    return lines


def display_load_error(error: ConfigError) -> None:
    """Print why a job file could not be loaded to stderr."""
    lines = ["Errors:"]
    if error.error_type == "file_not_found":
        lines.append(f"  File not found: {error.path}")
    elif error.error_type == "json_parse":
        lines.append("  Invalid JSON syntax")
        lines.extend(
            f"    Line {d['line']}, Column {d['column']}: {d['message']}"
            for d in error.details
        )
    elif error.error_type == "validation":
        for d in error.details:
            lines.extend(_field_lines(d["path"], d["message"], d.get("value")))
    else:
        lines.append(f"  {error.message}")
    _echo_lines(lines, err=True)
    typer.echo()
    typer.echo("Validation failed.", err=True)


def _report(result: ValidationResult) -> None:
    if result.errors:
        lines = ["Errors:"]
        for e in result.errors:
            lines.extend(_field_lines(e.path, e.message, e.value))
        _echo_lines(lines, err=True)
        typer.echo()

    if result.warnings:
        lines = ["Warnings:"]
        for w in result.warnings:
            lines.append(f"  {w.path}: {w.message}")
            if w.suggestion:
                lines.append(f"    Suggestion: {w.suggestion}")
        _echo_lines(lines)
        typer.echo()

    counts = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    if result.errors:
        typer.echo(f"Validation failed: {counts}", err=True)
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Job is valid.")
