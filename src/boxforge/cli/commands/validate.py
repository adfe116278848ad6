"""`boxforge validate`: check a box configuration file without designing it."""

from pathlib import Path
from typing import Annotated, Any

import typer

from boxforge.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a box configuration file.

    Reports JSON syntax problems, schema violations and packaging
    advisories (panel orientation, slenderness, suspicious metric sizes).

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        boxforge validate my-box.json
    """
    typer.echo(f"Validating {config_file}...\n")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        _echo_block("Errors:", _load_error_lines(e), err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _report(result)
    raise typer.Exit(code=result.exit_code)


def _load_error_lines(error: ConfigError) -> list[str]:
    if error.error_type == "file_not_found":
        return [f"File not found: {error.path}"]
    if error.error_type == "json_parse":
        return ["Invalid JSON syntax"] + [
            f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
            f"{d.get('message', 'Unknown error')}"
            for d in error.details
        ]
    if error.error_type == "validation":
        lines: list[str] = []
        for detail in error.details:
            lines.extend(_issue(detail.get("path", "?"), detail.get("message"), detail))
        return lines
    return [error.message]


def _issue(path: str, message: Any, detail: dict[str, Any]) -> list[str]:
    lines = [f"{path}: {message}"]
    if detail.get("value") is not None:
        lines.append(f"  Value: {detail['value']!r}")
    return lines


def _echo_block(title: str, lines: list[str], err: bool = False) -> None:
    typer.echo(title, err=err)
    for line in lines:
        typer.echo(f"  {line}", err=err)
    typer.echo()


def _report(result: ValidationResult) -> None:
    if result.errors:
        _echo_block(
            "Errors:",
            [f"{e.path}: {e.message} (got: {e.value!r})" for e in result.errors],
            err=True,
        )
    if result.warnings:
        lines: list[str] = []
        for w in result.warnings:
            lines.append(f"{w.path}: {w.message}")
            if w.suggestion:
                lines.append(f"  Suggestion: {w.suggestion}")
        _echo_block("Warnings:", lines)

    n_errors, n_warnings = len(result.errors), len(result.warnings)
    if n_errors:
        typer.echo(
            f"Validation failed: {n_errors} error(s), {n_warnings} warning(s)",
            err=True,
        )
    elif n_warnings:
        typer.echo(f"Validation passed with {n_warnings} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")
