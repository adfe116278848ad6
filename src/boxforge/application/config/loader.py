"""Configuration file loading.

Reads JSON box configurations and turns file system, JSON syntax and
schema problems into a single ConfigError type that the CLI and API can
report uniformly.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from boxforge.application.config.schema import BoxConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration cannot be loaded or validated.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Path to the configuration file (if applicable)
        details: Per-problem dictionaries (line/column for JSON errors,
            path/message/value for schema errors)
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


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic location tuple as a dotted path.

    Examples:
        >>> _format_json_path(("box", "width"))
        'box.width'
        >>> _format_json_path(("items", 0, "flute"))
        'items[0].flute'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path = f"{path}.{segment}" if path else str(segment)
    return path


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        value = detail.get("value")
        suffix = f" (got: {value!r})" if value is not None else ""
        lines.append(f"  - {detail['path']}: {detail['message']}{suffix}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> BoxConfiguration:
    try:
        return BoxConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        logger.warning(f"Configuration failed validation with {len(details)} error(s)")
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> BoxConfiguration:
    """Load and validate a box configuration from a JSON file.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or does not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Configuration file does not exist: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Cannot read {path}: permission denied",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Cannot read {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in config file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    logger.debug(f"Loaded configuration from {path}")
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> BoxConfiguration:
    """Validate a configuration supplied as a dictionary (e.g. an API body).

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
