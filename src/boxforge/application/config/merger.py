"""Merge CLI overrides into a loaded configuration.

Precedence: CLI args > config values > defaults. Only arguments that are
not None override the configuration.
"""

from typing import Any

from boxforge.application.config.loader import load_config_from_dict
from boxforge.application.config.schema import BoxConfiguration


def merge_config_with_cli(
    config: BoxConfiguration,
    *,
    length: float | None = None,
    width: float | None = None,
    height: float | None = None,
    flute: str | None = None,
    units: str | None = None,
    output_format: str | None = None,
) -> BoxConfiguration:
    """Return a new configuration with CLI values applied.

    Raises:
        ConfigError: If an override makes the configuration invalid.

    Example:
        >>> merged = merge_config_with_cli(config, length=16.0)
        >>> merged.box.length
        16.0
    """
    data: dict[str, Any] = config.model_dump(mode="json")

    box_overrides = {"length": length, "width": width, "height": height, "flute": flute}
    for key, value in box_overrides.items():
        if value is not None:
            data["box"][key] = value
    if units is not None:
        data["units"] = units
    if output_format is not None:
        data["output"]["format"] = output_format

    return load_config_from_dict(data)
