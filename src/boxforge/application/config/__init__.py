"""Configuration file support for box designs.

Example:
    from boxforge.application.config import load_config, config_to_box_input

    config = load_config(Path("my-box.json"))
    box_input = config_to_box_input(config)
"""

from boxforge.application.config.adapter import config_to_box_input, config_to_playback
from boxforge.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from boxforge.application.config.merger import merge_config_with_cli
from boxforge.application.config.schema import (
    SUPPORTED_VERSIONS,
    AnimationConfig,
    BoxConfig,
    BoxConfiguration,
    OutputConfig,
)
from boxforge.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_box_advisories,
    check_side_limits,
    validate_config,
)

__all__ = [
    "AnimationConfig",
    "BoxConfig",
    "BoxConfiguration",
    "ConfigError",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_box_advisories",
    "check_side_limits",
    "config_to_box_input",
    "config_to_playback",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    "validate_config",
]
