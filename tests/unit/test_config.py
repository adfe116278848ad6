"""Unit tests for configuration loading, merging, validation and adapters.

These tests verify:
- Valid files load into BoxConfiguration
- File, JSON and schema problems become ConfigError with an error_type
- CLI overrides take precedence and are re-validated
- Packaging advisories are reported as warnings
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from boxforge.application.config import (
    BoxConfig,
    BoxConfiguration,
    ConfigError,
    ValidationResult,
    check_box_advisories,
    config_to_box_input,
    config_to_playback,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
    validate_config,
)
from boxforge.domain import FluteType, UnitSystem


def _config(**box: float | str) -> BoxConfiguration:
    return load_config_from_dict({"schema_version": "1.0", "box": box})


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_minimal(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_minimal.json")

        assert config.box.length == 12.0
        assert config.box.flute is FluteType.B
        assert config.units is UnitSystem.IMPERIAL
        assert config.output.format == "all"
        assert config.output.frames == 11

    def test_valid_full(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_full.json")

        assert config.box.flute is FluteType.C
        assert config.animation.playback_step == 0.01
        assert config.animation.manual_step == 0.1
        assert config.output.frames == 5

    def test_metric(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "metric.json")
        assert config.units is UnitSystem.METRIC
        assert config.output.format == "json"

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")
        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_json.json")
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 3

    def test_unknown_field_rejected(self, fixtures_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "unknown_field.json")
        error = exc_info.value
        assert error.error_type == "validation"
        assert [d["path"] for d in error.details] == ["box.depth"]

    def test_invalid_values(self, fixtures_path: Path) -> None:
        """Every problem is reported, not just the first."""
        with pytest.raises(ConfigError) as exc_info:
            load_config(fixtures_path / "invalid_values.json")
        paths = {d["path"] for d in exc_info.value.details}
        assert paths == {"box.length", "box.flute"}
        assert "Configuration validation failed" in str(exc_info.value)


class TestSchema:
    """Tests for BoxConfiguration validation rules."""

    @pytest.mark.parametrize("flute", ["b", "B", "B-Flute"])
    def test_flute_spellings(self, flute: str) -> None:
        assert _config(length=1, width=1, height=1, flute=flute).box.flute is FluteType.B

    def test_default_flute(self) -> None:
        assert BoxConfig(length=1, width=1, height=1).flute is FluteType.B

    def test_zero_dimension_rejected(self) -> None:
        with pytest.raises(ConfigError):
            _config(length=0, width=10, height=8)

    def test_newer_minor_version_accepted(self) -> None:
        config = load_config_from_dict(
            {"schema_version": "1.3", "box": {"length": 1, "width": 1, "height": 1}}
        )
        assert config.schema_version == "1.3"

    @pytest.mark.parametrize("version", ["2.0", "one", "1"])
    def test_unsupported_version(self, version: str) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(
                {"schema_version": version, "box": {"length": 1, "width": 1, "height": 1}}
            )
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_frames_bounds(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict(
                {
                    "schema_version": "1.0",
                    "box": {"length": 1, "width": 1, "height": 1},
                    "output": {"frames": 1},
                }
            )

    def test_round_trips_through_json(self, fixtures_path: Path) -> None:
        config = load_config(fixtures_path / "valid_full.json")
        again = load_config_from_dict(json.loads(config.model_dump_json()))
        assert again == config


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli."""

    @pytest.fixture
    def base_config(self) -> BoxConfiguration:
        return _config(length=12, width=10, height=8)

    def test_no_overrides(self, base_config: BoxConfiguration) -> None:
        assert merge_config_with_cli(base_config) == base_config

    def test_dimension_override(self, base_config: BoxConfiguration) -> None:
        merged = merge_config_with_cli(base_config, length=16.0)
        assert merged.box.length == 16.0
        assert merged.box.width == 10.0

    def test_flute_units_and_format(self, base_config: BoxConfiguration) -> None:
        merged = merge_config_with_cli(
            base_config, flute="c", units="metric", output_format="json"
        )
        assert merged.box.flute is FluteType.C
        assert merged.units is UnitSystem.METRIC
        assert merged.output.format == "json"

    def test_original_unchanged(self, base_config: BoxConfiguration) -> None:
        merge_config_with_cli(base_config, length=20.0)
        assert base_config.box.length == 12.0

    def test_invalid_override_raises_config_error(
        self, base_config: BoxConfiguration
    ) -> None:
        with pytest.raises(ConfigError) as exc_info:
            merge_config_with_cli(base_config, height=-1.0)
        assert exc_info.value.error_type == "validation"

    def test_unknown_format_rejected(self, base_config: BoxConfiguration) -> None:
        with pytest.raises(ConfigError):
            merge_config_with_cli(base_config, output_format="xml")


class TestAdvisories:
    """Tests for packaging advisories."""

    def test_clean_box(self) -> None:
        assert check_box_advisories(_config(length=12, width=10, height=8)) == []

    def test_length_shorter_than_width(self) -> None:
        warnings = check_box_advisories(_config(length=8, width=10, height=8))
        assert [w.path for w in warnings] == ["box.length"]

    def test_slender_box(self) -> None:
        warnings = check_box_advisories(_config(length=10, width=6, height=19))
        assert [w.path for w in warnings] == ["box.height"]
        assert warnings[0].suggestion

    def test_tiny_metric_box(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "box": {"length": 12, "width": 10, "height": 8},
                "units": "metric",
            }
        )
        assert [w.path for w in check_box_advisories(config)] == ["units"]

    def test_validate_config_with_warnings(self, fixtures_path: Path) -> None:
        result = validate_config(load_config(fixtures_path / "valid_with_warnings.json"))
        assert result.is_valid
        assert result.has_warnings
        assert len(result.warnings) == 2
        assert result.exit_code == 2


class TestSideLimits:
    """Tests for the size limits shared with design generation."""

    def test_oversize_imperial(self, fixtures_path: Path) -> None:
        result = validate_config(load_config(fixtures_path / "oversize.json"))

        assert not result.is_valid
        assert result.exit_code == 1
        assert [e.path for e in result.errors] == ["box.length", "box.width", "box.height"]
        assert result.errors[0].message == "Length exceeds maximum (120 inches)"
        assert result.errors[0].value == 500

    def test_matches_design_input_messages(self, fixtures_path: Path) -> None:
        """validate and generate reject the same file with the same messages."""
        config = load_config(fixtures_path / "oversize.json")
        messages = [e.message for e in validate_config(config).errors]
        assert messages == config_to_box_input(config).validate()

    def test_metric_limit(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "box": {"length": 3000, "width": 2000, "height": 3100},
                "units": "metric",
            }
        )
        result = validate_config(config)
        assert [e.path for e in result.errors] == ["box.height"]
        assert result.errors[0].message == "Height exceeds maximum (3048 mm)"

    def test_at_limit_is_valid(self) -> None:
        config = _config(length=120, width=120, height=120)
        assert validate_config(config).errors == []


class TestValidationResult:
    """Tests for ValidationResult exit codes."""

    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("box", "hmm").exit_code == 2
        result = ValidationResult().add_warning("box", "hmm").add_error("box", "bad")
        assert result.exit_code == 1
        assert not result.is_valid


class TestAdapters:
    """Tests for config to DTO adapters."""

    def test_config_to_box_input(self, fixtures_path: Path) -> None:
        box_input = config_to_box_input(load_config(fixtures_path / "valid_full.json"))
        assert box_input.length == 16
        assert box_input.flute == "C"
        assert box_input.units == "imperial"
        assert box_input.validate() == []

    def test_metric_box_input(self, fixtures_path: Path) -> None:
        box_input = config_to_box_input(load_config(fixtures_path / "metric.json"))
        assert box_input.unit_system is UnitSystem.METRIC

    def test_config_to_playback(self, fixtures_path: Path) -> None:
        playback = config_to_playback(load_config(fixtures_path / "valid_full.json"))
        assert playback.progress == 0.0
        assert playback.playback_step == 0.01
        assert playback.manual_step == 0.1
