"""Unit tests for imperial/metric conversion."""

from __future__ import annotations

import pytest

from boxforge.domain import BoxDimensions, FluteType, UnitSystem
from boxforge.domain.units import (
    IN_TO_MM,
    LBF_TO_N,
    LBS_TO_KG,
    convert_dimensions,
    convert_force,
    convert_length,
    convert_mass,
    force_unit,
    length_scale,
    length_unit,
    mass_unit,
    to_inches,
)


class TestConversionFactors:
    """Tests for the scalar multipliers."""

    def test_factors(self) -> None:
        assert IN_TO_MM == 25.4
        assert LBF_TO_N == 4.44822
        assert LBS_TO_KG == 0.453592

    def test_length(self) -> None:
        assert convert_length(1.0) == 25.4
        assert convert_length(25.4, to_metric=False) == pytest.approx(1.0)

    def test_force(self) -> None:
        assert convert_force(100.0) == pytest.approx(444.822)
        assert convert_force(444.822, to_metric=False) == pytest.approx(100.0)

    def test_mass(self) -> None:
        assert convert_mass(10.0) == pytest.approx(4.53592)
        assert convert_mass(4.53592, to_metric=False) == pytest.approx(10.0)

    def test_length_scale(self) -> None:
        assert length_scale(UnitSystem.IMPERIAL) == 1.0
        assert length_scale(UnitSystem.METRIC) == 25.4

    def test_to_inches(self) -> None:
        assert to_inches(12.0, UnitSystem.IMPERIAL) == 12.0
        assert to_inches(304.8, UnitSystem.METRIC) == pytest.approx(12.0)

    def test_unit_labels(self) -> None:
        assert length_unit(UnitSystem.IMPERIAL) == "in"
        assert length_unit(UnitSystem.METRIC) == "mm"
        assert force_unit(UnitSystem.IMPERIAL) == "LBF"
        assert force_unit(UnitSystem.METRIC) == "N"
        assert mass_unit(UnitSystem.IMPERIAL) == "LBS"
        assert mass_unit(UnitSystem.METRIC) == "KG"


class TestConvertDimensions:
    """Tests for the unit toggle applied to box dimensions."""

    def test_to_metric_rounds_to_one_decimal(self) -> None:
        dims = BoxDimensions(12.3, 10.0, 8.0, FluteType.C)
        converted = convert_dimensions(dims, UnitSystem.IMPERIAL, UnitSystem.METRIC)
        assert converted.length == 312.4
        assert converted.width == 254.0
        assert converted.height == 203.2
        assert converted.flute is FluteType.C

    def test_same_system_is_identity(self) -> None:
        dims = BoxDimensions(12.0, 10.0, 8.0)
        assert convert_dimensions(dims, UnitSystem.METRIC, UnitSystem.METRIC) is dims

    def test_original_is_not_mutated(self) -> None:
        dims = BoxDimensions(12.0, 10.0, 8.0)
        convert_dimensions(dims, UnitSystem.IMPERIAL, UnitSystem.METRIC)
        assert dims.length == 12.0

    @pytest.mark.parametrize("value", [0.1, 1.0, 7.25, 12.34, 48.0, 99.99])
    def test_round_trip_within_display_precision(self, value: float) -> None:
        """Imperial -> metric -> imperial stays within one decimal place."""
        dims = BoxDimensions(value, value, value)
        metric = convert_dimensions(dims, UnitSystem.IMPERIAL, UnitSystem.METRIC)
        back = convert_dimensions(metric, UnitSystem.METRIC, UnitSystem.IMPERIAL)
        assert abs(back.length - value) <= 0.1

    def test_repeated_toggling_drifts(self) -> None:
        """Rounding drift across toggles is an accepted limitation."""
        dims = BoxDimensions(0.14, 0.14, 0.14)
        for _ in range(3):
            dims = convert_dimensions(dims, UnitSystem.IMPERIAL, UnitSystem.METRIC)
            dims = convert_dimensions(dims, UnitSystem.METRIC, UnitSystem.IMPERIAL)
        assert dims.length != 0.14
        assert abs(dims.length - 0.14) <= 0.1
