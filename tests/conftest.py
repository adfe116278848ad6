"""Pytest configuration and shared fixtures for box tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from boxforge.domain import BoxDimensions, FluteType

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def reference_box() -> BoxDimensions:
    """12 x 10 x 8 inch B-flute box used throughout the worked examples."""
    return BoxDimensions(length=12.0, width=10.0, height=8.0, flute=FluteType.B)


@pytest.fixture
def reference_box_metric() -> BoxDimensions:
    """The reference box after toggling to millimetres."""
    return BoxDimensions(length=304.8, width=254.0, height=203.2, flute=FluteType.B)
