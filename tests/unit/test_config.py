"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from textshape.config import CurveConfig, LayoutConfig, TextShapeSettings, get_default_settings
from textshape.domain import Alignment


class TestCurveConfig:
    def test_defaults(self) -> None:
        config = CurveConfig()
        assert config.flatten_tolerance == 0.5
        assert config.max_subdivision_depth == 8

    def test_tolerance_scales_with_upm(self) -> None:
        config = CurveConfig(flatten_tolerance=1.0)
        assert config.get_flatten_tolerance(1000) == 1.0
        assert config.get_flatten_tolerance(2048) == pytest.approx(2.048)

    def test_tolerance_bounds(self) -> None:
        with pytest.raises(ValidationError):
            CurveConfig(flatten_tolerance=0.0)
        with pytest.raises(ValidationError):
            CurveConfig(flatten_tolerance=50.0)


class TestLayoutConfig:
    def test_default_alignment_is_center(self) -> None:
        assert LayoutConfig().alignment == Alignment.CENTER

    def test_alignment_from_string(self) -> None:
        assert LayoutConfig(alignment="right").alignment == Alignment.RIGHT

    def test_height_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            LayoutConfig(height=0.0)


def test_default_settings() -> None:
    settings = get_default_settings()
    assert isinstance(settings, TextShapeSettings)
    assert settings.logging.log_file is None
    assert settings.layout.height == 1.0
