"""Unit tests for Pydantic models and enumerations."""

import pytest
from pydantic import ValidationError

from awtrix_control.models import (
    Color,
    IndicatorEffect,
    IndicatorLocation,
    LifetimeMode,
    PushIcon,
    TextCase,
)


class TestColor:
    """Test Color model."""

    @pytest.mark.unit
    def test_create_color(self):
        """Test creating a color with RGB values."""
        color = Color(r=100, g=50, b=25)
        assert color.r == 100
        assert color.g == 50
        assert color.b == 25

    @pytest.mark.unit
    def test_rgb_range_validation(self):
        """Test that RGB values must be 0-255."""
        with pytest.raises(ValueError):
            Color(r=256, g=0, b=0)

        with pytest.raises(ValueError):
            Color(r=0, g=-1, b=0)

    @pytest.mark.unit
    def test_from_rgb(self):
        """Test positional construction."""
        assert Color.from_rgb(1, 2, 3) == Color(r=1, g=2, b=3)

    @pytest.mark.unit
    def test_to_hex(self):
        """Test hex conversion is lowercase and zero padded."""
        assert Color(r=0, g=255, b=128).to_hex() == "#00ff80"
        assert Color(r=171, g=205, b=239).to_hex() == "#abcdef"

    @pytest.mark.unit
    def test_frozen(self):
        """Test colors cannot be modified."""
        color = Color(r=1, g=2, b=3)
        with pytest.raises(ValidationError):
            color.r = 5


class TestEnums:
    """Test token enumerations."""

    @pytest.mark.unit
    def test_tokens_equal_strings(self):
        """Test members compare equal to their token strings."""
        assert TextCase.UPCASE == "upcase"
        assert PushIcon.SCROLL_ONCE == "scroll_once"
        assert LifetimeMode.STALE == "stale"
        assert IndicatorEffect.PULSE == "pulse"

    @pytest.mark.unit
    def test_indicator_index(self):
        """Test indicator locations are numbered from 1."""
        assert [location.index for location in IndicatorLocation] == [1, 2, 3]
        assert IndicatorLocation("bottom").index == 3
