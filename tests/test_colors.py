"""Unit tests for color normalization."""

import pytest

from awtrix_control.colors import COLORS, PALETTE, ColorName, normalize_color
from awtrix_control.exceptions import AwtrixControlError, InvalidColorFormatError
from awtrix_control.models import Color


class TestPalette:
    """Test named palette colors."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("black", "#000000"),
            ("blue", "#0000ff"),
            ("brown", "#804000"),
            ("green", "#00ff00"),
            ("orange", "#ff8000"),
            ("pink", "#ff00ff"),
            ("purple", "#8000ff"),
            ("red", "#ff0000"),
            ("white", "#ffffff"),
            ("yellow", "#ffff00"),
        ],
    )
    def test_palette_names(self, name, expected):
        """Test every palette name maps to its hex value."""
        assert normalize_color(name) == expected
        assert normalize_color(ColorName(name)) == expected

    @pytest.mark.unit
    def test_palette_is_case_insensitive(self):
        """Test palette lookup ignores case."""
        assert normalize_color("RED") == "#ff0000"
        assert normalize_color("Orange") == "#ff8000"

    @pytest.mark.unit
    def test_palette_covers_every_name(self):
        """Test PALETTE has one entry per ColorName."""
        assert set(PALETTE) == {name.value for name in ColorName}

    @pytest.mark.unit
    def test_color_constant(self):
        """Test COLORS constants normalize like their names."""
        assert normalize_color(COLORS.ORANGE) == normalize_color("orange")


class TestStrings:
    """Test strings that are not palette names."""

    @pytest.mark.unit
    def test_hex_returned_unchanged(self):
        """Test hex strings pass through as given."""
        assert normalize_color("#ff0000") == "#ff0000"
        assert normalize_color("#00FF00") == "#00FF00"

    @pytest.mark.unit
    def test_unknown_name_returned_unchanged(self):
        """Test unknown names are forwarded without validation."""
        assert normalize_color("chartreuse") == "chartreuse"


class TestRgb:
    """Test RGB sequences and Color models."""

    @pytest.mark.unit
    def test_rgb_list(self):
        """Test an RGB list is formatted as lowercase zero-padded hex."""
        assert normalize_color([0, 255, 128]) == "#00ff80"

    @pytest.mark.unit
    def test_rgb_tuple(self):
        """Test tuples work like lists."""
        assert normalize_color((1, 2, 3)) == "#010203"

    @pytest.mark.unit
    def test_color_model(self):
        """Test Color models are converted to hex."""
        assert normalize_color(Color(r=0, g=0, b=255)) == "#0000ff"

    @pytest.mark.unit
    @pytest.mark.parametrize("channels", [[256, 0, 0], [0, -1, 0], [0, 0, 1000]])
    def test_out_of_range_channels_rejected(self, channels):
        """Test channels outside 0-255 raise instead of producing bad hex."""
        with pytest.raises(InvalidColorFormatError):
            normalize_color(channels)


class TestInvalid:
    """Test unsupported color values."""

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [42, None, True, 1.5, [1, 2], [1, 2, 3, 4], ["a", "b", "c"], {"r": 1}])
    def test_invalid_values(self, value):
        """Test unsupported shapes raise InvalidColorFormatError."""
        with pytest.raises(InvalidColorFormatError):
            normalize_color(value)

    @pytest.mark.unit
    def test_error_carries_value(self):
        """Test the error keeps the offending value and a readable message."""
        with pytest.raises(InvalidColorFormatError) as exc_info:
            normalize_color(42)

        error = exc_info.value
        assert error.value == 42
        assert "42" in error.user_message
        assert error.recovery_hint is not None

    @pytest.mark.unit
    def test_error_types(self):
        """Test the error is both a library error and a ValueError."""
        with pytest.raises(AwtrixControlError):
            normalize_color(None)
        with pytest.raises(ValueError):
            normalize_color(None)
