"""Tests for the exception hierarchy and error helpers."""

import logging

import httpx
import pytest

from awtrix_control.exceptions import (
    AwtrixControlError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    DeviceConnectionError,
    DeviceError,
    DeviceTimeoutError,
    ErrorContext,
    InvalidColorFormatError,
    UnknownAttributeError,
    format_error_for_display,
    wrap_transport_error,
)


class TestHierarchy:
    """Test exception classes."""

    @pytest.mark.unit
    def test_base_messages(self):
        """Test user and technical messages."""
        error = AwtrixControlError("Short", technical_message="Long", recovery_hint="Try again")
        assert str(error) == "Short"
        assert error.technical_message == "Long"
        assert error.get_full_message() == "Short\n\nSuggestion: Try again"

    @pytest.mark.unit
    def test_log_message_names_host(self):
        """Test device errors prefix the logged message with their host."""
        error = DeviceError("Broken", technical_message="Details", host="10.0.0.2")
        assert error.log_message == "[10.0.0.2] Details"
        assert AwtrixControlError("Local").log_message == "Local"

    @pytest.mark.unit
    def test_default_hints(self):
        """Test device errors fall back to their class hint."""
        assert DeviceError("Broken").recovery_hint == DeviceError.default_hint
        assert DeviceTimeoutError("10.0.0.2").recovery_hint.startswith("Increase the timeout")
        assert DeviceError("Broken", recovery_hint="Reboot").recovery_hint == "Reboot"
        assert AwtrixControlError("Local").recovery_hint is None

    @pytest.mark.unit
    def test_subclasses(self):
        """Test every error derives from the base class."""
        for error in (
            InvalidColorFormatError(42),
            UnknownAttributeError("colour"),
            DeviceConnectionError("10.0.0.2"),
            DeviceTimeoutError("10.0.0.2", timeout=1.0),
            ConfigFileInvalidError("config.json", "Expecting value"),
            ConfigValidationError("timeout", -1, "must be > 0"),
        ):
            assert isinstance(error, AwtrixControlError)

        assert isinstance(DeviceTimeoutError("h"), DeviceError)
        assert isinstance(ConfigValidationError("f", 1, "bad"), ConfigurationError)

    @pytest.mark.unit
    def test_unknown_attribute_message(self):
        """Test the unknown attribute error is readable despite being a KeyError."""
        error = UnknownAttributeError("colour")
        assert str(error) == "Unknown app attribute: 'colour'"
        assert error.name == "colour"

    @pytest.mark.unit
    def test_trailing_comma_hint(self):
        """Test JSON trailing comma errors get a specific message."""
        error = ConfigFileInvalidError("config.json", "Trailing comma at line 3")
        assert "trailing comma" in error.user_message


class TestWrapTransportError:
    """Test conversion of httpx errors."""

    @pytest.mark.unit
    def test_timeout(self):
        """Test httpx timeouts become DeviceTimeoutError."""
        error = wrap_transport_error(httpx.ConnectTimeout("slow"), "10.0.0.2", timeout=3)
        assert isinstance(error, DeviceTimeoutError)

    @pytest.mark.unit
    def test_connect(self):
        """Test connection failures become DeviceConnectionError."""
        error = wrap_transport_error(httpx.ConnectError("refused"), "10.0.0.2")
        assert isinstance(error, DeviceConnectionError)
        assert "refused" in error.technical_message
        assert error.recovery_hint is not None

    @pytest.mark.unit
    def test_other(self):
        """Test other errors become a plain DeviceError."""
        error = wrap_transport_error(httpx.DecodingError("garbled"), "10.0.0.2")
        assert type(error) is DeviceError
        assert error.host == "10.0.0.2"


class TestFormatting:
    """Test format_error_for_display."""

    @pytest.mark.unit
    def test_library_error(self):
        """Test library errors show their message and hint."""
        message, hint = format_error_for_display(DeviceConnectionError("10.0.0.2"))
        assert "10.0.0.2" in message
        assert hint is not None

    @pytest.mark.unit
    def test_builtin_error(self):
        """Test other errors show their type and text."""
        assert format_error_for_display(ValueError("boom")) == ("ValueError: boom", None)


class TestErrorContext:
    """Test the ErrorContext context manager."""

    @pytest.mark.unit
    def test_logs_and_reraises(self, caplog):
        """Test failures are logged and re-raised by default."""
        test_logger = logging.getLogger("awtrix_control.tests")
        with pytest.raises(DeviceConnectionError):
            with ErrorContext("push app", logger_instance=test_logger):
                raise DeviceConnectionError("10.0.0.2")
        assert "Failed to push app: [10.0.0.2] Could not connect" in caplog.text

    @pytest.mark.unit
    def test_suppresses_when_asked(self):
        """Test re_raise=False swallows and records the error."""
        with ErrorContext("push app", re_raise=False) as context:
            raise ValueError("boom")
        assert isinstance(context.error, ValueError)
