"""Transport-related exceptions.

This module defines exceptions for talking to the device over HTTP:
- DeviceError: Base class for device communication errors
- DeviceConnectionError: The device could not be reached
- DeviceTimeoutError: The device did not answer in time
"""

from .base import AwtrixControlError


class DeviceError(AwtrixControlError):
    """Communication with the device failed."""

    default_hint = "Run 'awtrix -v info stats' to check the device answers."


class DeviceConnectionError(DeviceError):
    """Device could not be reached."""

    default_hint = (
        "Check that the device is powered on and on the same network. "
        "Run 'awtrix config show' to see the configured host."
    )

    def __init__(self, host: str, original_error: str | None = None):
        """
        Initialize device connection error.

        Args:
            host: The device host that could not be reached
            original_error: The original error message from the HTTP library
        """
        user_msg = f"Could not connect to device at {host}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(user_msg, tech_msg, host=host, recoverable=True)


class DeviceTimeoutError(DeviceError):
    """Device did not answer before the request timeout."""

    default_hint = "Increase the timeout with 'awtrix config set --timeout SECONDS'."

    def __init__(self, host: str, timeout: float | None = None):
        """
        Initialize device timeout error.

        Args:
            host: The device host that timed out
            timeout: The timeout that elapsed, in seconds
        """
        user_msg = f"Device at {host} did not respond in time."
        tech_msg = user_msg if timeout is None else f"{user_msg} (timeout={timeout}s)"

        super().__init__(user_msg, tech_msg, host=host, recoverable=True)
        self.timeout = timeout
