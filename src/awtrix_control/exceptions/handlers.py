"""
Centralized error handling utilities.

This module provides a layered approach to error handling:

1. **Custom Exceptions** - Typed, user-friendly error classes (see base, payload,
   transport and config modules)
2. **Error Context** - Preserve technical details for logging, show friendly messages to users
3. **Recovery Hints** - Tell users what to do when things fail

## Quick Reference

| Scenario | Use This | Example |
|----------|----------|---------|
| Unsupported color value | `InvalidColorFormatError` | `raise InvalidColorFormatError(42)` |
| Device unreachable | `DeviceConnectionError` | `raise wrap_transport_error(e, host)` |
| Config file syntax error | `ConfigFileInvalidError` | `raise ConfigFileInvalidError(path, "trailing comma")` |
| Config value invalid | `ConfigValidationError` | `raise ConfigValidationError("timeout", -1, "must be > 0")` |

## Architecture: The Three-Layer Model

```
┌─────────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────────┘
                  ↑
                  │ AwtrixControlError
                  │
┌─────────────────────────────────────────┐
│  LIBRARY LAYER (Device, DisplayApp) │
│  - Converts low-level exceptions    │
│  - Adds context and recovery hints  │
└─────────────────────────────────────────┘
                  ↑
                  │ httpx.HTTPError, ValidationError, OSError
                  │
┌─────────────────────────────────────────┐
│  LOW LEVEL (httpx, pydantic, I/O)   │
└─────────────────────────────────────────┘
```
"""

import logging
from typing import Optional

from .base import AwtrixControlError
from .config import ConfigFileInvalidError, ConfigValidationError
from .transport import DeviceConnectionError, DeviceError, DeviceTimeoutError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Use this for critical sections where you want consistent error handling.

    Example:
        ```python
        with ErrorContext("delete all apps", logger_instance=logger):
            for name in device.loop():
                device.delete_app(name)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[Exception] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, AwtrixControlError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.log_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> AwtrixControlError:
    """
    Convert Pydantic validation errors to awtrix-control exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def wrap_transport_error(
    error: Exception, host: str, timeout: Optional[float] = None
) -> AwtrixControlError:
    """
    Convert low-level HTTP errors to awtrix-control exceptions.

    Status codes are never inspected here: only failures to exchange a
    request with the device are translated.

    Args:
        error: The original exception from httpx
        host: The device host involved in the error
        timeout: The request timeout in seconds (if known)

    Returns:
        An AwtrixControlError with appropriate type and message
    """
    import httpx

    if isinstance(error, httpx.TimeoutException):
        return DeviceTimeoutError(host, timeout=timeout)

    if isinstance(error, (httpx.ConnectError, httpx.NetworkError)):
        return DeviceConnectionError(host, original_error=str(error))

    return DeviceError(
        user_message=f"Request to device at {host} failed: {error}",
        technical_message=f"{type(error).__name__}: {error}",
        host=host,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, AwtrixControlError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
