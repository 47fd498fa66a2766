"""
Custom exception hierarchy for awtrix-control.

## Exception Hierarchy

```
AwtrixControlError (base)
├── InvalidColorFormatError
├── UnknownAttributeError
├── DeviceError
│   ├── DeviceConnectionError
│   └── DeviceTimeoutError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

## Usage

All custom exceptions inherit from `AwtrixControlError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `host`: The display involved, if any (`log_message` prefixes it)
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Suggestion for how to fix the issue, falling back to
  the class `default_hint`

### Example: Invalid Color

```python
from awtrix_control.exceptions import InvalidColorFormatError

app.text_color = 42
# raises InvalidColorFormatError
# User sees: "Invalid color format: 42"
# Recovery hint: "Use a hex string ('#ff0000'), a palette name ('red') ..."
```

`InvalidColorFormatError` is also a `ValueError` and `UnknownAttributeError`
is also a `KeyError`, so callers that only know the builtin types keep working.

See `awtrix_control.exceptions.handlers` for utilities to handle these exceptions systematically.
"""

from .base import AwtrixControlError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)
from .payload import InvalidColorFormatError, UnknownAttributeError
from .transport import DeviceConnectionError, DeviceError, DeviceTimeoutError

__all__ = [
    # Base
    "AwtrixControlError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Transport
    "DeviceConnectionError",
    "DeviceError",
    "DeviceTimeoutError",
    # Handlers
    "ErrorContext",
    # Payload
    "InvalidColorFormatError",
    "UnknownAttributeError",
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_transport_error",
]
