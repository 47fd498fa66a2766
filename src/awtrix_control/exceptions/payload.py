"""Payload-related exceptions.

This module defines exceptions raised while building app payloads:
- InvalidColorFormatError: A color value has an unsupported shape
- UnknownAttributeError: An attribute name is not part of the schema
"""

from typing import Any

from .base import AwtrixControlError


class InvalidColorFormatError(AwtrixControlError, ValueError):
    """Color value is not a hex string, a palette name or an RGB triple."""

    def __init__(self, value: Any, reason: str | None = None):
        """
        Initialize invalid color error.

        Args:
            value: The offending color value
            reason: Optional detail on why the value was rejected
        """
        user_msg = f"Invalid color format: {value!r}"
        tech_msg = user_msg if reason is None else f"{user_msg} ({reason})"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recoverable=True,
            recovery_hint=(
                "Use a hex string ('#ff0000'), a palette name ('red') "
                "or three channels between 0 and 255 ([255, 0, 0])."
            ),
        )
        self.value = value


class UnknownAttributeError(AwtrixControlError, KeyError):
    """Attribute name is not declared in the app attribute schema."""

    def __init__(self, name: str):
        """
        Initialize unknown attribute error.

        Args:
            name: The attribute name that was not found
        """
        super().__init__(
            user_message=f"Unknown app attribute: {name!r}",
            recovery_hint="See awtrix_control.schema.ATTRIBUTES for valid names.",
        )
        self.name = name
