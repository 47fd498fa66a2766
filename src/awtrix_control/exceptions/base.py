"""Root of the awtrix-control exception hierarchy.

Every error carries two messages: a short one for the person at the
command line and a detailed one for the log. Errors tied to a specific
display also carry its ``host``, which prefixes the logged message so a
log covering several clocks stays readable.
"""

from typing import ClassVar, Optional


class AwtrixControlError(Exception):
    """
    Base exception for all awtrix-control errors.

    Attributes:
        user_message: Short message shown to users
        technical_message: Detailed message for logs
        host: Display involved, or None when the error is local
        recoverable: True when retrying or fixing input can succeed
        recovery_hint: What the user can do about it

    Subclasses may set ``default_hint``; it is used when no hint is given.
    """

    default_hint: ClassVar[Optional[str]] = None

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        *,
        host: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.host = host
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint or self.default_hint

    def __str__(self) -> str:
        return self.user_message

    @property
    def log_message(self) -> str:
        """Technical message, prefixed with the host when there is one."""
        if self.host:
            return f"[{self.host}] {self.technical_message}"
        return self.technical_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
