"""Enumerations for app attributes and device operations."""

from enum import Enum


class TextCase(str, Enum):
    """How the device renders the case of app text."""

    DEFAULT = "default"  # Use the global device setting
    UPCASE = "upcase"  # Force uppercase
    AS_IS = "as_is"  # Show text exactly as sent


class PushIcon(str, Enum):
    """How the app icon behaves while text scrolls."""

    FIXED = "fixed"  # Icon stays in place
    SCROLL_ONCE = "scroll_once"  # Icon scrolls away with the text once
    LOOP = "loop"  # Icon scrolls with the text on every pass


class LifetimeMode(str, Enum):
    """What happens to an app once its lifetime expires."""

    DESTROY = "destroy"  # Remove the app from the loop
    STALE = "stale"  # Keep the app but mark it stale


class IndicatorLocation(str, Enum):
    """The three status indicators on the right edge of the matrix."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"

    @property
    def index(self) -> int:
        """1-based indicator number used in the API path."""
        return list(IndicatorLocation).index(self) + 1


class IndicatorEffect(str, Enum):
    """Animations supported by the indicators."""

    BLINK = "blink"
    PULSE = "pulse"
