"""Color Management - Palette and Color Normalization.

This module is the single place where caller-supplied colors are turned into
the format the device API understands: a lowercase ``#rrggbb`` string.

## Accepted Color Inputs

| Input | Example | Result |
|-------|---------|--------|
| Palette name | `"red"`, `ColorName.RED` | `"#ff0000"` |
| Any other string | `"#00FF00"`, `"chartreuse"` | returned unchanged |
| RGB sequence | `[0, 255, 128]`, `(0, 255, 128)` | `"#00ff80"` |
| Color model | `Color(r=0, g=0, b=255)` | `"#0000ff"` |
| Anything else | `42`, `None`, `[1, 2]` | `InvalidColorFormatError` |

Strings are not validated: the device accepts a few non-hex spellings and
an unknown palette name is forwarded as-is rather than rejected.

RGB channels must be within 0-255. Out-of-range channels would otherwise
produce a malformed hex string (``#100ff00``) that the device silently
misreads, so they are rejected with `InvalidColorFormatError`.

## Usage

```python
from awtrix_control.colors import COLORS, normalize_color

normalize_color("red")            # '#ff0000'
normalize_color([0, 255, 128])    # '#00ff80'
normalize_color(COLORS.ORANGE)    # '#ff8000'
```

`normalize_color` is pure: it is called by every color setter on
`DisplayApp` and by `Device.indicator()` / `Device.notify()`.
"""

from collections.abc import Sequence
from enum import Enum
from numbers import Real
from typing import Any, Union

from pydantic import ValidationError

from awtrix_control.exceptions import InvalidColorFormatError
from awtrix_control.models.color import Color


class ColorName(str, Enum):
    """Named colors understood by :func:`normalize_color`."""

    BLACK = "black"
    BLUE = "blue"
    BROWN = "brown"
    GREEN = "green"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"


class COLORS:
    """Palette color constants - 8-bit RGB (0-255).

    These are the colors reachable by name. Pass them anywhere a color is
    accepted, or use the matching name string.
    """

    BLACK: Color = Color(r=0, g=0, b=0)
    """Black (off) - Used to clear indicators"""

    BLUE: Color = Color(r=0, g=0, b=255)
    """Pure blue"""

    BROWN: Color = Color(r=128, g=64, b=0)
    """Brown"""

    GREEN: Color = Color(r=0, g=255, b=0)
    """Pure green"""

    ORANGE: Color = Color(r=255, g=128, b=0)
    """Orange"""

    PINK: Color = Color(r=255, g=0, b=255)
    """Pink (full magenta)"""

    PURPLE: Color = Color(r=128, g=0, b=255)
    """Purple"""

    RED: Color = Color(r=255, g=0, b=0)
    """Pure red"""

    WHITE: Color = Color(r=255, g=255, b=255)
    """Pure white - Default indicator and notification color"""

    YELLOW: Color = Color(r=255, g=255, b=0)
    """Pure yellow"""


PALETTE: dict[str, Color] = {name.value: getattr(COLORS, name.name) for name in ColorName}

ColorLike = Union[str, ColorName, Color, Sequence[Real]]


def normalize_color(color: Any) -> str:
    """
    Convert a caller-supplied color into the device hex format.

    Args:
        color: Palette name, hex string, Color model or (r, g, b) sequence

    Returns:
        Hex color string. Palette names and RGB values come back as
        lowercase ``#rrggbb``; other strings are returned unchanged.

    Raises:
        InvalidColorFormatError: If the value has an unsupported shape or
            an RGB channel is outside 0-255

    Example:
        >>> normalize_color("red")
        '#ff0000'
        >>> normalize_color([0, 255, 128])
        '#00ff80'
    """
    if isinstance(color, str):
        named = PALETTE.get(color.lower())
        if named is not None:
            return named.to_hex()
        return color.value if isinstance(color, Enum) else color

    if isinstance(color, Color):
        return color.to_hex()

    if isinstance(color, Sequence) and len(color) == 3:
        if not all(isinstance(c, Real) and not isinstance(c, bool) for c in color):
            raise InvalidColorFormatError(color, "RGB channels must be numbers")
        try:
            return Color.from_rgb(*color).to_hex()
        except ValidationError as e:
            raise InvalidColorFormatError(color, "RGB channels must be integers between 0 and 255") from e

    raise InvalidColorFormatError(color)


__all__ = ["COLORS", "PALETTE", "ColorLike", "ColorName", "normalize_color"]
