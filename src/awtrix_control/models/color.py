"""Color model for pixel and indicator colors."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The device API takes colors as lowercase ``#rrggbb`` strings; this model
    is the validated intermediate used when a color is given as channels.

    The model is frozen so palette constants can be shared safely.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a color from positional channels."""
        return cls(r=r, g=g, b=b)

    def to_hex(self) -> str:
        """Convert to the device hex format (e.g., '#ff0000').

        Returns:
            str: Lowercase hex color string in format '#rrggbb'

        Example:
            >>> Color(r=0, g=255, b=128).to_hex()
            '#00ff80'
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"
