"""Client configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from awtrix_control.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".awtrix_control" / "config.json"


class ClientConfig(BaseModel):
    """Settings used by the command line client."""

    host: str | None = Field(
        default=None,
        description="Device IP address or hostname (e.g. '192.168.1.50')",
    )
    timeout: float = Field(
        default=5.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )

    @field_validator("host")
    @classmethod
    def strip_host(cls, value: str | None) -> str | None:
        """Treat a blank host as unset."""
        if value is None:
            return None
        value = value.strip()
        return value or None

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "ClientConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.awtrix_control/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
