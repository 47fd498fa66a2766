"""Device: one display host and its registry of named apps.

The registry is local to each Device instance. Two instances pointed at
the same host know nothing about each other, so keep a single Device per
physical display for the lifetime of the process.
"""

import json
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from awtrix_control.app import DisplayApp
from awtrix_control.colors import ColorLike, normalize_color
from awtrix_control.exceptions import ConfigValidationError, DeviceError, ErrorContext
from awtrix_control.models.config import ClientConfig
from awtrix_control.models.enums import IndicatorEffect, IndicatorLocation
from awtrix_control.protocols import Transport
from awtrix_control.schema import SCHEMA
from awtrix_control.transport import HttpTransport

logger = logging.getLogger(__name__)

DEFAULT_BLINK_MS = 500
DEFAULT_FADE_MS = 2000


class Device:
    """
    Client-side handle for one display.

    Owns the app registry (name -> DisplayApp) and exposes the device
    operations. Every remote operation is a single blocking request whose
    response body is returned.

    Example:
        ```python
        with Device("192.168.1.50") as device:
            app = device.new_app("greeting", text="Hello", text_color="red")
            app.push()
            device.indicator("top", "green", effect="blink")
            device.notify("Build passed", duration=10)
        ```
    """

    def __init__(self, host: str, transport: Transport | None = None, timeout: float = 5.0):
        """
        Initialize the device.

        Args:
            host: Device IP address or hostname
            transport: Request sender (an HttpTransport is created if None)
            timeout: Request timeout in seconds for the default transport
        """
        self.host = host
        self._transport = transport or HttpTransport(host, timeout=timeout)
        self._apps: dict[str, DisplayApp] = {}

    @classmethod
    def from_config(cls, config: ClientConfig, host: str | None = None) -> "Device":
        """
        Create a device from the client configuration.

        Args:
            config: Loaded client configuration
            host: Host overriding ``config.host``

        Raises:
            ConfigValidationError: If no host is given or configured
        """
        host = host or config.host
        if not host:
            raise ConfigValidationError("host", None, "no device host configured")
        return cls(host, timeout=config.timeout)

    def __repr__(self) -> str:
        return f"Device(host={self.host!r}, apps={list(self._apps)!r})"

    def __enter__(self) -> "Device":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Release the transport's connections."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    # =================================================================
    # App registry
    # =================================================================

    @property
    def apps(self) -> Mapping[str, DisplayApp]:
        """Read-only view of the registered apps."""
        return MappingProxyType(self._apps)

    def add_app(self, app: DisplayApp) -> DisplayApp:
        """
        Register ``app`` under its name and make this device its owner.

        An app owned by another device is moved: the other device deletes
        it first. An app already registered under the same name is
        replaced; the replaced app is not notified and keeps pointing at
        this device.
        """
        owner = app.device
        if owner is not None and owner is not self:
            app.set_device(self)
            return app

        previous = self._apps.get(app.name)
        if previous is not None and previous is not app:
            logger.info(f"Replacing app '{app.name}' on {self.host}")

        self._apps[app.name] = app
        if app.device is not self:
            app._bind_device(self)

        logger.debug(f"Registered app '{app.name}' on {self.host}")
        return app

    def __lshift__(self, app: DisplayApp) -> DisplayApp:
        return self.add_app(app)

    def get_app(self, name: str) -> DisplayApp | None:
        """Return the registered app called ``name``, or None."""
        return self._apps.get(name)

    def __getitem__(self, name: str) -> DisplayApp | None:
        return self.get_app(name)

    def __contains__(self, name: object) -> bool:
        return name in self._apps

    def __len__(self) -> int:
        return len(self._apps)

    def new_app(self, name: str, payload: Mapping[str, Any] | None = None, **attributes: Any) -> DisplayApp:
        """
        Create, register and return an app owned by this device.

        Args:
            name: App name (replaces any app registered under it)
            payload: Wire-format overrides merged over the default payload
            **attributes: Attributes set by semantic name

        Example:
            >>> device.new_app("clock", text="12:00", push_icon="fixed")
        """
        app = DisplayApp(name, payload=payload, device=self)
        app.update(**attributes)
        return app

    # =================================================================
    # Custom apps
    # =================================================================

    def push_app(self, name_or_app: str | DisplayApp) -> str | None:
        """
        Create or update a custom app on the display.

        An app object is pushed as is. A name is looked up in the registry;
        pushing an unregistered name does nothing and returns None.
        """
        if isinstance(name_or_app, DisplayApp):
            app = name_or_app
        else:
            app = self._apps.get(name_or_app)
            if app is None:
                logger.debug(f"No app '{name_or_app}' registered on {self.host}, not pushing")
                return None

        body = {"name": app.name, **app.payload}
        return self._transport.post("custom", body, {"name": app.name})

    def delete_app(self, name_or_app: str | DisplayApp) -> str | None:
        """
        Delete an app from the display and from the registry.

        The registry entry is removed even if the request fails. An app
        object that was replaced under its name is only detached: the
        display and the registry belong to its replacement, so nothing is
        sent and None is returned.
        """
        if isinstance(name_or_app, DisplayApp):
            name = name_or_app.name
            if self._apps.get(name) is not name_or_app:
                logger.debug(f"App '{name}' is not the one registered on {self.host}, detaching only")
                if name_or_app.device is self:
                    name_or_app._bind_device(None)
                return None
        else:
            name = name_or_app

        try:
            return self._transport.post("custom", {}, {"name": name})
        finally:
            removed = self._apps.pop(name, None)
            if removed is not None and removed.device is self:
                removed._bind_device(None)
            logger.debug(f"Removed app '{name}' from {self.host}")

    def delete_all_apps(self) -> None:
        """
        Delete every app the display reports in its loop.

        The names come from the device, not from the registry, so apps
        created by other clients are deleted too. The registry is emptied
        even if a request fails.
        """
        try:
            with ErrorContext(f"delete all apps on {self.host}", logger_instance=logger):
                for name in self.loop():
                    self.delete_app(name)
        finally:
            for app in self._apps.values():
                if app.device is self:
                    app._bind_device(None)
            self._apps.clear()

    # =================================================================
    # Indicators
    # =================================================================

    def indicator(
        self,
        location: str | IndicatorLocation,
        color: ColorLike = "white",
        effect: str | IndicatorEffect | None = None,
        frequency: int | None = None,
    ) -> str:
        """
        Light one of the three status indicators.

        Args:
            location: "top", "center" or "bottom"
            color: Any value accepted by normalize_color
            effect: "blink" or "pulse"
            frequency: Effect period in ms (500 for blink, 2000 for pulse)

        Raises:
            ValueError: If the location or effect is unknown
            InvalidColorFormatError: If the color is invalid
        """
        slot = _parse_enum(IndicatorLocation, location, "indicator location")
        payload: dict[str, Any] = {"color": normalize_color(color)}

        if effect is not None:
            effect = _parse_enum(IndicatorEffect, effect, "indicator effect")
            if effect is IndicatorEffect.BLINK:
                payload["blink"] = frequency or DEFAULT_BLINK_MS
            else:
                payload["fade"] = frequency or DEFAULT_FADE_MS

        return self._transport.post(f"indicator{slot.index}", payload)

    def remove_indicator(self, location: str | IndicatorLocation) -> str:
        """Turn one indicator off."""
        return self.indicator(location, "black")

    def remove_indicators(self) -> None:
        """Turn all three indicators off."""
        for location in IndicatorLocation:
            self.remove_indicator(location)

    # =================================================================
    # Notifications and commands
    # =================================================================

    def notify(self, text: str, **options: Any) -> str:
        """
        Show a one-off notification.

        Options may use attribute names or wire keys; both are coerced
        through the schema (``color="red"`` and ``text_color="red"`` send
        the same payload). Unknown keys are sent verbatim.

        Example:
            >>> device.notify("Door open", color="red", hold=True)
        """
        payload: dict[str, Any] = {"text": text}
        for key, value in options.items():
            if key in SCHEMA:
                SCHEMA.set(payload, key, value)
                continue
            descriptor = SCHEMA.descriptor_for_wire_key(key)
            if descriptor is not None:
                SCHEMA.set(payload, descriptor.semantic_name, value)
            else:
                payload[key] = value
        return self._transport.post("notify", payload)

    def power(self, on: bool) -> str:
        """Switch the matrix on or off (the device itself stays up)."""
        return self._transport.post("power", {"power": bool(on)})

    def sound(self, name: str) -> str:
        """Play a sound file stored on the device."""
        return self._transport.post("sound", {"sound": name})

    def rtttl(self, melody: str) -> str:
        """Play an RTTTL melody."""
        return self._transport.post("rtttl", melody)

    def sleep(self, seconds: int = 0) -> str:
        """Put the device to sleep; 0 or less sleeps until woken."""
        seconds = int(seconds)
        payload = {"sleep": seconds} if seconds > 0 else {}
        return self._transport.post("sleep", payload)

    def reset(self) -> str:
        """Restart the device by sleeping for one second."""
        return self.sleep(1)

    # =================================================================
    # Queries
    # =================================================================

    def loop(self) -> dict[str, int]:
        """Return the apps running on the device, mapped to their loop index."""
        return self._get_json("loop")

    def stats(self) -> dict[str, Any]:
        """Return device statistics (version, battery, uptime, ...)."""
        return self._get_json("stats")

    def effects(self) -> list[str]:
        """Return the names of the available background effects."""
        return self._get_json("effects")

    def transitions(self) -> list[str]:
        """Return the names of the available app transitions."""
        return self._get_json("transitions")

    def screen(self) -> list[int]:
        """Return the current matrix content as a list of pixel colors."""
        return self._get_json("screen")

    def _get_json(self, path: str) -> Any:
        body = self._transport.get(path)
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise DeviceError(
                user_message=f"Device at {self.host} sent an unreadable answer for '{path}'",
                technical_message=f"Invalid JSON from /api/{path}: {e}: {body[:200]!r}",
                host=self.host,
            ) from e


def _parse_enum(enum_type, value, label: str):
    """Convert a token to an enum member, raising ValueError if unknown."""
    if isinstance(value, str):
        value = value.lower()
    try:
        return enum_type(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ValueError(f"Unknown {label} {value!r}, expected one of: {choices}") from None
