"""DisplayApp: a named custom app and its payload.

An app is a mutable bag of wire-format attributes plus a name. Every
attribute of :data:`awtrix_control.schema.SCHEMA` is exposed as a property
that reads and writes ``payload`` through the schema, so values are
coerced the same way everywhere::

    app = device.new_app("weather")
    app.text = "21°"
    app.text_color = "orange"      # payload["color"] == "#ff8000"
    app.push_icon = "scroll_once"  # payload["pushIcon"] == 1
    app.push()

An app has at most one owning device. Moving it to another device
deletes it from the old one first.
"""

import logging
from collections.abc import Mapping
from typing import Any

from awtrix_control.models.enums import TextCase
from awtrix_control.protocols import AppRegistry
from awtrix_control.schema import SCHEMA, default_payload

logger = logging.getLogger(__name__)


def _attribute(name: str) -> property:
    """Build a property reading and writing ``name`` through the schema."""
    descriptor = SCHEMA.descriptor(name)

    def fget(self: "DisplayApp") -> Any:
        return SCHEMA.get(self.payload, name)

    def fset(self: "DisplayApp", value: Any) -> None:
        SCHEMA.set(self.payload, name, value)

    return property(fget, fset, doc=f"{descriptor.description} (``{descriptor.wire_key}``)")


class DisplayApp:
    """
    A custom app shown in the device's app loop.

    Attributes:
        name: App name, unique within the owning device
        payload: Wire-format payload. Assigning a new dict replaces it
            without validation.
    """

    def __init__(
        self,
        name: str,
        payload: Mapping[str, Any] | None = None,
        device: AppRegistry | None = None,
    ):
        """
        Create an app, optionally registering it with ``device``.

        Args:
            name: App name
            payload: Wire-format overrides merged over the default payload
            device: Owning device; the app is registered before its
                payload is set
        """
        self.name = name
        self._device: AppRegistry | None = None
        self.payload: dict[str, Any] = {}

        if device is not None:
            device.add_app(self)

        self.payload = {**default_payload(), **(payload or {})}

    def __repr__(self) -> str:
        host = getattr(self._device, "host", None)
        return f"DisplayApp(name={self.name!r}, device={host!r})"

    # =================================================================
    # Ownership
    # =================================================================

    @property
    def device(self) -> AppRegistry | None:
        """The owning device, or None when unattached."""
        return self._device

    @device.setter
    def device(self, device: AppRegistry | None) -> None:
        self.set_device(device)

    def set_device(self, device: AppRegistry | None) -> None:
        """
        Move the app to ``device``.

        The current owner deletes the app (locally and on the display)
        before the new owner registers it. An app that was replaced on its
        owner under the same name is only detached. Passing the current
        owner does nothing; passing None only detaches.
        """
        if device is self._device:
            return

        previous = self._device
        if previous is not None:
            logger.debug(f"Detaching app '{self.name}' from its device")
            try:
                previous.delete_app(self)
            finally:
                self._device = None

        if device is not None:
            device.add_app(self)

    def _bind_device(self, device: AppRegistry | None) -> None:
        """Record the owner without touching any registry (used by Device)."""
        self._device = device

    # =================================================================
    # Remote operations
    # =================================================================

    def push(self) -> Any:
        """Send the payload to the owning device. Does nothing when unattached."""
        if self._device is None:
            logger.debug(f"App '{self.name}' has no device, not pushing")
            return None
        return self._device.push_app(self)

    def delete(self) -> Any:
        """Delete the app from the owning device. Does nothing when unattached."""
        if self._device is None:
            return None
        return self._device.delete_app(self)

    # =================================================================
    # Payload helpers
    # =================================================================

    @staticmethod
    def default_payload() -> dict[str, Any]:
        """Return a new default payload."""
        return default_payload()

    def update(self, **attributes: Any) -> "DisplayApp":
        """
        Set several attributes by semantic name.

        Raises:
            UnknownAttributeError: If a name is not a known attribute
            InvalidColorFormatError: If a color value is invalid

        Example:
            >>> app.update(text="Hello", text_color="red", duration=10)
        """
        for name, value in attributes.items():
            SCHEMA.set(self.payload, name, value)
        return self

    def upcase(self) -> None:
        """Force the text to be shown in uppercase."""
        self.text_case = TextCase.UPCASE

    # =================================================================
    # Attributes
    # =================================================================

    # Text
    text = _attribute("text")
    text_case = _attribute("text_case")
    top_text = _attribute("top_text")
    text_offset = _attribute("text_offset")
    center_text = _attribute("center_text")
    text_color = _attribute("text_color")
    text_gradient = _attribute("text_gradient")
    blink_text = _attribute("blink_text")
    fade_text = _attribute("fade_text")
    rainbow_effect = _attribute("rainbow_effect")
    repeat_text = _attribute("repeat_text")
    scroll_speed = _attribute("scroll_speed")
    disable_scroll = _attribute("disable_scroll")

    # Background and effects
    background_color = _attribute("background_color")
    background_effect = _attribute("background_effect")
    background_effect_settings = _attribute("background_effect_settings")
    overlay_effect = _attribute("overlay_effect")

    # Icon
    icon = _attribute("icon")
    push_icon = _attribute("push_icon")

    # Timing and lifecycle
    display_duration = _attribute("display_duration")
    hold_notification = _attribute("hold_notification")
    lifetime = _attribute("lifetime")
    lifetime_mode = _attribute("lifetime_mode")
    position = _attribute("position")
    save_app = _attribute("save_app")

    # Sound
    sound = _attribute("sound")
    rtttl_sound = _attribute("rtttl_sound")
    loop_sound = _attribute("loop_sound")

    # Charts and drawing
    bar_chart = _attribute("bar_chart")
    line_chart = _attribute("line_chart")
    auto_scale = _attribute("auto_scale")
    autoscale = auto_scale
    progress_bar = _attribute("progress_bar")
    progress_bar_color = _attribute("progress_bar_color")
    progress_bar_background_color = _attribute("progress_bar_background_color")
    draw_commands = _attribute("draw_commands")

    # Notifications
    stack_notifications = _attribute("stack_notifications")
    wakeup_display = _attribute("wakeup_display")
    forward_clients = _attribute("forward_clients")
