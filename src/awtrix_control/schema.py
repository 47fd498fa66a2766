"""Pydantic models and table for the app attribute schema.

The device API uses short camelCase JSON keys (``textCase``, ``progressBC``).
This module maps every key to a stable snake_case attribute name, records
its default and the coercion applied on write, and exposes a generic
:class:`AttributeSchema` that reads and writes payload dicts through that
table.

How a value travels to the device
---------------------------------

::

    app.push_icon = "loop"
            ↓
    SCHEMA.set(payload, "push_icon", "loop")
            ↓  descriptor: wire_key="pushIcon", kind=ENUM, codec=PushIcon
    payload["pushIcon"] = 2
            ↓
    Device.push_app(app)  →  POST /api/custom?name=...  {"name": ..., "pushIcon": 2}

Coercion rules
--------------

======== ===================================== =====================================
kind     on write                              on read
======== ===================================== =====================================
RAW      stored verbatim                       returned verbatim
INTEGER  ``int()``, non-numeric input → 0      verbatim (or coerced again if
                                               ``coerce_on_read``)
BOOLEAN  ``bool()``                            verbatim
COLOR    :func:`normalize_color`               verbatim
GRADIENT ``[from_hex, to_hex]``                ``{"from": ..., "to": ...}``
ENUM     token → int, unknown passes through   int → token, unknown → ``None``
======== ===================================== =====================================

Only :class:`InvalidColorFormatError` is raised for bad values; everything
else is accepted, mirroring the device's own tolerant JSON handling.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, MutableMapping, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from awtrix_control.colors import normalize_color
from awtrix_control.exceptions import InvalidColorFormatError, UnknownAttributeError
from awtrix_control.models.enums import LifetimeMode, PushIcon, TextCase

logger = logging.getLogger(__name__)


class AttributeKind(str, Enum):
    """Coercion applied when an attribute is written or read."""

    RAW = "raw"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    COLOR = "color"
    GRADIENT = "gradient"
    ENUM = "enum"


class EnumCodec(BaseModel):
    """Bidirectional mapping between enum tokens and their wire integers."""

    model_config = ConfigDict(frozen=True)

    token_type: type[Enum] = Field(description="Enum whose members are the tokens")
    codes: dict[str, int] = Field(description="Token value -> wire integer")

    @classmethod
    def for_enum(cls, token_type: type[Enum]) -> "EnumCodec":
        """Number the members of ``token_type`` in declaration order."""
        return cls(
            token_type=token_type,
            codes={member.value: index for index, member in enumerate(token_type)},
        )

    def encode(self, value: Any) -> Any:
        """Return the wire integer for a token, or ``value`` unchanged."""
        if isinstance(value, str) and value in self.codes:
            return self.codes[value]
        return value

    def decode(self, raw: Any) -> Enum | None:
        """Return the token for a wire integer, or None if there is none."""
        if isinstance(raw, bool) or not isinstance(raw, int):
            return None
        for token, code in self.codes.items():
            if code == raw:
                return self.token_type(token)
        return None


class AttributeDescriptor(BaseModel):
    """One semantic attribute and how it maps onto the wire payload.

    A default is only *declared* when it was passed explicitly, so
    ``False``, ``0`` and ``-1`` count as defaults while an omitted default
    keeps the key out of :meth:`AttributeSchema.default_payload`.
    """

    model_config = ConfigDict(frozen=True)

    semantic_name: str = Field(min_length=1, description="snake_case attribute name")
    wire_key: str = Field(min_length=1, description="JSON key used by the device API")
    default: Any = Field(default=None, description="Value in the default payload")
    kind: AttributeKind = Field(default=AttributeKind.RAW, description="Coercion rule")
    codec: EnumCodec | None = Field(default=None, description="Token codec for ENUM attributes")
    coerce_on_read: bool = Field(
        default=False, description="Coerce INTEGER values again when reading"
    )
    description: str = Field(default="", description="Human readable summary")

    @model_validator(mode="after")
    def check_codec(self) -> "AttributeDescriptor":
        """Ensure ENUM attributes carry a codec and only they do."""
        if (self.kind is AttributeKind.ENUM) != (self.codec is not None):
            raise ValueError(f"{self.semantic_name}: a codec is required for ENUM attributes only")
        return self

    @property
    def has_default(self) -> bool:
        """True if a default was declared for this attribute."""
        return "default" in self.model_fields_set


def coerce_int(value: Any) -> int:
    """Coerce ``value`` to int, falling back to 0 for non-numeric input."""
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Cannot coerce {value!r} to int, storing 0")
        return 0


def _split_gradient(value: Any) -> tuple[Any, Any]:
    """Return the (from, to) colors of a gradient given as mapping or pair."""
    if isinstance(value, Mapping):
        return value.get("from"), value.get("to")
    if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
        return value[0], value[1]
    raise InvalidColorFormatError(value, "a gradient needs a 'from' and a 'to' color")


class AttributeSchema:
    """
    Generic reader/writer for app payloads driven by attribute descriptors.

    The schema is the single source of truth for key names, defaults and
    coercion. ``DisplayApp`` properties and ``Device.notify()`` both go
    through it.

    Example:
        ```python
        payload = SCHEMA.default_payload()
        SCHEMA.set(payload, "text_color", "red")
        SCHEMA.get(payload, "text_color")    # '#ff0000'
        payload["color"]                     # '#ff0000'
        ```
    """

    def __init__(
        self,
        descriptors: Iterable[AttributeDescriptor],
        aliases: Mapping[str, str] | None = None,
    ):
        """
        Build the lookup tables.

        Args:
            descriptors: Attribute descriptors, semantic names must be unique
            aliases: Extra names resolving to an existing semantic name

        Raises:
            ValueError: If a semantic name is declared twice or an alias
                points to an unknown attribute
        """
        self._by_name: dict[str, AttributeDescriptor] = {}
        self._by_wire_key: dict[str, AttributeDescriptor] = {}

        for descriptor in descriptors:
            if descriptor.semantic_name in self._by_name:
                raise ValueError(f"Duplicate attribute name: {descriptor.semantic_name}")
            self._by_name[descriptor.semantic_name] = descriptor
            self._by_wire_key.setdefault(descriptor.wire_key, descriptor)

        self._aliases = dict(aliases or {})
        for alias, target in self._aliases.items():
            if target not in self._by_name:
                raise ValueError(f"Alias {alias!r} points to unknown attribute {target!r}")

    def __iter__(self) -> Iterator[AttributeDescriptor]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name or name in self._aliases

    @property
    def wire_keys(self) -> set[str]:
        """All wire keys the schema can write."""
        return set(self._by_wire_key)

    def descriptor(self, name: str) -> AttributeDescriptor:
        """
        Look up a descriptor by semantic name or alias.

        Raises:
            UnknownAttributeError: If the name is not part of the schema
        """
        name = self._aliases.get(name, name)
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownAttributeError(name) from None

    def descriptor_for_wire_key(self, wire_key: str) -> AttributeDescriptor | None:
        """Look up a descriptor by wire key, or None if no attribute uses it."""
        return self._by_wire_key.get(wire_key)

    def default_payload(self) -> dict[str, Any]:
        """Return a new payload containing every declared default."""
        return {d.wire_key: d.default for d in self if d.has_default}

    def encode(self, name: str, value: Any) -> Any:
        """Convert a semantic value to the value stored on the wire."""
        descriptor = self.descriptor(name)
        kind = descriptor.kind

        if kind is AttributeKind.INTEGER:
            return coerce_int(value)
        if kind is AttributeKind.BOOLEAN:
            return bool(value)
        if kind is AttributeKind.COLOR:
            return normalize_color(value)
        if kind is AttributeKind.GRADIENT:
            start, end = _split_gradient(value)
            return [normalize_color(start), normalize_color(end)]
        if kind is AttributeKind.ENUM:
            return descriptor.codec.encode(value)
        return value

    def decode(self, name: str, raw: Any) -> Any:
        """Convert a stored wire value (None when unset) to its semantic value."""
        descriptor = self.descriptor(name)
        kind = descriptor.kind

        if kind is AttributeKind.ENUM:
            return descriptor.codec.decode(raw)
        if kind is AttributeKind.GRADIENT:
            if raw is None:
                return {"from": None, "to": None}
            start, end = (list(raw) + [None, None])[:2]
            return {"from": start, "to": end}
        if kind is AttributeKind.INTEGER and descriptor.coerce_on_read:
            return coerce_int(raw)
        return raw

    def get(self, payload: Mapping[str, Any], name: str) -> Any:
        """Read attribute ``name`` from ``payload``; unset keys decode to None."""
        descriptor = self.descriptor(name)
        return self.decode(name, payload.get(descriptor.wire_key))

    def set(self, payload: MutableMapping[str, Any], name: str, value: Any) -> MutableMapping[str, Any]:
        """Write attribute ``name`` into ``payload`` and return the payload."""
        descriptor = self.descriptor(name)
        payload[descriptor.wire_key] = self.encode(name, value)
        return payload


_TEXT_CASE = EnumCodec.for_enum(TextCase)
_PUSH_ICON = EnumCodec.for_enum(PushIcon)
_LIFETIME_MODE = EnumCodec.for_enum(LifetimeMode)

INTEGER = AttributeKind.INTEGER
BOOLEAN = AttributeKind.BOOLEAN
COLOR = AttributeKind.COLOR

# Order follows the device API documentation for custom apps.
ATTRIBUTES: tuple[AttributeDescriptor, ...] = (
    AttributeDescriptor(semantic_name="text", wire_key="text",
                        description="Text to display"),
    AttributeDescriptor(semantic_name="text_case", wire_key="textCase", default=0,
                        kind=AttributeKind.ENUM, codec=_TEXT_CASE,
                        description="Text case: default, upcase or as_is"),
    AttributeDescriptor(semantic_name="top_text", wire_key="topText", default=False, kind=BOOLEAN,
                        description="Draw the text on top"),
    AttributeDescriptor(semantic_name="text_offset", wire_key="textOffset", default=0, kind=INTEGER,
                        description="X offset of the starting text"),
    AttributeDescriptor(semantic_name="center_text", wire_key="center", default=True, kind=BOOLEAN,
                        description="Center short, non-scrolling text"),
    AttributeDescriptor(semantic_name="text_color", wire_key="color", kind=COLOR,
                        description="Text color"),
    AttributeDescriptor(semantic_name="text_gradient", wire_key="gradient",
                        kind=AttributeKind.GRADIENT,
                        description="Two-color text gradient"),
    AttributeDescriptor(semantic_name="blink_text", wire_key="blinkText", kind=INTEGER,
                        coerce_on_read=True,
                        description="Blink interval of the text in ms"),
    AttributeDescriptor(semantic_name="fade_text", wire_key="fadeText", kind=INTEGER,
                        coerce_on_read=True,
                        description="Fade interval of the text in ms"),
    AttributeDescriptor(semantic_name="background_color", wire_key="background", kind=COLOR,
                        description="Background color"),
    AttributeDescriptor(semantic_name="rainbow_effect", wire_key="rainbow", kind=BOOLEAN,
                        description="Rainbow-colored text"),
    AttributeDescriptor(semantic_name="icon", wire_key="icon",
                        description="Icon ID or filename without extension"),
    AttributeDescriptor(semantic_name="push_icon", wire_key="pushIcon", default=0,
                        kind=AttributeKind.ENUM, codec=_PUSH_ICON,
                        description="Icon behaviour: fixed, scroll_once or loop"),
    AttributeDescriptor(semantic_name="repeat_text", wire_key="repeat", default=-1, kind=INTEGER,
                        description="Times the text scrolls before the app ends (-1 = duration)"),
    AttributeDescriptor(semantic_name="display_duration", wire_key="duration", default=5,
                        kind=INTEGER,
                        description="Seconds the app is shown"),
    AttributeDescriptor(semantic_name="hold_notification", wire_key="hold", default=False,
                        kind=BOOLEAN,
                        description="Keep a notification until dismissed"),
    AttributeDescriptor(semantic_name="sound", wire_key="sound",
                        description="RTTTL file name or 4-digit MP3 number"),
    AttributeDescriptor(semantic_name="rtttl_sound", wire_key="rtttl",
                        description="RTTTL melody string"),
    AttributeDescriptor(semantic_name="loop_sound", wire_key="loopSound", default=False,
                        kind=BOOLEAN,
                        description="Loop the sound while the notification is shown"),
    AttributeDescriptor(semantic_name="bar_chart", wire_key="bar",
                        description="Bar chart values"),
    AttributeDescriptor(semantic_name="line_chart", wire_key="line",
                        description="Line chart values"),
    AttributeDescriptor(semantic_name="auto_scale", wire_key="autoScale", default=True,
                        kind=BOOLEAN,
                        description="Scale bar and line charts automatically"),
    AttributeDescriptor(semantic_name="progress_bar", wire_key="progress", default=-1,
                        kind=INTEGER,
                        description="Progress bar value 0-100 (-1 = hidden)"),
    AttributeDescriptor(semantic_name="progress_bar_color", wire_key="progressC", default=-1,
                        kind=COLOR,
                        description="Progress bar color"),
    AttributeDescriptor(semantic_name="progress_bar_background_color", wire_key="progressBC",
                        default=-1, kind=COLOR,
                        description="Progress bar background color"),
    AttributeDescriptor(semantic_name="position", wire_key="pos",
                        description="Position of the app in the loop, starting at 0"),
    AttributeDescriptor(semantic_name="draw_commands", wire_key="draw",
                        description="Drawing instructions"),
    AttributeDescriptor(semantic_name="lifetime", wire_key="lifetime", default=0, kind=INTEGER,
                        description="Seconds without update before the app expires (0 = never)"),
    AttributeDescriptor(semantic_name="lifetime_mode", wire_key="lifetimeMode", default=0,
                        kind=AttributeKind.ENUM, codec=_LIFETIME_MODE,
                        description="On expiry: destroy or stale"),
    AttributeDescriptor(semantic_name="stack_notifications", wire_key="stack", default=True,
                        kind=BOOLEAN,
                        description="Stack the notification instead of replacing the current one"),
    AttributeDescriptor(semantic_name="wakeup_display", wire_key="wakeup", default=False,
                        kind=BOOLEAN,
                        description="Wake the display for the notification"),
    AttributeDescriptor(semantic_name="disable_scroll", wire_key="noScroll", default=False,
                        kind=BOOLEAN,
                        description="Disable text scrolling"),
    AttributeDescriptor(semantic_name="forward_clients", wire_key="clients",
                        description="Other device addresses to forward notifications to"),
    AttributeDescriptor(semantic_name="scroll_speed", wire_key="scrollSpeed", default=100,
                        kind=INTEGER,
                        description="Scroll speed as a percentage of the original speed"),
    AttributeDescriptor(semantic_name="background_effect", wire_key="effect",
                        description="Background effect name"),
    AttributeDescriptor(semantic_name="background_effect_settings", wire_key="effectSettings",
                        description="Background effect settings"),
    AttributeDescriptor(semantic_name="save_app", wire_key="save", kind=BOOLEAN,
                        description="Persist the app in flash memory"),
    AttributeDescriptor(semantic_name="overlay_effect", wire_key="overlay",
                        description="Overlay effect name"),
)

SCHEMA = AttributeSchema(ATTRIBUTES, aliases={"autoscale": "auto_scale"})


def default_payload() -> dict[str, Any]:
    """Return a new default app payload."""
    return SCHEMA.default_payload()


__all__ = [
    "ATTRIBUTES",
    "SCHEMA",
    "AttributeDescriptor",
    "AttributeKind",
    "AttributeSchema",
    "EnumCodec",
    "coerce_int",
    "default_payload",
]
