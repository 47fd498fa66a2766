"""awtrix-control: client for AWTRIX pixel clocks over their HTTP API."""

__version__ = "0.1.0"

from .app import DisplayApp
from .colors import COLORS, ColorName, normalize_color
from .device import Device
from .exceptions import AwtrixControlError, InvalidColorFormatError, UnknownAttributeError
from .models import ClientConfig, Color, IndicatorEffect, IndicatorLocation, LifetimeMode, PushIcon, TextCase
from .schema import SCHEMA, default_payload
from .transport import HttpTransport

__all__ = [
    "COLORS",
    "SCHEMA",
    "AwtrixControlError",
    "ClientConfig",
    "Color",
    "ColorName",
    "Device",
    "DisplayApp",
    "HttpTransport",
    "IndicatorEffect",
    "IndicatorLocation",
    "InvalidColorFormatError",
    "LifetimeMode",
    "PushIcon",
    "TextCase",
    "UnknownAttributeError",
    "default_payload",
    "normalize_color",
]
