"""Data models."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, ClientConfig
from .enums import IndicatorEffect, IndicatorLocation, LifetimeMode, PushIcon, TextCase

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ClientConfig",
    "Color",
    "IndicatorEffect",
    "IndicatorLocation",
    "LifetimeMode",
    "PushIcon",
    "TextCase",
]
