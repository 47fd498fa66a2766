"""CLI commands for awtrix-control."""

from .app import app_group
from .config import config
from .indicator import indicator_group
from .info import info_group
from .notify import notify
from .system import power, reset, rtttl, sleep, sound

__all__ = [
    "app_group",
    "config",
    "indicator_group",
    "info_group",
    "notify",
    "power",
    "reset",
    "rtttl",
    "sleep",
    "sound",
]
