"""Shared helpers for CLI commands: opening the device and reporting errors."""

import json
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click

from awtrix_control.device import Device
from awtrix_control.exceptions import AwtrixControlError, format_error_for_display
from awtrix_control.models.config import ClientConfig

logger = logging.getLogger(__name__)


def report_error(error: Exception) -> None:
    """Print an error and its recovery hint to stderr, then exit with code 1."""
    logger.debug("Command failed", exc_info=error)

    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
    sys.exit(1)


def load_config(ctx: click.Context) -> ClientConfig:
    """Load the client configuration selected on the command line."""
    try:
        return ClientConfig.load_or_default(ctx.obj["config_path"])
    except AwtrixControlError as e:
        report_error(e)


@contextmanager
def device_session(ctx: click.Context) -> Iterator[Device]:
    """
    Open the configured device for the duration of a command.

    Library errors raised inside the block are reported and end the
    command with exit code 1.

    Example:
        ```python
        with device_session(ctx) as device:
            device.power(True)
        ```
    """
    config = load_config(ctx)
    try:
        device = ctx.obj["device_factory"](config, ctx.obj.get("host"))
    except AwtrixControlError as e:
        report_error(e)

    with device:
        try:
            yield device
        except AwtrixControlError as e:
            report_error(e)


def parse_assignment(assignment: str) -> tuple[str, Any]:
    """
    Split ``KEY=VALUE`` and decode VALUE as JSON when possible.

    ``duration=10`` gives ``("duration", 10)``, ``text=hi`` gives
    ``("text", "hi")`` and ``bar=[1,2,3]`` gives a list.
    """
    key, sep, raw = assignment.partition("=")
    if not sep or not key:
        raise click.BadParameter(f"expected KEY=VALUE, got {assignment!r}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return key.strip(), value


def echo_json(data: Any) -> None:
    """Pretty-print decoded JSON."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))
