"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from awtrix_control import __version__
from awtrix_control.device import Device
from awtrix_control.models.config import DEFAULT_CONFIG_PATH

from .commands import app_group, config, indicator_group, info_group, notify, power, reset, rtttl, sleep, sound

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the command line client.

    Records from the ``awtrix_control`` package go to stderr, and to a
    rotating log file when one is given.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log everything at DEBUG level
        log_file: Log file path (optional)
        log_level: Log level for the log file (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    package_logger = logging.getLogger("awtrix_control")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    logger_level = level
    if log_file:
        file_level = logging.DEBUG if debug else getattr(logging, log_level.upper())
        log_file.parent.mkdir(parents=True, exist_ok=True)

        # Keeps the last 5 files, max 1MB each
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=5,
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)
        logger_level = min(level, file_level)

    package_logger.setLevel(logger_level)
    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="awtrix")
@click.option(
    "--host",
    "-H",
    envvar="AWTRIX_HOST",
    default=None,
    help="Device IP address or hostname (overrides the configured host)",
)
@click.option(
    "--config-file",
    envvar="AWTRIX_CONFIG",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Configuration file (default: {DEFAULT_CONFIG_PATH})",
)
@click.option(
    "-v", "--verbose",
    count=True,
    help="Increase verbosity (-v: INFO, -vv: DEBUG)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write logs to this file (rotated at 1MB)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    help="Log level for the log file (default: INFO)",
)
def cli(
    ctx,
    host: Optional[str],
    config_file: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
):
    """
    Control an AWTRIX pixel clock over its HTTP API.

    \b
    Examples:
      # Save the device address once
      awtrix config set --host 192.168.1.50

      # Show a notification
      awtrix notify "Build passed" --color green --duration 10

      # Create or update a custom app
      awtrix app push weather --text "21C" --icon 2422

      # Blink the top indicator
      awtrix indicator set top red --effect blink

      # Show the apps running on the device
      awtrix app loop
    """
    setup_logging(verbose, debug, log_file, log_level)

    ctx.ensure_object(dict)
    ctx.obj["host"] = host
    ctx.obj["config_path"] = config_file or DEFAULT_CONFIG_PATH
    ctx.obj.setdefault("device_factory", Device.from_config)


cli.add_command(notify)
cli.add_command(indicator_group)
cli.add_command(power)
cli.add_command(sleep)
cli.add_command(reset)
cli.add_command(sound)
cli.add_command(rtttl)
cli.add_command(app_group)
cli.add_command(info_group)
cli.add_command(config)

if __name__ == "__main__":
    cli()
