"""Main entry point for ``python -m awtrix_control``."""

from awtrix_control.cli.main import cli

if __name__ == "__main__":
    cli()
