"""
Configuration commands.

Commands:
    - config show                         # Display configuration
    - config set --host HOST --timeout S  # Update configuration
    - config reset                        # Reset to defaults
"""

import click
from pydantic import ValidationError

from awtrix_control.exceptions import wrap_pydantic_error
from awtrix_control.models.config import ClientConfig

from ..session import load_config, report_error


@click.group(name="config")
def config():
    """Show or change the client configuration."""
    pass


@config.command(name="show")
@click.pass_context
def show_config(ctx):
    """Display the configuration."""
    path = ctx.obj["config_path"]
    current = load_config(ctx)

    click.echo(f"Config file: {path}{'' if path.exists() else ' (not created yet)'}\n")
    for field_name, field_info in ClientConfig.model_fields.items():
        value = getattr(current, field_name)
        click.echo(f"  {field_name}: {value if value is not None else '(not set)'}")
        click.echo(f"      {field_info.description}")


@config.command(name="set")
@click.option("--host", default=None, help="Device IP address or hostname")
@click.option("--timeout", type=float, default=None, help="HTTP request timeout in seconds")
@click.pass_context
def set_config(ctx, host, timeout):
    """Update configuration values and save them."""
    updates = {key: value for key, value in (("host", host), ("timeout", timeout)) if value is not None}
    if not updates:
        raise click.UsageError("Nothing to set, pass --host and/or --timeout")

    path = ctx.obj["config_path"]
    current = load_config(ctx)
    try:
        updated = ClientConfig.model_validate({**current.model_dump(), **updates})
    except ValidationError as e:
        report_error(wrap_pydantic_error(e, str(path)))

    updated.save(path)
    for key, value in updates.items():
        click.echo(f"{key} = {value}")
    click.echo(f"Saved to {path}")


@config.command(name="reset")
@click.confirmation_option(prompt="Reset the configuration to defaults?")
@click.pass_context
def reset_config(ctx):
    """Reset the configuration to defaults."""
    path = ctx.obj["config_path"]
    ClientConfig().save(path)
    click.echo(f"Configuration reset ({path})")
