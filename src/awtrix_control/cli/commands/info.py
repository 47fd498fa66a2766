"""Device information commands."""

import click

from ..session import device_session, echo_json


@click.group(name="info")
def info_group():
    """Query device information."""
    pass


@info_group.command(name="stats")
@click.pass_context
def stats(ctx):
    """Show device statistics (version, battery, uptime, ...)."""
    with device_session(ctx) as device:
        echo_json(device.stats())


@info_group.command(name="effects")
@click.pass_context
def effects(ctx):
    """List the available background effects."""
    with device_session(ctx) as device:
        for name in device.effects():
            click.echo(name)


@info_group.command(name="transitions")
@click.pass_context
def transitions(ctx):
    """List the available app transitions."""
    with device_session(ctx) as device:
        for name in device.transitions():
            click.echo(name)


@info_group.command(name="screen")
@click.pass_context
def screen(ctx):
    """Dump the current matrix content as JSON."""
    with device_session(ctx) as device:
        echo_json(device.screen())
