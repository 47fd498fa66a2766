"""Power, sleep and sound commands."""

import click

from ..session import device_session


@click.command(name="power")
@click.argument("state", type=click.Choice(["on", "off"], case_sensitive=False))
@click.pass_context
def power(ctx, state):
    """Switch the matrix on or off."""
    with device_session(ctx) as device:
        device.power(state.lower() == "on")
    click.echo(f"Display switched {state.lower()}")


@click.command(name="sleep")
@click.argument("seconds", type=int, default=0)
@click.pass_context
def sleep(ctx, seconds):
    """Put the device to sleep (0 = until woken by the button)."""
    with device_session(ctx) as device:
        device.sleep(seconds)
    click.echo("Device sleeping")


@click.command(name="reset")
@click.pass_context
def reset(ctx):
    """Restart the device."""
    with device_session(ctx) as device:
        device.reset()
    click.echo("Device restarting")


@click.command(name="sound")
@click.argument("name")
@click.pass_context
def sound(ctx, name):
    """Play a sound file stored on the device."""
    with device_session(ctx) as device:
        device.sound(name)


@click.command(name="rtttl")
@click.argument("melody")
@click.pass_context
def rtttl(ctx, melody):
    """Play an RTTTL melody, e.g. 'beep:d=4,o=5,b=120:c'."""
    with device_session(ctx) as device:
        device.rtttl(melody)
