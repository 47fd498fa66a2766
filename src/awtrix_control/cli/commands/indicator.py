"""Indicator commands."""

import click

from awtrix_control.models.enums import IndicatorEffect, IndicatorLocation

from ..session import device_session

LOCATIONS = click.Choice([location.value for location in IndicatorLocation], case_sensitive=False)


@click.group(name="indicator")
def indicator_group():
    """Control the three status indicators."""
    pass


@indicator_group.command(name="set")
@click.argument("location", type=LOCATIONS)
@click.argument("color", default="white")
@click.option(
    "--effect",
    "-e",
    type=click.Choice([effect.value for effect in IndicatorEffect], case_sensitive=False),
    default=None,
    help="Blink or pulse the indicator",
)
@click.option("--frequency", "-f", type=click.IntRange(min=1), default=None,
              help="Effect period in ms (default: 500 for blink, 2000 for pulse)")
@click.pass_context
def set_indicator(ctx, location, color, effect, frequency):
    """Light an indicator (top, center or bottom)."""
    with device_session(ctx) as device:
        device.indicator(location, color, effect=effect, frequency=frequency)
    click.echo(f"Indicator {location.lower()} set")


@indicator_group.command(name="clear")
@click.argument("location", type=LOCATIONS, required=False)
@click.pass_context
def clear_indicator(ctx, location):
    """Turn one indicator off, or all of them when no location is given."""
    with device_session(ctx) as device:
        if location is None:
            device.remove_indicators()
        else:
            device.remove_indicator(location)
    click.echo("Indicators cleared" if location is None else f"Indicator {location.lower()} cleared")
