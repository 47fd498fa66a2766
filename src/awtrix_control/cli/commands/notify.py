"""Notification command."""

import click

from ..session import device_session, parse_assignment


@click.command(name="notify")
@click.argument("text")
@click.option("--color", "-c", default=None, help="Text color (name or hex, e.g. red or #ff0000)")
@click.option("--icon", "-i", default=None, help="Icon ID or filename")
@click.option("--duration", "-d", type=int, default=None, help="Seconds to show the notification")
@click.option("--hold", is_flag=True, help="Keep the notification until dismissed on the device")
@click.option("--sound", "-s", default=None, help="Sound to play with the notification")
@click.option("--rainbow", is_flag=True, help="Rainbow-colored text")
@click.option(
    "--option",
    "-o",
    "extra",
    multiple=True,
    metavar="KEY=VALUE",
    help="Any other attribute or API key (repeatable), e.g. -o wakeup=true",
)
@click.pass_context
def notify(ctx, text, color, icon, duration, hold, sound, rainbow, extra):
    """Show a one-off notification."""
    options = dict(parse_assignment(item) for item in extra)
    if color is not None:
        options["text_color"] = color
    if icon is not None:
        options["icon"] = icon
    if duration is not None:
        options["display_duration"] = duration
    if hold:
        options["hold_notification"] = True
    if sound is not None:
        options["sound"] = sound
    if rainbow:
        options["rainbow_effect"] = True

    with device_session(ctx) as device:
        device.notify(text, **options)
    click.echo("Notification sent")
