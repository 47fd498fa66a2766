"""Custom app commands."""

import click

from ..session import device_session, parse_assignment


@click.group(name="app")
def app_group():
    """Create, update and delete custom apps."""
    pass


@app_group.command(name="push")
@click.argument("name")
@click.option("--text", "-t", default=None, help="Text to display")
@click.option("--color", "-c", default=None, help="Text color (name or hex)")
@click.option("--icon", "-i", default=None, help="Icon ID or filename")
@click.option("--duration", "-d", type=int, default=None, help="Seconds the app is shown")
@click.option(
    "--set",
    "-s",
    "assignments",
    multiple=True,
    metavar="ATTRIBUTE=VALUE",
    help="Any other app attribute (repeatable), e.g. -s push_icon=loop -s progress_bar=40",
)
@click.pass_context
def push_app(ctx, name, text, color, icon, duration, assignments):
    """
    Create or update the custom app NAME.

    Attributes start from the defaults on every push, so pass everything
    the app should show.
    """
    attributes = dict(parse_assignment(item) for item in assignments)
    if text is not None:
        attributes["text"] = text
    if color is not None:
        attributes["text_color"] = color
    if icon is not None:
        attributes["icon"] = icon
    if duration is not None:
        attributes["display_duration"] = duration

    with device_session(ctx) as device:
        app = device.new_app(name, **attributes)
        app.push()
    click.echo(f"App '{name}' pushed")


@app_group.command(name="delete")
@click.argument("name")
@click.pass_context
def delete_app(ctx, name):
    """Delete the custom app NAME."""
    with device_session(ctx) as device:
        device.delete_app(name)
    click.echo(f"App '{name}' deleted")


@app_group.command(name="clear")
@click.confirmation_option(prompt="Delete every app in the device loop?")
@click.pass_context
def clear_apps(ctx):
    """Delete every app running on the device."""
    with device_session(ctx) as device:
        device.delete_all_apps()
    click.echo("All apps deleted")


@app_group.command(name="loop")
@click.pass_context
def show_loop(ctx):
    """List the apps running on the device in loop order."""
    with device_session(ctx) as device:
        loop = device.loop()

    if not loop:
        click.echo("No apps in the loop.")
        return

    for name, index in sorted(loop.items(), key=lambda item: item[1]):
        click.echo(f"  [{index}] {name}")
