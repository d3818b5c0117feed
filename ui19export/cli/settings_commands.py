"""Settings CLI commands for UI-19 Export.

Manages settings.json - output directory and default target system.
"""

import click

from ui19export.sdk import (
    ConfigError,
    SETTING_KEYS,
    get_data_path,
    get_output_dir,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    \b
    Available settings:
    - output_dir: directory export files are written to
    - default_system: target system used when --system is omitted
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    try:
        current = load_settings()
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective paths:")
    if current.get("output_dir"):
        click.echo(f"  output_dir: {get_output_dir()}")
    else:
        click.echo(f"  output_dir: {get_data_path() / 'exports'} (default)")


@settings.command("set")
@click.argument("key", type=click.Choice(SETTING_KEYS))
@click.argument("value")
def settings_set(key, value):
    """Set a setting value.

    \b
    Examples:
        ui19-export settings set default_system sage
        ui19-export settings set output_dir ~/exports/uif
    """
    try:
        path = set_setting(key, value)
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {load_settings()[key]}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key", type=click.Choice(SETTING_KEYS))
def settings_unset(key):
    """Clear a setting, reverting to its default."""
    try:
        removed = unset_setting(key)
    except ConfigError as e:
        raise click.ClickException(str(e))

    if removed:
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
