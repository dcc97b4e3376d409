"""Settings CLI commands for CLT Calc.

Manages settings.json - default tax year, alternate tables, output format.
"""

from pathlib import Path

import click

from cltcalc.sdk import (
    KNOWN_SETTINGS,
    ConfigNotFoundError,
    get_available_years,
    get_settings_path,
    load_settings,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_year: default year of the tax tables
    - tax_rules_dir: directory with alternate <year>.yaml tables
    - default_output_format: table or json
    """
    pass


def _load_or_fail() -> dict:
    try:
        return load_settings()
    except ConfigNotFoundError as e:
        raise click.ClickException(str(e))


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = _load_or_fail()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
        return

    click.echo("Current settings:")
    for key, value in current.items():
        click.echo(f"  {key}: {value}")


@settings.command("set")
@click.argument("key", type=click.Choice(sorted(KNOWN_SETTINGS)))
@click.argument("value")
def settings_set(key, value):
    """Set a setting KEY to VALUE.

    Examples:
        clt-calc settings set tax_year 2024
        clt-calc settings set default_output_format json
    """
    _load_or_fail()

    if key == "tax_year":
        if not value.isdigit() or len(value) != 4:
            raise click.BadParameter(f"Invalid year '{value}'. Must be 4 digits.")
        value = int(value)
    elif key == "default_output_format":
        if value not in ("table", "json"):
            raise click.BadParameter(f"Invalid format '{value}'. Use 'table' or 'json'.")
    elif key == "tax_rules_dir":
        rules_dir = Path(value).expanduser().resolve()
        if not rules_dir.is_dir():
            raise click.ClickException(f"Not a directory: {rules_dir}")
        if not get_available_years(rules_dir):
            raise click.ClickException(f"No <year>.yaml tax tables found in {rules_dir}")
        value = str(rules_dir)

    set_setting(key, value)
    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {get_settings_path()}")


@settings.command("unset")
@click.argument("key", type=click.Choice(sorted(KNOWN_SETTINGS)))
def settings_unset(key):
    """Clear a setting, reverting to its default."""
    _load_or_fail()
    if unset_setting(key):
        click.echo(f"Cleared {key}.")
    else:
        click.echo(f"{key} was not set.")
