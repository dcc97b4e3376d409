"""Hourly-rate widget commands."""

import click

from cltcalc.sdk.formatting import format_currency
from cltcalc.sdk.hourly import HourlyRateWidget, JsonFileStore

from .common import echo_json, format_option, resolve_format


@click.group()
def hourly():
    """How much your hour is worth (saved between runs)."""
    pass


def _show(widget: HourlyRateWidget, output_format: str) -> None:
    if resolve_format(output_format) == "json":
        echo_json(widget.to_dict())
        return

    rates = widget.rates()
    if rates is None:
        click.echo("No salary saved yet. Set one with: clt-calc hourly set SALARY")
        return

    click.echo(f"Monthly salary: {format_currency(widget.data.monthly_salary)}")
    click.echo(f"Weekly hours:   {widget.data.weekly_hours:g}")
    click.echo(f"Hour:           {format_currency(rates.hour_rate)}")
    click.echo(f"Minute:         {format_currency(rates.minute_rate)}")


@hourly.command("show")
@format_option
def hourly_show(output_format):
    """Show the saved salary and derived hourly/minute rates."""
    _show(HourlyRateWidget(JsonFileStore()), output_format)


@hourly.command("set")
@click.argument("salary", type=float)
@click.option("--weekly-hours", type=float, default=None, help="Contracted weekly hours")
@format_option
def hourly_set(salary, weekly_hours, output_format):
    """Save a monthly SALARY and show the rates."""
    widget = HourlyRateWidget(JsonFileStore())
    widget.update(monthly_salary=salary, weekly_hours=weekly_hours)
    _show(widget, output_format)
