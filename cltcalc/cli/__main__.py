"""CLT Calc CLI - Command-line interface for severance and payroll estimates."""

import click

from cltcalc import __version__
from cltcalc.sdk import configure_logging

from .calc_commands import (
    clt_vs_pj,
    domestic,
    exit_date,
    fgts,
    invest,
    net_salary,
    night_shift,
    overtime,
    survival,
    thirteenth,
    unemployment,
    vacation,
    work_schedule,
)
from .hourly_commands import hourly as hourly_group
from .settings_commands import settings as settings_group
from .tables_commands import tables as tables_group
from .termination_commands import termination


@click.group()
@click.version_option(version=__version__, prog_name="clt-calc")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging (overrides LOG_LEVEL)")
def cli(verbose):
    """CLT Calc - Brazilian severance, payroll and benefit estimates.

    Amounts are estimates under CLT rules and the official yearly tables;
    they are not a legal calculation.

    Settings are loaded from (in order):

    \b
    1. CLT_CALC_CONFIG_PATH environment variable
    2. ~/.config/clt-calc/settings.json (XDG default)

    Run 'clt-calc tables show' to see the tables in use.
    """
    configure_logging("DEBUG" if verbose else None)


# Calculators
cli.add_command(termination)
cli.add_command(unemployment)
cli.add_command(vacation)
cli.add_command(overtime)
cli.add_command(night_shift)
cli.add_command(net_salary)
cli.add_command(fgts)
cli.add_command(invest)
cli.add_command(exit_date)
cli.add_command(thirteenth)
cli.add_command(domestic)
cli.add_command(clt_vs_pj)
cli.add_command(work_schedule)
cli.add_command(survival)

# Subcommand groups
cli.add_command(hourly_group)
cli.add_command(tables_group)
cli.add_command(settings_group)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
