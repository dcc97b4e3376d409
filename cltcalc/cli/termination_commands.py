"""Termination (rescisao) CLI command."""

from pathlib import Path

import click
from rich.console import Console

from cltcalc.sdk.termination import (
    InputValidationError,
    NoticeType,
    TerminationInputs,
    TerminationReason,
    allowed_notice_types,
    calculate_termination,
    validate_inputs,
)

from .common import echo_json, format_option, load_rules, resolve_format, to_jsonable, year_option
from .renderers.termination_renderer import render_termination, termination_statement_text

DATE_FORMATS = ["%Y-%m-%d", "%d/%m/%Y"]


@click.command("termination")
@click.argument("salary", type=float)
@click.argument("start_date", type=click.DateTime(formats=DATE_FORMATS))
@click.argument("end_date", type=click.DateTime(formats=DATE_FORMATS))
@click.option("--reason", "-r", type=click.Choice([r.value for r in TerminationReason]),
              default=TerminationReason.DISMISSAL_NO_CAUSE.value, show_default=True,
              help="Termination reason")
@click.option("--notice", "-n", type=click.Choice([n.value for n in NoticeType]), default=None,
              help="Notice handling (default: first one valid for the reason)")
@click.option("--overdue-days", type=int, default=0, help="Vested vacation days not yet taken")
@click.option("--fgts", "fgts_balance", type=float, default=0.0, help="FGTS balance for the fine")
@click.option("--dependents", "-d", type=int, default=0, help="Dependents for IRRF")
@click.option("--thirteenth-advanced", is_flag=True, help="First 13th installment already paid this year")
@click.option("--strict", is_flag=True, help="Refuse inconsistent inputs instead of warning")
@click.option("--output", "-o", type=click.Path(dir_okay=False), default=None,
              help="Also save the statement as plain text to this file")
@year_option
@format_option
def termination(salary, start_date, end_date, reason, notice, overdue_days, fgts_balance,
                dependents, thirteenth_advanced, strict, output, year, output_format):
    """Estimate severance pay for a terminated contract.

    SALARY is the monthly gross salary. START_DATE and END_DATE are the
    contract start and last worked day (YYYY-MM-DD or DD/MM/YYYY).

    Examples:
        clt-calc termination 3000 2023-01-10 2024-01-10 --fgts 8000
        clt-calc termination 3000 2022-03-01 2024-05-20 -r resignation -n not_fulfilled
    """
    reason = TerminationReason(reason)
    notice_type = NoticeType(notice) if notice else allowed_notice_types(reason)[0]

    inputs = TerminationInputs(
        salary=salary,
        start_date=start_date.date(),
        end_date=end_date.date(),
        reason=reason,
        notice_type=notice_type,
        vacation_overdue_days=overdue_days,
        fgts_balance=fgts_balance,
        dependents=dependents,
        thirteenth_advanced=thirteenth_advanced,
    )

    validation = validate_inputs(inputs)
    if strict:
        try:
            validation.raise_for_errors()
        except InputValidationError as e:
            raise click.ClickException(str(e))
    warnings = validation.errors + validation.warnings

    rules = load_rules(year)
    result = calculate_termination(inputs, rules)

    if resolve_format(output_format) == "json":
        echo_json({
            "inputs": to_jsonable(inputs),
            "result": to_jsonable(result),
            "warnings": warnings,
        })
    else:
        render_termination(Console(), inputs, result, warnings)

    if output:
        try:
            Path(output).write_text(termination_statement_text(inputs, result), encoding="utf-8")
        except OSError as e:
            raise click.ClickException(f"Could not save statement to {output}: {e}")
        click.echo(f"Saved statement to {output}", err=True)
