"""Rich renderer for termination statements.

Transforms a CalculationResult into formatted Rich tables. The same
rendering is recorded to plain text for file export.
"""

import io
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from cltcalc.sdk.formatting import amount_in_words, format_currency, format_date
from cltcalc.sdk.termination import CalculationResult, TerminationInputs

DISCLAIMER = "Estimativa. Não substitui o cálculo oficial da rescisão (TRCT)."


def render_termination(
    console: Console,
    inputs: TerminationInputs,
    result: CalculationResult,
    warnings: Optional[List[str]] = None,
) -> None:
    """Render a termination statement.

    Args:
        console: Rich Console instance
        inputs: Facts the result was computed from
        result: Engine output
        warnings: Validation warnings to show first
    """
    for warning in warnings or []:
        console.print(Panel(f"[yellow]{warning}[/yellow]", title="Note", border_style="yellow"))

    _render_facts(console, inputs, result)
    _render_amounts(console, result)

    console.print(
        f"[bold]Líquido a receber: {format_currency(result.total_net)}[/bold]"
        f" ({amount_in_words(result.total_net)})"
    )
    console.print(f"[dim]{DISCLAIMER}[/dim]")


def _render_facts(console: Console, inputs: TerminationInputs, result: CalculationResult) -> None:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    meta = result.meta
    table.add_row("Motivo", inputs.reason.label)
    table.add_row("Aviso prévio", f"{inputs.notice_type.label} ({meta.notice_days} dias)")
    table.add_row("Admissão", format_date(inputs.start_date))
    table.add_row("Desligamento", format_date(inputs.end_date))
    table.add_row("Data projetada", format_date(meta.projected_date))
    table.add_row("Anos trabalhados", str(meta.years_worked))
    table.add_row("Avos (férias / 13º)", f"{meta.vacation_months}/12 - {meta.thirteenth_months}/12")
    table.add_row("Tabelas", str(meta.tax_year))

    console.print(Panel(table, title="Rescisão", border_style="dim"))


def _render_amounts(console: Console, result: CalculationResult) -> None:
    table = Table(box=box.SIMPLE, show_footer=True)
    table.add_column("Verba", footer="Totais")
    table.add_column("Proventos", justify="right", footer=format_currency(result.total_gross))
    table.add_column("Descontos", justify="right", footer=format_currency(result.total_discounts))

    earnings = result.earnings
    discounts = result.discounts

    table.add_row("Saldo de salário", format_currency(earnings.salary_balance), "")
    if earnings.notice_indemnified:
        table.add_row("Aviso prévio indenizado", format_currency(earnings.notice_indemnified), "")
    if result.vacation_due:
        table.add_row("Férias vencidas", format_currency(result.vacation_due), "")
    table.add_row("Férias proporcionais", format_currency(result.vacation_proportional), "")
    table.add_row("1/3 constitucional", format_currency(result.vacation_third), "")
    table.add_row("13º proporcional", format_currency(earnings.thirteenth_total), "")
    if earnings.fgts_fine:
        table.add_row("Multa FGTS", format_currency(earnings.fgts_fine), "")

    table.add_row("INSS", "", format_currency(discounts.inss))
    table.add_row("IRRF", "", format_currency(discounts.irrf))
    if discounts.notice_deduction:
        table.add_row("Aviso prévio não cumprido", "", format_currency(discounts.notice_deduction))
    if discounts.thirteenth_advance:
        table.add_row("Adiantamento 13º", "", format_currency(discounts.thirteenth_advance))

    console.print(table)


def termination_statement_text(
    inputs: TerminationInputs,
    result: CalculationResult,
    width: int = 80,
) -> str:
    """Plain-text statement for saving or printing."""
    console = Console(record=True, width=width, file=io.StringIO(), color_system=None)
    render_termination(console, inputs, result)
    return console.export_text()

