"""Tax table inspection commands."""

import math

import click
from rich.console import Console
from rich.table import Table
from rich import box

from cltcalc.sdk import get_available_years, get_tax_rules_dir
from cltcalc.sdk.formatting import format_currency, format_percent

from .common import echo_json, format_option, load_rules, resolve_format


def _bound(value: float) -> str:
    return "acima" if math.isinf(value) else f"até {format_currency(value)}"


def _bracket_dicts(brackets) -> list:
    return [
        {
            "up_to": None if math.isinf(b.up_to) else b.up_to,
            "rate": b.rate,
            "deduction": b.deduction,
            "added": b.added,
        }
        for b in brackets
    ]


@click.group()
def tables():
    """Inspect the official tax tables."""
    pass


@tables.command("list")
def tables_list():
    """List available table years."""
    rules_dir = get_tax_rules_dir()
    years = get_available_years(rules_dir)
    click.echo(f"Tax tables in {rules_dir}:")
    for year in years:
        click.echo(f"  {year}")
    if not years:
        click.echo("  (none)")


@tables.command("show")
@click.argument("year", type=int, required=False)
@format_option
def tables_show(year, output_format):
    """Show the tables for YEAR (default year if omitted)."""
    rules = load_rules(year)

    if resolve_format(output_format) == "json":
        echo_json({
            "year": rules.year,
            "minimum_wage": rules.minimum_wage,
            "inss": {
                "ceiling": rules.inss.ceiling,
                "max_bound": rules.inss.max_bound,
                "brackets": _bracket_dicts(rules.inss.brackets),
            },
            "irrf": {
                "deduction_per_dependent": rules.irrf.deduction_per_dependent,
                "simplified_discount": rules.irrf.simplified_discount,
                "brackets": _bracket_dicts(rules.irrf.brackets),
            },
            "unemployment": {
                "ceiling": rules.unemployment.ceiling,
                "brackets": _bracket_dicts(rules.unemployment.brackets),
            },
            "fgts_anniversary": {"brackets": _bracket_dicts(rules.fgts_anniversary.brackets)},
            "family_salary": rules.family_salary.model_dump() if rules.family_salary else None,
        })
        return

    console = Console()
    console.print(f"[bold]Tabelas {rules.year}[/bold] - salário mínimo {format_currency(rules.minimum_wage)}")

    inss = Table(title="INSS (progressiva)", box=box.SIMPLE)
    inss.add_column("Faixa")
    inss.add_column("Alíquota", justify="right")
    for b in rules.inss.brackets:
        inss.add_row(_bound(b.up_to), format_percent(b.rate))
    inss.caption = (
        f"Teto de desconto: {format_currency(rules.inss.ceiling)} "
        f"(salários acima de {format_currency(rules.inss.max_bound)})"
    )
    console.print(inss)

    irrf = Table(title="IRRF", box=box.SIMPLE)
    irrf.add_column("Base")
    irrf.add_column("Alíquota", justify="right")
    irrf.add_column("Dedução", justify="right")
    for b in rules.irrf.brackets:
        irrf.add_row(_bound(b.up_to), format_percent(b.rate), format_currency(b.deduction))
    irrf.caption = f"Dedução por dependente: {format_currency(rules.irrf.deduction_per_dependent)}"
    if rules.irrf.simplified_discount is not None:
        irrf.caption += f" | Desconto simplificado: {format_currency(rules.irrf.simplified_discount)}"
    console.print(irrf)

    unemployment = Table(title="Seguro-desemprego", box=box.SIMPLE)
    unemployment.add_column("Média")
    unemployment.add_column("Multiplicador", justify="right")
    unemployment.add_column("Parcela fixa", justify="right")
    for b in rules.unemployment.brackets:
        unemployment.add_row(_bound(b.up_to), f"{b.rate:g}", format_currency(b.added))
    console.print(unemployment)

    fgts = Table(title="Saque-aniversário FGTS", box=box.SIMPLE)
    fgts.add_column("Saldo")
    fgts.add_column("Alíquota", justify="right")
    fgts.add_column("Parcela adicional", justify="right")
    for b in rules.fgts_anniversary.brackets:
        fgts.add_row(_bound(b.up_to), format_percent(b.rate), format_currency(b.added))
    console.print(fgts)

    if rules.family_salary:
        family = Table(title="Salário-família", box=box.SIMPLE)
        family.add_column("Remuneração")
        family.add_column("Valor por filho", justify="right")
        family.add_row(f"até {format_currency(rules.family_salary.limit)}",
                       format_currency(rules.family_salary.value))
        family.add_row(f"acima de {format_currency(rules.family_salary.limit)}", format_currency(0))
        console.print(family)
