"""Auxiliary calculator commands."""

from datetime import date

import click
from rich.console import Console

from cltcalc.sdk.calculators import (
    average_salary,
    calculate_domestic_payroll,
    calculate_fgts_anniversary,
    calculate_investment_projection,
    calculate_net_salary,
    calculate_night_shift,
    calculate_overtime,
    calculate_thirteenth_salary,
    calculate_unemployment_benefit,
    calculate_vacation,
    calculate_work_schedule,
    compare_clt_pj,
    exit_date_strategy,
    project_fgts_scenarios,
    project_survival,
)
from cltcalc.sdk.formatting import format_currency, format_date

from .common import echo_json, format_option, load_rules, resolve_format, to_jsonable, year_option
from .renderers.amounts_renderer import render_amounts


@click.command("unemployment")
@click.argument("salaries", type=float, nargs=-1, required=True)
@click.option("--months", "-m", "months_worked", type=int, required=True,
              help="Months worked in the qualifying period")
@click.option("--request", "request_count", type=click.IntRange(min=1), default=1, show_default=True,
              help="Request ordinal (1st, 2nd, 3rd+)")
@click.option("--dismissal-date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Dismissal date, to estimate payment dates")
@year_option
@format_option
def unemployment(salaries, months_worked, request_count, dismissal_date, year, output_format):
    """Estimate unemployment insurance (seguro-desemprego).

    SALARIES are the last (up to 3) monthly salaries; zeros are ignored.

    Example:
        clt-calc unemployment 2800 2900 3000 --months 26
    """
    rules = load_rules(year)
    result = calculate_unemployment_benefit(
        average_salary(salaries[-3:]),
        months_worked,
        request_count,
        rules,
        dismissal_date=dismissal_date.date() if dismissal_date else None,
    )

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    rows = [
        ("Média salarial", format_currency(result.average_salary)),
        ("Parcelas", str(result.installments)),
    ]
    rows += [(f"Parcela {p.index} ({format_date(p.date)})", format_currency(p.value)) for p in result.schedule]
    render_amounts(Console(), "Seguro-desemprego", rows,
                   total=("Valor da parcela", format_currency(result.benefit_value)))
    if result.installments == 0:
        click.echo("Not eligible: not enough months worked for this request.")


@click.command("vacation")
@click.argument("salary", type=float)
@click.option("--sell", "sell_days", is_flag=True, help="Sell 10 days (abono pecuniario)")
@click.option("--days", "days_taken", type=int, default=None, help="Days of rest (default: all available)")
@click.option("--absences", type=int, default=0, help="Unjustified absences in the accrual period")
@click.option("--dependents", "-d", type=int, default=0, help="Dependents for IRRF")
@click.option("--advance-13th", "advance_thirteenth", is_flag=True,
              help="Receive the first 13th installment with the vacation")
@click.option("--start", "start_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="First day of rest, to compute the return date")
@year_option
@format_option
def vacation(salary, sell_days, days_taken, absences, dependents, advance_thirteenth, start_date,
             year, output_format):
    """Calculate vacation pay (ferias)."""
    rules = load_rules(year)
    result = calculate_vacation(
        salary, sell_days, dependents, rules,
        days_taken=days_taken,
        absences=absences,
        advance_thirteenth=advance_thirteenth,
        start_date=start_date.date() if start_date else None,
    )

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    rows = [
        ("Dias de direito", str(result.entitled_days)),
        (f"Férias ({result.days_taken} dias)", format_currency(result.vacation_pay)),
        ("1/3 constitucional", format_currency(result.vacation_third)),
    ]
    if result.days_sold:
        rows.append((f"Abono pecuniário ({result.days_sold} dias)", format_currency(result.abono)))
        rows.append(("1/3 do abono", format_currency(result.abono_third)))
    if result.thirteenth_advance:
        rows.append(("Adiantamento 13º", format_currency(result.thirteenth_advance)))
    rows += [
        ("Total bruto", format_currency(result.total_gross)),
        ("INSS", f"-{format_currency(result.inss)}"),
        ("IRRF", f"-{format_currency(result.irrf)}"),
    ]
    if result.return_date:
        rows.append(("Retorno", format_date(result.return_date)))
    render_amounts(Console(), "Férias", rows, total=("Líquido", format_currency(result.total_net)))


@click.command("overtime")
@click.argument("salary", type=float)
@click.argument("hours", type=float)
@click.option("--rate", type=float, default=50, show_default=True, help="Premium in percent")
@click.option("--no-dsr", is_flag=True, help="Leave out the weekly rest (DSR) supplement")
@click.option("--divisor", type=int, default=220, show_default=True, help="Monthly hours divisor")
@format_option
def overtime(salary, hours, rate, no_dsr, divisor, output_format):
    """Calculate overtime pay (horas extras)."""
    result = calculate_overtime(salary, hours, rate, dsr=not no_dsr, divisor=divisor)

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    render_amounts(Console(), "Horas extras", [
        ("Valor da hora", format_currency(result.hourly_rate)),
        (f"{hours:g}h a {rate:g}%", format_currency(result.overtime_value)),
        ("DSR", format_currency(result.dsr_value)),
    ], total=("Total", format_currency(result.total)))


@click.command("night-shift")
@click.argument("salary", type=float)
@click.argument("hours", type=float)
@click.option("--rate", type=float, default=20, show_default=True, help="Premium in percent (25 for rural)")
@click.option("--clock-hours", is_flag=True, help="Do not apply the reduced night hour")
@click.option("--divisor", type=int, default=220, show_default=True, help="Monthly hours divisor")
@format_option
def night_shift(salary, hours, rate, clock_hours, divisor, output_format):
    """Calculate the night-shift premium (adicional noturno)."""
    result = calculate_night_shift(salary, hours, rate, reduced_hour=not clock_hours, divisor=divisor)

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    render_amounts(Console(), "Adicional noturno", [
        ("Valor da hora", format_currency(result.hourly_rate)),
        ("Horas consideradas", f"{result.effective_hours:.2f}"),
        ("Adicional", format_currency(result.allowance)),
        ("DSR", format_currency(result.dsr_value)),
    ], total=("Total", format_currency(result.total)))


@click.command("net-salary")
@click.argument("salary", type=float)
@click.option("--dependents", "-d", type=int, default=0, help="Dependents for IRRF")
@click.option("--discounts", type=float, default=0.0, help="Other monthly discounts")
@year_option
@format_option
def net_salary(salary, dependents, discounts, year, output_format):
    """Calculate monthly net salary (salario liquido)."""
    rules = load_rules(year)
    result = calculate_net_salary(salary, dependents, discounts, rules)

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    render_amounts(Console(), f"Salário líquido ({rules.year})", [
        ("Salário bruto", format_currency(result.gross)),
        ("INSS", f"-{format_currency(result.inss)}"),
        ("IRRF", f"-{format_currency(result.irrf)}"),
        ("Outros descontos", f"-{format_currency(result.other_discounts)}"),
    ], total=("Líquido", format_currency(result.net)))


@click.command("fgts")
@click.argument("balance", type=float)
@click.option("--salary", type=float, default=None, help="Monthly salary, to project future deposits")
@click.option("--years", type=click.IntRange(min=1), default=2, show_default=True,
              help="Years to project (with --salary)")
@year_option
@format_option
def fgts(balance, salary, years, year, output_format):
    """Annual FGTS withdrawal (saque-aniversario) and projection.

    With --salary, compares keeping the termination withdrawal against
    opting into yearly withdrawals for --years years.
    """
    rules = load_rules(year)
    withdrawal = calculate_fgts_anniversary(balance, rules)
    projection = project_fgts_scenarios(balance, salary, years, rules) if salary else None

    if resolve_format(output_format) == "json":
        echo_json({
            "anniversary": to_jsonable(withdrawal),
            "projection": to_jsonable(projection) if projection else None,
        })
        return

    console = Console()
    render_amounts(console, "Saque-aniversário", [
        ("Saldo", format_currency(balance)),
        ("Alíquota", f"{withdrawal.rate:g}%"),
        ("Parcela adicional", format_currency(withdrawal.portion)),
    ], total=("Saque anual", format_currency(withdrawal.annual_withdrawal)))

    if projection:
        rows = [("Total depositado", format_currency(projection.deposited))]
        rows += [(f"Saque ano {i}", format_currency(w)) for i, w in enumerate(projection.yearly_withdrawals, 1)]
        rows += [
            ("Bloqueado na demissão", format_currency(projection.anniversary_locked)),
            ("Multa 40%", format_currency(projection.fine)),
            ("Saque-rescisão: recebe na demissão", format_currency(projection.termination_cash)),
        ]
        render_amounts(console, f"Projeção em {years} ano(s)", rows,
                       total=("Saque-aniversário: recebe na demissão",
                              format_currency(projection.anniversary_cash_on_termination)))


@click.command("invest")
@click.argument("amount", type=float)
@click.argument("months", type=int)
@format_option
def invest(amount, months, output_format):
    """Compare savings (poupanca) and CDB growth over MONTHS."""
    result = calculate_investment_projection(amount, months)

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    render_amounts(Console(), f"{format_currency(amount)} por {months} meses", [
        ("Poupança", format_currency(result.savings)),
        ("CDB", format_currency(result.cdb)),
    ], total=("Diferença", format_currency(result.diff)))


@click.command("exit-date")
@click.argument("salary", type=float)
@click.option("--date", "exit_date", type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Planned last working day (default: today)")
@format_option
def exit_date(salary, exit_date, output_format):
    """Check whether an exit day secures the month's 13th and vacation accrual."""
    day = (exit_date.date() if exit_date else date.today()).day
    result = exit_date_strategy(salary, day)

    if resolve_format(output_format) == "json":
        echo_json({**to_jsonable(result), "total_at_stake": result.total_at_stake})
        return

    render_amounts(Console(), f"Saída no dia {day}", [
        ("1/12 de 13º", format_currency(result.thirteenth_twelfth)),
        ("1/12 de férias + 1/3", format_currency(result.vacation_twelfth)),
    ], total=("Em jogo", format_currency(result.total_at_stake)))
    if result.safe:
        click.echo("Safe: the month already counts (15+ days worked).")
    else:
        click.echo(f"Wait {result.days_to_wait} more day(s) for the month to count.")



@click.command("thirteenth")
@click.argument("salary", type=float)
@click.option("--months", "-m", type=click.IntRange(0, 12), default=12, show_default=True,
              help="Months worked in the year (15+ days each)")
@click.option("--dependents", "-d", type=int, default=0, help="Dependents for IRRF")
@year_option
@format_option
def thirteenth(salary, months, dependents, year, output_format):
    """Split the 13th salary into its two installments."""
    rules = load_rules(year)
    result = calculate_thirteenth_salary(salary, months, dependents, rules)

    if resolve_format(output_format) == "json":
        echo_json({**to_jsonable(result), "net": result.net})
        return

    render_amounts(Console(), f"13º salário ({months}/12)", [
        ("Valor bruto", format_currency(result.gross)),
        ("1ª parcela (até 30/11)", format_currency(result.first_installment)),
        ("INSS", f"-{format_currency(result.inss)}"),
        ("IRRF", f"-{format_currency(result.irrf)}"),
        ("2ª parcela (até 20/12)", format_currency(result.second_installment)),
    ], total=("Líquido", format_currency(result.net)))


@click.command("domestic")
@click.argument("salary", type=float)
@click.option("--transport", "transport_voucher", type=float, default=0.0,
              help="Transport voucher provided this month")
@click.option("--overtime-50", "overtime_50_hours", type=float, default=0.0, help="Overtime hours at +50%")
@click.option("--overtime-100", "overtime_100_hours", type=float, default=0.0,
              help="Overtime hours at +100% (Sundays, holidays)")
@click.option("--night-hours", type=float, default=0.0, help="Hours worked between 22h and 5h")
@click.option("--dependents", "-d", type=int, default=0, help="Dependents for IRRF")
@click.option("--days", "days_in_month", type=int, default=30, show_default=True, help="Days in the month")
@click.option("--rest-days", "sundays_and_holidays", type=int, default=4, show_default=True,
              help="Sundays and holidays in the month")
@year_option
@format_option
def domestic(salary, transport_voucher, overtime_50_hours, overtime_100_hours, night_hours,
             dependents, days_in_month, sundays_and_holidays, year, output_format):
    """Domestic worker payslip and the employer's DAE guide.

    Example:
        clt-calc domestic 1600 --transport 220 --overtime-50 10
    """
    rules = load_rules(year)
    result = calculate_domestic_payroll(
        salary, transport_voucher, overtime_50_hours, overtime_100_hours, night_hours,
        dependents, days_in_month, sundays_and_holidays, rules,
    )

    if resolve_format(output_format) == "json":
        data = to_jsonable(result)
        data["dae"]["total"] = result.dae.total
        echo_json(data)
        return

    console = Console()
    render_amounts(console, "Holerite doméstico", [
        ("Salário base", format_currency(salary)),
        ("Horas extras 50%", format_currency(result.overtime_50)),
        ("Horas extras 100%", format_currency(result.overtime_100)),
        ("Adicional noturno", format_currency(result.night_premium)),
        ("DSR", format_currency(result.dsr_value)),
        ("Total bruto", format_currency(result.total_gross)),
        ("INSS", f"-{format_currency(result.inss)}"),
        ("IRRF", f"-{format_currency(result.irrf)}"),
        ("Vale-transporte (6%)", f"-{format_currency(result.transport_discount)}"),
    ], total=("Líquido", format_currency(result.total_net)))

    dae = result.dae
    render_amounts(console, "Guia DAE (eSocial)", [
        ("INSS patronal (8%)", format_currency(dae.employer_inss)),
        ("Seguro acidente (0,8%)", format_currency(dae.accident_insurance)),
        ("FGTS (8%)", format_currency(dae.fgts)),
        ("Fundo rescisório (3,2%)", format_currency(dae.compensation_reserve)),
        ("INSS do empregado", format_currency(dae.employee_inss)),
        ("IRRF do empregado", format_currency(dae.employee_irrf)),
    ], total=("Total DAE", format_currency(dae.total)))
    click.echo(f"Employer monthly cost: {format_currency(result.employer_cost)}")


@click.command("clt-vs-pj")
@click.argument("salary", type=float)
@click.argument("pj_gross", type=float)
@click.option("--meal-voucher", type=float, default=600.0, show_default=True, help="Monthly VR/VA")
@click.option("--health-plan", type=float, default=300.0, show_default=True, help="Monthly health plan value")
@click.option("--other-benefits", type=float, default=0.0, help="Other monthly benefits")
@click.option("--plr", "profit_sharing", type=float, default=0.0, help="Annual profit sharing (PLR)")
@click.option("--dependents", "-d", type=int, default=0, help="Dependents for IRRF")
@click.option("--tax-rate", "pj_tax_rate", type=float, default=6.0, show_default=True,
              help="PJ tax on revenue, in percent")
@click.option("--accountant", type=float, default=200.0, show_default=True, help="Monthly accountant fee")
@click.option("--expenses", "pj_expenses", type=float, default=0.0, help="Other monthly PJ costs")
@click.option("--billed-months", type=click.IntRange(1, 12), default=12, show_default=True,
              help="Months invoiced per year")
@year_option
@format_option
def clt_vs_pj(salary, pj_gross, meal_voucher, health_plan, other_benefits, profit_sharing, dependents,
              pj_tax_rate, accountant, pj_expenses, billed_months, year, output_format):
    """Compare a CLT SALARY with a monthly PJ_GROSS invoice over a year."""
    rules = load_rules(year)
    result = compare_clt_pj(
        salary, pj_gross,
        meal_voucher=meal_voucher,
        health_plan=health_plan,
        other_benefits=other_benefits,
        profit_sharing=profit_sharing,
        dependents=dependents,
        pj_tax_rate=pj_tax_rate,
        accountant=accountant,
        pj_expenses=pj_expenses,
        billed_months=billed_months,
        rules=rules,
    )

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    console = Console()
    render_amounts(console, "CLT (ano)", [
        ("Salário líquido x 11", format_currency(result.clt.monthly_net * 11)),
        ("Férias + 1/3 líquidas", format_currency(result.clt.vacation_net)),
        ("13º líquido", format_currency(result.clt.thirteenth_net)),
        ("PLR", format_currency(result.clt.profit_sharing)),
        ("FGTS", format_currency(result.clt.fgts)),
        ("Benefícios", format_currency(result.clt.benefits)),
        ("Média mensal", format_currency(result.clt.monthly_equivalent)),
    ], total=("Total CLT", format_currency(result.clt.total)))
    render_amounts(console, "PJ (ano)", [
        ("Faturamento", format_currency(result.pj.gross)),
        ("Impostos", f"-{format_currency(result.pj.taxes)}"),
        ("Contador e custos", f"-{format_currency(result.pj.costs)}"),
        ("Média mensal", format_currency(result.pj.monthly_equivalent)),
    ], total=("Total PJ", format_currency(result.pj.total)))

    winner = "PJ" if result.diff > 0 else "CLT"
    click.echo(f"{winner} pays {format_currency(abs(result.diff))} more per year.")
    if result.break_even_pj_gross is not None:
        click.echo(f"PJ invoice needed to match CLT: {format_currency(result.break_even_pj_gross)}/month")


@click.command("work-schedule")
@click.option("--entry", default="08:00", show_default=True, help="Arrival time (HH:MM)")
@click.option("--lunch", "lunch_start", default="12:00", show_default=True, help="Lunch start (HH:MM)")
@click.option("--lunch-minutes", type=click.IntRange(min=0), default=60, show_default=True,
              help="Lunch break length")
@click.option("--hours", "work_hours", type=click.IntRange(min=0), default=8, show_default=True,
              help="Daily journey, hours part")
@click.option("--minutes", "work_minutes", type=click.IntRange(0, 59), default=48, show_default=True,
              help="Daily journey, minutes part")
@format_option
def work_schedule(entry, lunch_start, lunch_minutes, work_hours, work_minutes, output_format):
    """Lunch return and exit time for a daily journey (default 8h48)."""
    try:
        result = calculate_work_schedule(entry, lunch_start, lunch_minutes, work_hours, work_minutes)
    except ValueError as e:
        raise click.BadParameter(str(e))

    if resolve_format(output_format) == "json":
        echo_json(result)
        return

    render_amounts(Console(), "Jornada do dia", [
        ("Entrada", result.entry),
        ("Almoço", result.lunch_start),
        ("Volta do almoço", result.lunch_return),
    ], total=("Saída", result.exit))


@click.command("survival")
@click.argument("severance", type=float)
@click.option("--fgts", "fgts_balance", type=float, default=0.0, help="FGTS available to withdraw")
@click.option("--savings", type=float, default=0.0, help="Other savings")
@click.option("--cost", "monthly_cost", type=float, required=True, help="Monthly cost of living")
@click.option("--economy", "economy_percent", type=click.FloatRange(0, 50), default=0.0,
              help="Planned cut in monthly costs, in percent")
@click.option("--benefit", "unemployment_value", type=float, default=0.0,
              help="Unemployment insurance installment")
@click.option("--benefit-months", "unemployment_months", type=click.IntRange(0, 5), default=0,
              help="Unemployment insurance installments")
@format_option
def survival(severance, fgts_balance, savings, monthly_cost, economy_percent, unemployment_value,
             unemployment_months, output_format):
    """How many months SEVERANCE plus FGTS and savings will last."""
    result = project_survival(
        severance, fgts_balance, savings, monthly_cost, economy_percent,
        unemployment_value, unemployment_months,
    )

    if resolve_format(output_format) == "json":
        echo_json({**to_jsonable(result), "status": result.status})
        return

    rows = [
        ("Reserva inicial", format_currency(result.starting_cash)),
        ("Custo mensal", format_currency(result.monthly_cost)),
    ]
    rows += [(f"Mês {m.month}", format_currency(m.balance)) for m in result.timeline[1:]]
    months = f"{result.months} meses" if result.runs_out else f"mais de {result.months} meses"
    render_amounts(Console(), "Fôlego financeiro", rows, total=("Dura", months))
    click.echo(f"Status: {result.status}")
