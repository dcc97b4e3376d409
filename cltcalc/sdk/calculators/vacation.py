"""Standalone vacation (ferias) pay calculation."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..taxes import TaxRules, calc_inss, calc_irrf, load_tax_rules

FULL_VACATION_DAYS = 30
SELLABLE_DAYS = 10

# (max unjustified absences, vacation days) - CLT art. 130
ABSENCE_TABLE = (
    (5, 30),
    (14, 24),
    (23, 18),
    (32, 12),
)


@dataclass
class VacationResult:
    entitled_days: int
    days_taken: int
    days_sold: int
    vacation_pay: float
    vacation_third: float
    abono: float
    abono_third: float
    thirteenth_advance: float
    total_gross: float
    inss: float
    irrf: float
    total_net: float
    return_date: Optional[date] = None


def entitled_vacation_days(absences: int = 0) -> int:
    """Vacation days earned in the accrual period given unjustified absences."""
    for max_absences, days in ABSENCE_TABLE:
        if absences <= max_absences:
            return days
    return 0


def calculate_vacation(
    salary: float,
    sell_days: bool = False,
    dependents: int = 0,
    rules: Optional[TaxRules] = None,
    days_taken: Optional[int] = None,
    absences: int = 0,
    advance_thirteenth: bool = False,
    start_date: Optional[date] = None,
) -> VacationResult:
    """Calculate vacation pay, optionally selling 10 days (abono pecuniario).

    The abono and its third are tax exempt, as is the 13th-salary advance;
    INSS and IRRF apply to vacation pay plus one third only. Selling days
    requires more than 15 entitled days.

    Args:
        salary: Monthly gross salary
        sell_days: Sell 10 days for cash
        dependents: Dependents for IRRF
        rules: Tax tables (default year if omitted)
        days_taken: Days of rest (defaults to everything not sold)
        absences: Unjustified absences in the accrual period
        advance_thirteenth: Pay the first 13th installment with the vacation
        start_date: First day of rest, used for the return date
    """
    rules = rules or load_tax_rules()
    daily_salary = salary / 30

    entitled = entitled_vacation_days(absences)
    days_sold = SELLABLE_DAYS if sell_days and entitled > 15 else 0
    max_days = entitled - days_sold
    if days_taken is None or days_taken > max_days:
        days_taken = max_days
    days_taken = max(days_taken, 0)

    vacation_pay = daily_salary * days_taken
    vacation_third = vacation_pay / 3
    abono = daily_salary * days_sold
    abono_third = abono / 3
    thirteenth_advance = salary / 2 if advance_thirteenth else 0.0

    total_gross = vacation_pay + vacation_third + abono + abono_third + thirteenth_advance

    tax_base = vacation_pay + vacation_third
    inss = calc_inss(tax_base, rules)
    irrf = calc_irrf(tax_base - inss, dependents, rules)

    return VacationResult(
        entitled_days=entitled,
        days_taken=days_taken,
        days_sold=days_sold,
        vacation_pay=vacation_pay,
        vacation_third=vacation_third,
        abono=abono,
        abono_third=abono_third,
        thirteenth_advance=thirteenth_advance,
        total_gross=total_gross,
        inss=inss,
        irrf=irrf,
        total_net=total_gross - inss - irrf,
        return_date=start_date + timedelta(days=days_taken) if start_date else None,
    )
