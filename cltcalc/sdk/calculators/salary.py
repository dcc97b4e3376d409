"""Monthly net salary and exit-date timing helpers."""

from dataclasses import dataclass
from typing import Optional

from ..taxes import TaxRules, calc_inss, calc_irrf, load_tax_rules
from ..termination.tenure import MIN_DAYS_FOR_MONTH


@dataclass
class NetSalaryResult:
    gross: float
    inss: float
    irrf: float
    other_discounts: float
    net: float


@dataclass
class ThirteenthSalaryResult:
    months: int
    gross: float
    first_installment: float
    inss: float
    irrf: float
    second_installment: float

    @property
    def net(self) -> float:
        return self.first_installment + self.second_installment


@dataclass
class ExitDateStrategy:
    """What one more accrual month is worth when choosing the exit day."""

    day: int
    safe: bool
    days_to_wait: int
    thirteenth_twelfth: float
    vacation_twelfth: float  # includes the one-third bonus

    @property
    def total_at_stake(self) -> float:
        return self.thirteenth_twelfth + self.vacation_twelfth


def calculate_net_salary(
    salary: float,
    dependents: int = 0,
    other_discounts: float = 0,
    rules: Optional[TaxRules] = None,
) -> NetSalaryResult:
    """Net monthly pay after INSS, IRRF and other discounts."""
    rules = rules or load_tax_rules()
    inss = calc_inss(salary, rules)
    irrf = calc_irrf(salary - inss, dependents, rules)
    return NetSalaryResult(
        gross=salary,
        inss=inss,
        irrf=irrf,
        other_discounts=other_discounts,
        net=salary - inss - irrf - other_discounts,
    )


def calculate_thirteenth_salary(
    salary: float,
    months: int = 12,
    dependents: int = 0,
    rules: Optional[TaxRules] = None,
) -> ThirteenthSalaryResult:
    """13th salary split into its two installments.

    The first installment is half the gross with no withholding; INSS and
    IRRF on the full gross come out of the second.
    """
    rules = rules or load_tax_rules()
    months = max(0, min(months, 12))
    gross = salary / 12 * months
    first = gross / 2
    inss = calc_inss(gross, rules)
    irrf = calc_irrf(gross - inss, dependents, rules)
    return ThirteenthSalaryResult(
        months=months,
        gross=gross,
        first_installment=first,
        inss=inss,
        irrf=irrf,
        second_installment=gross - first - inss - irrf,
    )


def exit_date_strategy(salary: float, day: int) -> ExitDateStrategy:
    """Whether leaving on ``day`` of the month secures that month's accrual."""
    vacation_twelfth = salary / 12
    return ExitDateStrategy(
        day=day,
        safe=day >= MIN_DAYS_FOR_MONTH,
        days_to_wait=max(MIN_DAYS_FOR_MONTH - day, 0),
        thirteenth_twelfth=salary / 12,
        vacation_twelfth=vacation_twelfth + vacation_twelfth / 3,
    )
