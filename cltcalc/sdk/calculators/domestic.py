"""Domestic worker (empregada domestica) monthly payroll and eSocial DAE guide.

Overtime and night premium feed the weekly rest (DSR) reflex, and the
employer's DAE guide collects both the employer's charges and the
employee's withheld INSS and IRRF.
"""

from dataclasses import dataclass
from typing import Optional

from ..taxes import TaxRules, calc_inss, calc_irrf, load_tax_rules, round_cents

MONTHLY_HOURS = 220
NIGHT_PREMIUM_RATE = 0.20
TRANSPORT_DISCOUNT_RATE = 0.06

# Employer charges collected by the DAE, as a share of gross pay
EMPLOYER_INSS_RATE = 0.08
ACCIDENT_INSURANCE_RATE = 0.008
FGTS_RATE = 0.08
COMPENSATION_RESERVE_RATE = 0.032


@dataclass
class DaeGuide:
    employer_inss: float
    accident_insurance: float
    fgts: float
    compensation_reserve: float
    employee_inss: float
    employee_irrf: float

    @property
    def total(self) -> float:
        return (
            self.employer_inss
            + self.accident_insurance
            + self.fgts
            + self.compensation_reserve
            + self.employee_inss
            + self.employee_irrf
        )


@dataclass
class DomesticPayroll:
    hourly_rate: float
    overtime_50: float
    overtime_100: float
    night_premium: float
    dsr_value: float
    total_gross: float
    inss: float
    irrf: float
    transport_discount: float
    total_net: float
    dae: DaeGuide
    employer_cost: float


def calculate_domestic_payroll(
    salary: float,
    transport_voucher: float = 0,
    overtime_50_hours: float = 0,
    overtime_100_hours: float = 0,
    night_hours: float = 0,
    dependents: int = 0,
    days_in_month: int = 30,
    sundays_and_holidays: int = 4,
    rules: Optional[TaxRules] = None,
) -> DomesticPayroll:
    """Monthly payslip for a domestic worker and the employer's DAE guide.

    Args:
        salary: Monthly base salary
        transport_voucher: Transport voucher the employer provides this month
        overtime_50_hours: Overtime hours paid at +50%
        overtime_100_hours: Overtime hours paid at +100% (Sundays, holidays)
        night_hours: Hours worked between 22h and 5h
        dependents: Dependents for IRRF
        days_in_month: Calendar days in the month
        sundays_and_holidays: Rest days in the month
        rules: Tax tables (default year if omitted)

    Returns:
        DomesticPayroll; the employer cost is net pay plus the DAE guide
        plus the part of the transport voucher the employer absorbs
    """
    rules = rules or load_tax_rules()

    hourly_rate = salary / MONTHLY_HOURS
    overtime_50 = hourly_rate * 1.5 * overtime_50_hours
    overtime_100 = hourly_rate * 2 * overtime_100_hours
    night_premium = hourly_rate * NIGHT_PREMIUM_RATE * night_hours

    variable = overtime_50 + overtime_100 + night_premium
    business_days = days_in_month - sundays_and_holidays
    dsr_value = variable / business_days * sundays_and_holidays if business_days > 0 else 0.0

    total_gross = salary + variable + dsr_value
    inss = calc_inss(total_gross, rules)
    irrf = calc_irrf(total_gross - inss, dependents, rules)

    # The employee pays at most 6% of the base salary towards transport
    transport_discount = min(salary * TRANSPORT_DISCOUNT_RATE, transport_voucher)
    total_net = total_gross - inss - irrf - transport_discount

    dae = DaeGuide(
        employer_inss=round_cents(total_gross * EMPLOYER_INSS_RATE),
        accident_insurance=round_cents(total_gross * ACCIDENT_INSURANCE_RATE),
        fgts=round_cents(total_gross * FGTS_RATE),
        compensation_reserve=round_cents(total_gross * COMPENSATION_RESERVE_RATE),
        employee_inss=inss,
        employee_irrf=irrf,
    )

    return DomesticPayroll(
        hourly_rate=hourly_rate,
        overtime_50=overtime_50,
        overtime_100=overtime_100,
        night_premium=night_premium,
        dsr_value=dsr_value,
        total_gross=total_gross,
        inss=inss,
        irrf=irrf,
        transport_discount=transport_discount,
        total_net=total_net,
        dae=dae,
        employer_cost=total_net + dae.total + (transport_voucher - transport_discount),
    )
