"""Termination (rescisao) calculation engine.

Single-pass pipeline over the employment facts. Stage order matters: tax
bases depend on salary balance and 13th salary, and the projected exit date
depends on the notice credit, which depends on the entitlements.

The engine never validates and never raises on odd numbers or dates; see
``validate_inputs`` for an opt-in check.
"""

import logging
from typing import Optional

from ..taxes import TaxRules, calc_inss, calc_irrf, load_tax_rules, round_cents
from . import tenure
from .entitlements import resolve_entitlements
from .schemas import (
    CalculationResult,
    Discounts,
    Earnings,
    NoticeType,
    ResultMeta,
    TerminationInputs,
)

logger = logging.getLogger(__name__)

DAYS_PER_MONTH = 30
FGTS_FINE_RATE = 0.40
FGTS_FINE_RATE_AGREEMENT = 0.20


def calculate_termination(
    inputs: TerminationInputs,
    rules: Optional[TaxRules] = None,
) -> CalculationResult:
    """Calculate severance amounts for a terminated contract.

    Args:
        inputs: Employment facts (read only)
        rules: Tax tables; the default year is loaded when omitted

    Returns:
        A new CalculationResult
    """
    rules = rules or load_tax_rules()
    salary = inputs.salary
    daily_salary = salary / DAYS_PER_MONTH

    # 1. Entitlements
    rights = resolve_entitlements(inputs.reason)
    years = tenure.years_worked(inputs.start_date, inputs.end_date)

    # 2. Notice (aviso previo)
    total_notice_days = tenure.notice_days(years, probation_end=rights.is_probation_end)
    credit = tenure.projection_credit(total_notice_days, inputs.notice_type, rights)

    notice_value = 0.0
    notice_deduction = 0.0
    if inputs.notice_type == NoticeType.INDEMNIFIED:
        if rights.is_agreement:
            notice_value = daily_salary * total_notice_days / 2
        elif rights.notice_indemnity:
            notice_value = daily_salary * total_notice_days
    elif inputs.notice_type == NoticeType.NOT_FULFILLED and rights.notice_deduction:
        notice_deduction = daily_salary * DAYS_PER_MONTH

    logger.debug(
        f"notice: {total_notice_days} days ({inputs.notice_type.value}), "
        f"value={notice_value:.2f} deduction={notice_deduction:.2f} credit={credit}"
    )

    # 3. Projected exit date
    projected = tenure.projected_exit_date(inputs.end_date, credit)

    # 4. Salary balance (saldo de salario)
    end = inputs.end_date
    if end.day == tenure.last_day_of_month(end):
        salary_balance = salary
    else:
        salary_balance = round_cents(daily_salary * end.day)

    # 5. Vacation
    vacation_due = daily_salary * inputs.vacation_overdue_days if inputs.vacation_overdue_days > 0 else 0.0

    vacation_months = tenure.prorated_months(
        tenure.vacation_anchor(inputs.start_date, projected), projected
    )
    vacation_proportional = salary / 12 * vacation_months
    if rights.is_for_cause:
        vacation_proportional = 0.0

    vacation_third = (vacation_due + vacation_proportional) / 3
    vacation_total = vacation_due + vacation_proportional + vacation_third

    # 6. 13th salary
    thirteenth_months = 0
    thirteenth = 0.0
    if not rights.is_for_cause:
        thirteenth_months = tenure.prorated_months(
            tenure.thirteenth_anchor(inputs.start_date, projected), projected
        )
        thirteenth = salary / 12 * thirteenth_months

    thirteenth_advance = salary / 2 if inputs.thirteenth_advanced else 0.0

    logger.debug(
        f"accrual: vacation {vacation_months}/12, 13th {thirteenth_months}/12, "
        f"projected exit {projected.isoformat()}"
    )

    # 7. FGTS fine
    if rights.fgts_fine_full:
        fgts_fine = inputs.fgts_balance * FGTS_FINE_RATE
    elif rights.is_agreement:
        fgts_fine = inputs.fgts_balance * FGTS_FINE_RATE_AGREEMENT
    else:
        fgts_fine = 0.0

    # 8. Gross
    earnings = Earnings(
        salary_balance=salary_balance,
        notice_indemnified=notice_value,
        vacation_total=vacation_total,
        thirteenth_total=thirteenth,
        fgts_fine=fgts_fine,
    )
    total_gross = earnings.total

    # 9-10. Withholding on salary balance + 13th (vacation and notice are exempt)
    inss = calc_inss(salary_balance + thirteenth, rules)
    irrf = calc_irrf(salary_balance + thirteenth - inss, inputs.dependents, rules)

    # 11. Discounts
    discounts = Discounts(
        inss=inss,
        irrf=irrf,
        notice_deduction=notice_deduction,
        thirteenth_advance=thirteenth_advance,
    )
    total_discounts = discounts.total

    # 12. Net
    total_net = total_gross - total_discounts
    logger.debug(f"gross={total_gross:.2f} discounts={total_discounts:.2f} net={total_net:.2f}")

    return CalculationResult(
        earnings=earnings,
        discounts=discounts,
        vacation_due=vacation_due,
        vacation_proportional=vacation_proportional,
        vacation_third=vacation_third,
        thirteenth_proportional=thirteenth,
        notice_warning=notice_value if notice_value > 0 else -notice_deduction,
        total_gross=total_gross,
        total_discounts=total_discounts,
        total_net=total_net,
        meta=ResultMeta(
            years_worked=years,
            notice_days=total_notice_days,
            projected_date=projected,
            vacation_months=vacation_months,
            thirteenth_months=thirteenth_months,
            tax_year=rules.year,
        ),
    )
