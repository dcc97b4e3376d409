"""Unemployment insurance (seguro-desemprego) estimate."""

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from ..taxes import TaxRules, load_tax_rules

# (minimum months worked, installments), checked in order, per request ordinal.
# Third and later requests share the last ladder.
INSTALLMENT_LADDERS: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((24, 5), (12, 4)),
    ((24, 5), (12, 4), (9, 3)),
    ((24, 5), (12, 4), (6, 3)),
)

PAYMENT_INTERVAL_DAYS = 30


@dataclass
class Payment:
    index: int
    date: date
    value: float


@dataclass
class UnemploymentResult:
    """Monthly benefit and number of installments."""

    benefit_value: float
    installments: int
    average_salary: float = 0.0
    schedule: List[Payment] = field(default_factory=list)


def average_salary(salaries: Iterable[float]) -> float:
    """Average of the last salaries, ignoring empty (zero) months."""
    valid = [s for s in salaries if s and s > 0]
    if not valid:
        return 0.0
    return sum(valid) / len(valid)


def benefit_installments(months_worked: int, request_count: int) -> int:
    """Installments due for a request, by months worked and request ordinal."""
    ladder = INSTALLMENT_LADDERS[min(max(request_count, 1), len(INSTALLMENT_LADDERS)) - 1]
    for min_months, installments in ladder:
        if months_worked >= min_months:
            return installments
    return 0


def payment_schedule(dismissal_date: date, installments: int, value: float) -> List[Payment]:
    """Estimated payment dates: one every 30 days after dismissal."""
    return [
        Payment(index=i, date=dismissal_date + timedelta(days=i * PAYMENT_INTERVAL_DAYS), value=value)
        for i in range(1, installments + 1)
    ]


def calculate_unemployment_benefit(
    average: float,
    months_worked: int,
    request_count: int = 1,
    rules: Optional[TaxRules] = None,
    dismissal_date: Optional[date] = None,
) -> UnemploymentResult:
    """Estimate the unemployment benefit.

    Args:
        average: Average of the last 3 salaries (see average_salary)
        months_worked: Months worked in the qualifying period
        request_count: 1 for first request, 2 for second, 3+ afterwards
        rules: Tax tables (default year if omitted)
        dismissal_date: When given, a payment schedule is included

    Returns:
        UnemploymentResult; benefit is never below the minimum wage
    """
    rules = rules or load_tax_rules()
    tier1, tier2, tier3 = rules.unemployment.brackets

    if average <= tier1.up_to:
        benefit = average * tier1.rate
    elif average <= tier2.up_to:
        benefit = tier2.added + (average - tier1.up_to) * tier2.rate
    else:
        benefit = tier3.added

    benefit = max(benefit, rules.minimum_wage)
    installments = benefit_installments(months_worked, request_count)

    schedule = payment_schedule(dismissal_date, installments, benefit) if dismissal_date else []
    return UnemploymentResult(
        benefit_value=benefit,
        installments=installments,
        average_salary=average,
        schedule=schedule,
    )
