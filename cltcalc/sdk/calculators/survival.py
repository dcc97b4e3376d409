"""How many months severance, FGTS and savings last after a dismissal."""

from dataclasses import dataclass, field
from typing import List

HORIZON_MONTHS = 48
SAFE_MONTHS = 12
ATTENTION_MONTHS = 6


@dataclass
class MonthBalance:
    month: int
    income: float
    balance: float


@dataclass
class SurvivalProjection:
    starting_cash: float
    monthly_cost: float
    months: int
    runs_out: bool
    timeline: List[MonthBalance] = field(default_factory=list)

    @property
    def status(self) -> str:
        """'safe' (more than a year or never runs out), 'attention' or 'critical'."""
        if not self.runs_out or self.months > SAFE_MONTHS:
            return "safe"
        if self.months > ATTENTION_MONTHS:
            return "attention"
        return "critical"


def project_survival(
    severance: float,
    fgts: float = 0,
    savings: float = 0,
    monthly_cost: float = 0,
    economy_percent: float = 0,
    unemployment_value: float = 0,
    unemployment_months: int = 0,
    horizon: int = HORIZON_MONTHS,
) -> SurvivalProjection:
    """Walk the cash balance month by month until it runs out.

    Each month spends ``monthly_cost`` reduced by ``economy_percent`` and
    receives the unemployment benefit while installments last. The month in
    which the balance goes to zero still counts. A balance that lasts the
    whole horizon does not run out.
    """
    starting_cash = severance + fgts + savings
    cost = monthly_cost * (1 - economy_percent / 100)

    balance = starting_cash
    timeline = [MonthBalance(month=0, income=0.0, balance=balance)]
    month = 0
    while balance > 0 and month < horizon:
        month += 1
        income = unemployment_value if month <= unemployment_months else 0.0
        balance = balance - cost + income
        timeline.append(MonthBalance(month=month, income=income, balance=max(balance, 0.0)))

    return SurvivalProjection(
        starting_cash=starting_cash,
        monthly_cost=cost,
        months=month,
        runs_out=not (month >= horizon and balance > 0),
        timeline=timeline,
    )
