"""Savings vs. CDB compound-interest comparison."""

from dataclasses import dataclass

SAVINGS_MONTHLY_RATE = 0.0055  # poupanca, ~0.55% a month
CDB_MONTHLY_RATE = 0.0085  # ~100% of CDI


@dataclass
class InvestmentProjection:
    savings: float
    cdb: float
    diff: float


def calculate_investment_projection(
    amount: float,
    months: int,
    savings_rate: float = SAVINGS_MONTHLY_RATE,
    cdb_rate: float = CDB_MONTHLY_RATE,
) -> InvestmentProjection:
    """Compound ``amount`` for ``months`` at both monthly rates."""
    savings = amount * (1 + savings_rate) ** months
    cdb = amount * (1 + cdb_rate) ** months
    return InvestmentProjection(savings=savings, cdb=cdb, diff=cdb - savings)
