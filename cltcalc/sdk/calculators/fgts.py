"""FGTS annual withdrawal (saque-aniversario) and scenario projection."""

from dataclasses import dataclass, field
from typing import List, Optional

from ..taxes import TaxRules, find_bracket, load_tax_rules

MONTHLY_DEPOSIT_RATE = 0.08
FINE_RATE = 0.40


@dataclass
class AnniversaryWithdrawal:
    annual_withdrawal: float
    rate: float  # percent
    portion: float  # fixed addend


@dataclass
class FgtsProjection:
    """Termination withdrawal vs. yearly anniversary withdrawals.

    Interest (JAM) is left out; only deposits and withdrawals are modeled.
    The fine is always computed on everything deposited, withdrawals do not
    shrink it.
    """

    deposited: float
    fine: float
    # Scenario A: standard termination withdrawal
    termination_cash: float
    # Scenario B: anniversary withdrawals, balance locked on dismissal
    anniversary_withdrawn: float
    anniversary_locked: float
    anniversary_cash_on_termination: float
    yearly_withdrawals: List[float] = field(default_factory=list)


def calculate_fgts_anniversary(balance: float, rules: Optional[TaxRules] = None) -> AnniversaryWithdrawal:
    """Annual withdrawal allowed for a balance.

    Single bracket lookup (not progressive): balance * rate + fixed addend.
    """
    rules = rules or load_tax_rules()
    bracket = find_bracket(balance, rules.fgts_anniversary.brackets)
    return AnniversaryWithdrawal(
        annual_withdrawal=balance * bracket.rate + bracket.added,
        rate=bracket.rate * 100,
        portion=bracket.added,
    )


def project_fgts_scenarios(
    balance: float,
    salary: float,
    years: int,
    rules: Optional[TaxRules] = None,
) -> FgtsProjection:
    """Project a dismissal after ``years`` under both withdrawal regimes."""
    rules = rules or load_tax_rules()
    yearly_deposit = salary * MONTHLY_DEPOSIT_RATE * 12

    deposited = balance + yearly_deposit * years
    fine = deposited * FINE_RATE

    current = balance
    withdrawn = 0.0
    yearly = []
    for _ in range(years):
        current += yearly_deposit
        withdrawal = calculate_fgts_anniversary(current, rules).annual_withdrawal
        current -= withdrawal
        withdrawn += withdrawal
        yearly.append(withdrawal)

    return FgtsProjection(
        deposited=deposited,
        fine=fine,
        termination_cash=deposited + fine,
        anniversary_withdrawn=withdrawn,
        anniversary_locked=current,
        anniversary_cash_on_termination=fine,
        yearly_withdrawals=yearly,
    )
