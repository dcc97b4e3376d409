"""INSS and IRRF withholding calculations.

Two bracket models are used by Brazilian payroll:

- progressive (INSS): each slice of the base is taxed at its own bracket's
  rate and the slices are summed; bases above the top bound pay the ceiling.
- marginal (IRRF): the whole taxable base is taxed at the rate of the bracket
  it falls in, minus that bracket's fixed deduction.

Both are pure functions of a base and a bracket table; the yearly tables come
from ``load_tax_rules``.
"""

from typing import Optional, Sequence

from .rules import load_tax_rules
from .schemas import TaxBracket, TaxRules


def round_cents(amount: float) -> float:
    """Round to 2 decimal places (currency precision)."""
    return round(amount, 2)


def find_bracket(amount: float, brackets: Sequence[TaxBracket]) -> TaxBracket:
    """Return the first bracket whose upper bound is >= amount.

    Upper bounds are inclusive, so an amount exactly on a bound belongs to
    the lower bracket. Amounts above every bound get the last bracket.
    """
    for bracket in brackets:
        if amount <= bracket.up_to:
            return bracket
    return brackets[-1]


def calc_progressive_withholding(
    base: float,
    brackets: Sequence[TaxBracket],
    ceiling: float,
) -> float:
    """Calculate a slice-by-slice (INSS style) withholding.

    Args:
        base: Contribution base
        brackets: Brackets in ascending order
        ceiling: Fixed amount returned when base exceeds the top bound

    Returns:
        Withholding rounded to cents
    """
    if base > brackets[-1].up_to:
        return ceiling

    discount = 0.0
    previous_bound = 0.0
    for bracket in brackets:
        if base <= previous_bound:
            break
        slice_amount = min(base, bracket.up_to) - previous_bound
        discount += slice_amount * bracket.rate
        previous_bound = bracket.up_to

    return round_cents(discount)


def calc_marginal_withholding(
    base: float,
    dependents: int,
    brackets: Sequence[TaxBracket],
    deduction_per_dependent: float,
) -> float:
    """Calculate a single-bracket (IRRF style) withholding.

    Args:
        base: Taxable base before dependent deductions
        dependents: Number of dependents (not validated)
        brackets: Brackets in ascending order, last one open-ended
        deduction_per_dependent: Amount subtracted from base per dependent

    Returns:
        Withholding rounded to cents, never negative
    """
    taxable = base - dependents * deduction_per_dependent
    bracket = find_bracket(taxable, brackets)

    if bracket.rate == 0:
        return 0.0

    tax = taxable * bracket.rate - bracket.deduction
    return max(0.0, round_cents(tax))


def calc_inss(base: float, rules: Optional[TaxRules] = None) -> float:
    """INSS withholding on a base using the year's table."""
    rules = rules or load_tax_rules()
    return calc_progressive_withholding(base, rules.inss.brackets, rules.inss.ceiling)


def calc_irrf(base: float, dependents: int = 0, rules: Optional[TaxRules] = None) -> float:
    """IRRF withholding on a base (already net of INSS) using the year's table."""
    rules = rules or load_tax_rules()
    return calc_marginal_withholding(
        base, dependents, rules.irrf.brackets, rules.irrf.deduction_per_dependent
    )
