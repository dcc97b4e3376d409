"""Annual comparison of a CLT job offer against a PJ (contractor) offer."""

from dataclasses import dataclass
from typing import Optional

from ..taxes import TaxRules, calc_inss, calc_irrf, load_tax_rules

FGTS_RATE = 0.08
# 11 worked months plus one month of vacation
WORKED_MONTHS = 11


@dataclass
class CltPackage:
    monthly_net: float
    vacation_net: float
    thirteenth_net: float
    profit_sharing: float
    cash: float
    fgts: float
    benefits: float
    total: float

    @property
    def monthly_equivalent(self) -> float:
        return self.total / 12


@dataclass
class PjPackage:
    gross: float
    taxes: float
    costs: float
    total: float

    @property
    def monthly_equivalent(self) -> float:
        return self.total / 12


@dataclass
class CltVsPjResult:
    clt: CltPackage
    pj: PjPackage
    diff: float  # positive when PJ pays more
    break_even_pj_gross: Optional[float]  # monthly PJ invoice matching the CLT package


def _net(gross: float, dependents: int, rules: TaxRules) -> float:
    inss = calc_inss(gross, rules)
    return gross - inss - calc_irrf(gross - inss, dependents, rules)


def compare_clt_pj(
    salary: float,
    pj_gross: float,
    meal_voucher: float = 0,
    health_plan: float = 0,
    other_benefits: float = 0,
    profit_sharing: float = 0,
    dependents: int = 0,
    pj_tax_rate: float = 6.0,
    accountant: float = 0,
    pj_expenses: float = 0,
    billed_months: int = 12,
    rules: Optional[TaxRules] = None,
) -> CltVsPjResult:
    """Compare a year under CLT with a year invoicing as PJ.

    The CLT side counts 11 months of net salary, net vacation pay with the
    one-third bonus, net 13th salary, profit sharing, FGTS deposits and the
    monthly benefits. The PJ side is the invoiced amount minus taxes
    (``pj_tax_rate`` percent of revenue) and the monthly accountant and
    other costs.
    """
    rules = rules or load_tax_rules()

    monthly_net = _net(salary, dependents, rules)
    vacation_gross = salary + salary / 3
    vacation_net = _net(vacation_gross, dependents, rules)
    thirteenth_net = _net(salary, dependents, rules)

    cash = monthly_net * WORKED_MONTHS + vacation_net + thirteenth_net + profit_sharing
    fgts = salary * FGTS_RATE * WORKED_MONTHS + vacation_gross * FGTS_RATE + salary * FGTS_RATE
    benefits = (meal_voucher + health_plan + other_benefits) * 12
    clt = CltPackage(
        monthly_net=monthly_net,
        vacation_net=vacation_net,
        thirteenth_net=thirteenth_net,
        profit_sharing=profit_sharing,
        cash=cash,
        fgts=fgts,
        benefits=benefits,
        total=cash + fgts + benefits,
    )

    tax_rate = pj_tax_rate / 100
    annual_gross = pj_gross * billed_months
    taxes = annual_gross * tax_rate
    costs = (accountant + pj_expenses) * 12
    pj = PjPackage(gross=annual_gross, taxes=taxes, costs=costs, total=annual_gross - taxes - costs)

    denominator = billed_months * (1 - tax_rate)
    break_even = (clt.total + costs) / denominator if denominator > 0 else None

    return CltVsPjResult(clt=clt, pj=pj, diff=pj.total - clt.total, break_even_pj_gross=break_even)
