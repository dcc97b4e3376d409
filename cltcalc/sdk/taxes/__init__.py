"""taxes - Tax tables and withholding logic.

Scope:
- Yearly tax tables (INSS, IRRF, unemployment insurance, FGTS withdrawal)
- Progressive (INSS) and marginal (IRRF) withholding calculations

Constraints:
- Pure calculation - no termination rules (that's in termination/)
- Year-specific tables loaded from tax_rules/{year}.yaml

Usage:
    from cltcalc.sdk.taxes import calc_inss, calc_irrf, load_tax_rules

    rules = load_tax_rules(2024)
    inss = calc_inss(3000, rules)
    irrf = calc_irrf(3000 - inss, dependents=1, rules=rules)
"""

from .schemas import (
    TaxBracket,
    TaxRules,
    InssRules,
    IrrfRules,
    UnemploymentRules,
    FgtsAnniversaryRules,
)

from .rules import (
    load_tax_rules,
    resolve_year,
    get_available_years,
    get_tax_rules_dir,
    TaxRulesNotFoundError,
)

from .withholding import (
    calc_progressive_withholding,
    calc_marginal_withholding,
    calc_inss,
    calc_irrf,
    find_bracket,
    round_cents,
)

__all__ = [
    # Schemas
    "TaxBracket",
    "TaxRules",
    "InssRules",
    "IrrfRules",
    "UnemploymentRules",
    "FgtsAnniversaryRules",
    # Rules
    "load_tax_rules",
    "resolve_year",
    "get_available_years",
    "get_tax_rules_dir",
    "TaxRulesNotFoundError",
    # Withholding
    "calc_progressive_withholding",
    "calc_marginal_withholding",
    "calc_inss",
    "calc_irrf",
    "find_bracket",
    "round_cents",
]
