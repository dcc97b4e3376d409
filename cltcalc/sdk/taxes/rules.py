"""Tax rules loading.

Tables live in one YAML file per year. The shipped set is
``cltcalc/tax_rules/<year>.yaml``; an alternate directory can be given with
the CLT_CALC_TAX_RULES_DIR environment variable or the ``tax_rules_dir``
setting.
"""

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

import yaml

from ..config import get_setting
from .schemas import TaxRules

logger = logging.getLogger(__name__)


class TaxRulesNotFoundError(FileNotFoundError):
    """Raised when no tax table file covers the requested year."""
    pass


def get_tax_rules_dir() -> Path:
    """Get the tax_rules directory path.

    Resolution order:
    1. CLT_CALC_TAX_RULES_DIR environment variable
    2. settings.json "tax_rules_dir"
    3. tables shipped with the package
    """
    env_dir = os.environ.get("CLT_CALC_TAX_RULES_DIR")
    if env_dir:
        return Path(env_dir)

    custom_dir = get_setting("tax_rules_dir")
    if custom_dir:
        return Path(custom_dir).expanduser()

    package_root = Path(__file__).parent.parent.parent  # taxes -> sdk -> cltcalc
    return package_root / "tax_rules"


def get_available_years(rules_dir: Optional[Path] = None) -> list[int]:
    """Get sorted list of available tax rule years (descending)."""
    rules_dir = rules_dir or get_tax_rules_dir()
    years = [int(p.stem) for p in rules_dir.glob("*.yaml") if p.stem.isdigit()]
    return sorted(years, reverse=True)


def resolve_year(year: Union[int, str, None] = None, rules_dir: Optional[Path] = None) -> int:
    """Pick the table year to use for a calculation.

    Without an explicit year the ``tax_year`` setting is used, then the newest
    table available. A year without its own file falls back to the newest
    earlier year (tables carry over until revised).

    Raises:
        TaxRulesNotFoundError: If no table file is available at all, or all
            available tables are newer than the requested year.
    """
    rules_dir = rules_dir or get_tax_rules_dir()
    available = get_available_years(rules_dir)
    if not available:
        raise TaxRulesNotFoundError(f"No tax rules files found in {rules_dir}")

    if year is None:
        year = get_setting("tax_year")
    if year is None:
        return available[0]

    target = int(year)
    candidates = [y for y in available if y <= target]
    if not candidates:
        raise TaxRulesNotFoundError(
            f"No tax rules for {target} or earlier in {rules_dir} "
            f"(available: {', '.join(str(y) for y in available)})"
        )
    if candidates[0] != target:
        logger.debug(f"no tables for {target}, using {candidates[0]}")
    return candidates[0]


@lru_cache(maxsize=None)
def _load_file(path: Path) -> TaxRules:
    logger.debug(f"loading tax rules from {path}")
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return TaxRules.model_validate(data)


def load_tax_rules(year: Union[int, str, None] = None) -> TaxRules:
    """Load and validate the tax tables for a year.

    Args:
        year: Table year (e.g. 2024 or "2024"). None means the default year.

    Returns:
        Validated TaxRules

    Raises:
        TaxRulesNotFoundError: If no table covers the year
        pydantic.ValidationError: If the YAML file is malformed
    """
    rules_dir = get_tax_rules_dir()
    resolved = resolve_year(year, rules_dir)
    return _load_file(rules_dir / f"{resolved}.yaml")
