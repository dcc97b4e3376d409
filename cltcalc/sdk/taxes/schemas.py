"""Pydantic schemas for tax rules validation.

These schemas validate the tax_rules/*.yaml files and provide typed access
to the yearly INSS, IRRF, unemployment-insurance and FGTS withdrawal tables.
"""

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaxBracket(BaseModel):
    """Single tax bracket entry.

    A bracket covers everything above the previous bracket's ``up_to`` and
    at or below its own ``up_to``.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    up_to: float = Field(..., gt=0, description="Upper bound, inclusive (.inf for the top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Rate as decimal")
    deduction: float = Field(default=0, ge=0, description="Fixed amount subtracted (IRRF)")
    added: float = Field(default=0, ge=0, description="Fixed amount added (unemployment, FGTS)")


def _check_ascending(brackets: List[TaxBracket]) -> List[TaxBracket]:
    if not brackets:
        raise ValueError("bracket table must not be empty")
    for lower, upper in zip(brackets, brackets[1:]):
        if upper.up_to <= lower.up_to:
            raise ValueError(
                f"bracket bounds must be strictly increasing ({lower.up_to} >= {upper.up_to})"
            )
    return brackets


def _check_open_ended(brackets: List[TaxBracket]) -> List[TaxBracket]:
    if not math.isinf(brackets[-1].up_to):
        raise ValueError("last bracket must be open-ended (up_to: .inf)")
    return brackets


class InssRules(BaseModel):
    """Social security (INSS) contribution table, computed slice by slice."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    ceiling: float = Field(..., ge=0, description="Maximum contribution (bases above the top bound)")
    brackets: List[TaxBracket]

    @field_validator("brackets")
    @classmethod
    def ascending(cls, v: List[TaxBracket]) -> List[TaxBracket]:
        return _check_ascending(v)

    @property
    def max_bound(self) -> float:
        return self.brackets[-1].up_to


class IrrfRules(BaseModel):
    """Monthly income tax (IRRF) table with per-dependent deduction."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    deduction_per_dependent: float = Field(..., ge=0)
    simplified_discount: Optional[float] = Field(default=None, ge=0)
    brackets: List[TaxBracket]

    @field_validator("brackets")
    @classmethod
    def ascending_open_ended(cls, v: List[TaxBracket]) -> List[TaxBracket]:
        return _check_open_ended(_check_ascending(v))


class UnemploymentRules(BaseModel):
    """Unemployment insurance tiers (average salary -> monthly benefit)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    ceiling: float = Field(..., ge=0)
    brackets: List[TaxBracket]

    @field_validator("brackets")
    @classmethod
    def three_tiers(cls, v: List[TaxBracket]) -> List[TaxBracket]:
        _check_open_ended(_check_ascending(v))
        if len(v) != 3:
            raise ValueError(f"unemployment table needs exactly 3 tiers, got {len(v)}")
        return v


class FamilySalaryRules(BaseModel):
    """Family allowance (salario-familia) threshold and value per child."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    limit: float = Field(..., ge=0)
    value: float = Field(..., ge=0)


class FgtsAnniversaryRules(BaseModel):
    """Annual FGTS withdrawal table (saque-aniversario)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    brackets: List[TaxBracket]

    @field_validator("brackets")
    @classmethod
    def ascending_open_ended(cls, v: List[TaxBracket]) -> List[TaxBracket]:
        return _check_open_ended(_check_ascending(v))


class TaxRules(BaseModel):
    """Complete tax tables for a year."""
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    year: int
    minimum_wage: float = Field(..., gt=0)
    inss: InssRules
    irrf: IrrfRules
    unemployment: UnemploymentRules
    fgts_anniversary: FgtsAnniversaryRules
    # Optional sections
    family_salary: Optional[FamilySalaryRules] = None
