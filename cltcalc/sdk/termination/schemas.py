"""Termination input and result schemas.

Inputs carry no range constraints: the engine accepts any numbers and dates
and always produces a result. Range checks live in ``validate.py``.
"""

from datetime import date
from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class TerminationReason(str, Enum):
    """Why the employment contract ended."""

    DISMISSAL_NO_CAUSE = "dismissal_no_cause"
    DISMISSAL_WITH_CAUSE = "dismissal_with_cause"
    RESIGNATION = "resignation"
    AGREEMENT = "agreement"
    PROBATION_END = "probation_end"
    PROBATION_EARLY_EMPLOYER = "probation_early_employer"
    PROBATION_EARLY_EMPLOYEE = "probation_early_employee"
    DEATH = "death"

    @property
    def label(self) -> str:
        return _REASON_LABELS[self]


class NoticeType(str, Enum):
    """How the notice period (aviso previo) is handled."""

    WORKED = "worked"
    INDEMNIFIED = "indemnified"
    NOT_FULFILLED = "not_fulfilled"
    NOT_APPLICABLE = "not_applicable"

    @property
    def label(self) -> str:
        return _NOTICE_LABELS[self]


_REASON_LABELS = {
    TerminationReason.DISMISSAL_NO_CAUSE: "Demissão sem Justa Causa",
    TerminationReason.DISMISSAL_WITH_CAUSE: "Demissão por Justa Causa",
    TerminationReason.RESIGNATION: "Pedido de Demissão",
    TerminationReason.AGREEMENT: "Acordo (Comum Acordo - Reforma Trab.)",
    TerminationReason.PROBATION_END: "Término de Contrato de Experiência",
    TerminationReason.PROBATION_EARLY_EMPLOYER: "Rescisão Antecipada Exp. (Pelo Empregador)",
    TerminationReason.PROBATION_EARLY_EMPLOYEE: "Rescisão Antecipada Exp. (Pelo Empregado)",
    TerminationReason.DEATH: "Falecimento do Empregado",
}

_NOTICE_LABELS = {
    NoticeType.WORKED: "Trabalhado",
    NoticeType.INDEMNIFIED: "Indenizado (Pago pela empresa)",
    NoticeType.NOT_FULFILLED: "Não Cumprido (Descontado)",
    NoticeType.NOT_APPLICABLE: "Não se aplica",
}

# Notice types that make sense for each reason. Order is the display order,
# first entry is the default offered by the CLI.
ALLOWED_NOTICE_TYPES: Dict[TerminationReason, Tuple[NoticeType, ...]] = {
    TerminationReason.DISMISSAL_NO_CAUSE: (NoticeType.INDEMNIFIED, NoticeType.WORKED),
    TerminationReason.DISMISSAL_WITH_CAUSE: (NoticeType.NOT_APPLICABLE,),
    TerminationReason.RESIGNATION: (NoticeType.WORKED, NoticeType.NOT_FULFILLED),
    TerminationReason.AGREEMENT: (NoticeType.INDEMNIFIED, NoticeType.WORKED),
    TerminationReason.PROBATION_END: (NoticeType.NOT_APPLICABLE,),
    TerminationReason.PROBATION_EARLY_EMPLOYER: (NoticeType.INDEMNIFIED, NoticeType.NOT_APPLICABLE),
    TerminationReason.PROBATION_EARLY_EMPLOYEE: (NoticeType.NOT_FULFILLED, NoticeType.NOT_APPLICABLE),
    TerminationReason.DEATH: (NoticeType.NOT_APPLICABLE,),
}


def allowed_notice_types(reason: TerminationReason) -> Tuple[NoticeType, ...]:
    """Notice types valid for a termination reason."""
    return ALLOWED_NOTICE_TYPES[reason]


class TerminationInputs(BaseModel):
    """Employment facts for a termination calculation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    salary: float = Field(..., description="Monthly gross salary")
    start_date: date = Field(..., description="Contract start date")
    end_date: date = Field(..., description="Contract end date (last day worked)")
    reason: TerminationReason
    notice_type: NoticeType
    vacation_overdue_days: int = Field(default=0, description="Days of vested, untaken vacation")
    fgts_balance: float = Field(default=0, description="FGTS balance used as the fine base")
    dependents: int = Field(default=0, description="Dependents for IRRF deduction")
    thirteenth_advanced: bool = Field(
        default=False, description="First 13th-salary installment already paid this year"
    )


class Earnings(BaseModel):
    """Gross amounts owed to the employee."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    salary_balance: float = Field(..., description="Saldo de salario")
    notice_indemnified: float = Field(..., description="Indemnified notice pay")
    vacation_total: float = Field(..., description="Overdue + proportional vacation + one third")
    thirteenth_total: float = Field(..., description="Proportional 13th salary")
    fgts_fine: float = Field(..., description="FGTS fine (40% or 20%)")

    @property
    def total(self) -> float:
        return (
            self.salary_balance
            + self.notice_indemnified
            + self.vacation_total
            + self.thirteenth_total
            + self.fgts_fine
        )


class Discounts(BaseModel):
    """Amounts withheld from the payout."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    inss: float
    irrf: float
    notice_deduction: float = Field(..., description="Unfulfilled notice deducted")
    thirteenth_advance: float = Field(..., description="13th first installment already paid")

    @property
    def total(self) -> float:
        return self.inss + self.irrf + self.notice_deduction + self.thirteenth_advance


class ResultMeta(BaseModel):
    """Intermediate facts behind the amounts."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    years_worked: int
    notice_days: int
    projected_date: date = Field(..., description="Contract end projected by notice credit")
    vacation_months: int
    thirteenth_months: int
    tax_year: int


class CalculationResult(BaseModel):
    """Termination calculation output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    earnings: Earnings
    discounts: Discounts
    vacation_due: float = Field(..., description="Overdue vacation, before one third")
    vacation_proportional: float = Field(..., description="Proportional vacation, before one third")
    vacation_third: float = Field(..., description="Constitutional one-third bonus")
    thirteenth_proportional: float
    notice_warning: float = Field(
        ..., description="Notice amount: positive when paid, negative when deducted"
    )
    total_gross: float
    total_discounts: float
    total_net: float
    meta: ResultMeta

    @property
    def salary_balance(self) -> float:
        return self.earnings.salary_balance

    @property
    def fgts_fine(self) -> float:
        return self.earnings.fgts_fine
