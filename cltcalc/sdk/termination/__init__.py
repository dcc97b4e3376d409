"""termination - Severance (rescisao) calculation.

Usage:
    from cltcalc.sdk.termination import (
        TerminationInputs, TerminationReason, NoticeType, calculate_termination,
    )

    result = calculate_termination(TerminationInputs(
        salary=3000,
        start_date="2023-01-10",
        end_date="2024-01-10",
        reason=TerminationReason.DISMISSAL_NO_CAUSE,
        notice_type=NoticeType.INDEMNIFIED,
        fgts_balance=8000,
    ))
"""

from .schemas import (
    TerminationReason,
    NoticeType,
    TerminationInputs,
    CalculationResult,
    Earnings,
    Discounts,
    ResultMeta,
    ALLOWED_NOTICE_TYPES,
    allowed_notice_types,
)

from .entitlements import Entitlements, resolve_entitlements
from .engine import calculate_termination
from .validate import validate_inputs, InputValidationResult, InputValidationError

__all__ = [
    "TerminationReason",
    "NoticeType",
    "TerminationInputs",
    "CalculationResult",
    "Earnings",
    "Discounts",
    "ResultMeta",
    "ALLOWED_NOTICE_TYPES",
    "allowed_notice_types",
    "Entitlements",
    "resolve_entitlements",
    "calculate_termination",
    "validate_inputs",
    "InputValidationResult",
    "InputValidationError",
]
