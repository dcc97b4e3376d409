"""Entitlements granted by each termination reason."""

from dataclasses import dataclass

from .schemas import TerminationReason


@dataclass(frozen=True)
class Entitlements:
    """What a termination reason entitles (or obliges) the employee to.

    Mutual agreement is flagged on its own: the engine halves both the
    indemnified notice and the FGTS fine for it.
    """

    notice_indemnity: bool = False
    notice_deduction: bool = False
    fgts_fine_full: bool = False
    is_agreement: bool = False
    is_for_cause: bool = False
    is_probation_end: bool = False


def resolve_entitlements(reason: TerminationReason) -> Entitlements:
    """Map a termination reason to its entitlement flags."""
    match reason:
        case TerminationReason.DISMISSAL_NO_CAUSE | TerminationReason.PROBATION_EARLY_EMPLOYER:
            return Entitlements(notice_indemnity=True, fgts_fine_full=True)
        case TerminationReason.RESIGNATION | TerminationReason.PROBATION_EARLY_EMPLOYEE:
            return Entitlements(notice_deduction=True)
        case TerminationReason.AGREEMENT:
            return Entitlements(is_agreement=True)
        case TerminationReason.DISMISSAL_WITH_CAUSE:
            return Entitlements(is_for_cause=True)
        case TerminationReason.PROBATION_END:
            return Entitlements(is_probation_end=True)
        case TerminationReason.DEATH:
            return Entitlements()
        case _:
            raise ValueError(f"Unknown termination reason: {reason!r}")
