"""Opt-in validation of termination inputs.

The engine accepts anything and always returns numbers. Callers that want
to refuse nonsensical facts (negative salary, end before start) run
``validate_inputs`` first and decide what to do with the result.
"""

from typing import List, Optional

from .schemas import TerminationInputs, allowed_notice_types


class InputValidationError(ValueError):
    """Raised by InputValidationResult.raise_for_errors()."""
    pass


class InputValidationResult:
    """Errors (inputs the engine cannot meaningfully use) and warnings
    (inputs that are allowed but unusual)."""

    def __init__(self, errors: Optional[List[str]] = None, warnings: Optional[List[str]] = None):
        self.errors = errors or []
        self.warnings = warnings or []

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise InputValidationError if any errors were found."""
        if self.errors:
            error_str = "\n  ! ".join(self.errors)
            raise InputValidationError(f"Invalid termination inputs:\n  ! {error_str}")


def validate_inputs(inputs: TerminationInputs) -> InputValidationResult:
    """Check termination inputs for range and consistency problems."""
    errors = []
    warnings = []

    if inputs.salary <= 0:
        errors.append(f"salary must be positive (got {inputs.salary:.2f})")
    if inputs.end_date < inputs.start_date:
        errors.append(
            f"end date {inputs.end_date.isoformat()} is before start date "
            f"{inputs.start_date.isoformat()}"
        )
    if inputs.vacation_overdue_days < 0:
        errors.append(f"overdue vacation days cannot be negative (got {inputs.vacation_overdue_days})")
    if inputs.fgts_balance < 0:
        errors.append(f"FGTS balance cannot be negative (got {inputs.fgts_balance:.2f})")
    if inputs.dependents < 0:
        errors.append(f"dependents cannot be negative (got {inputs.dependents})")

    allowed = allowed_notice_types(inputs.reason)
    if inputs.notice_type not in allowed:
        allowed_str = ", ".join(n.value for n in allowed)
        warnings.append(
            f"notice type '{inputs.notice_type.value}' does not apply to "
            f"'{inputs.reason.value}' (expected: {allowed_str}); it will have no effect"
        )
    if inputs.vacation_overdue_days > 60:
        warnings.append(
            f"{inputs.vacation_overdue_days} overdue vacation days is more than two full periods"
        )

    return InputValidationResult(errors=errors, warnings=warnings)
