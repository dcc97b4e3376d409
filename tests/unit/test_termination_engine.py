"""Tests for the termination calculation engine.

Expected amounts are worked out by hand from the 2024 tables.
"""

from datetime import date

import pytest

from cltcalc.sdk.termination import (
    InputValidationError,
    NoticeType,
    TerminationInputs,
    TerminationReason,
    calculate_termination,
    validate_inputs,
)


def make_inputs(**overrides) -> TerminationInputs:
    """One year dismissed without cause, indemnified notice."""
    fields = {
        "salary": 3000.0,
        "start_date": date(2023, 1, 10),
        "end_date": date(2024, 1, 10),
        "reason": TerminationReason.DISMISSAL_NO_CAUSE,
        "notice_type": NoticeType.INDEMNIFIED,
        "fgts_balance": 8000.0,
    }
    fields.update(overrides)
    return TerminationInputs(**fields)


class TestDismissalNoCause:
    """One year, dismissed without cause, indemnified notice."""

    @pytest.fixture
    def result(self, rules_2024):
        return calculate_termination(make_inputs(), rules_2024)

    def test_meta(self, result):
        assert result.meta.years_worked == 1
        assert result.meta.notice_days == 33
        assert result.meta.projected_date == date(2024, 2, 12)
        assert result.meta.vacation_months == 1
        assert result.meta.thirteenth_months == 1
        assert result.meta.tax_year == 2024

    def test_earnings(self, result):
        assert result.salary_balance == pytest.approx(1000.00)
        assert result.earnings.notice_indemnified == pytest.approx(3300.00)
        assert result.vacation_proportional == pytest.approx(250.00)
        assert result.vacation_third == pytest.approx(83.33, abs=0.01)
        assert result.earnings.vacation_total == pytest.approx(333.33, abs=0.01)
        assert result.thirteenth_proportional == pytest.approx(250.00)
        assert result.fgts_fine == pytest.approx(3200.00)

    def test_taxes_on_salary_balance_and_thirteenth(self, result):
        """INSS on 1250 (first bracket); IRRF base below exemption."""
        assert result.discounts.inss == pytest.approx(93.75)
        assert result.discounts.irrf == 0.0

    def test_totals(self, result):
        assert result.total_gross == pytest.approx(8083.33, abs=0.01)
        assert result.total_discounts == pytest.approx(93.75)
        assert result.total_net == pytest.approx(7989.58, abs=0.01)

    def test_net_is_gross_minus_discounts(self, result):
        assert result.total_net == pytest.approx(result.total_gross - result.total_discounts)
        assert result.total_gross == pytest.approx(result.earnings.total)

    def test_notice_warning_shows_indemnity(self, result):
        assert result.notice_warning == pytest.approx(3300.00)

    def test_idempotent(self, rules_2024):
        """Same inputs, same result; inputs untouched."""
        inputs = make_inputs()
        first = calculate_termination(inputs, rules_2024)
        second = calculate_termination(inputs, rules_2024)
        assert first == second
        assert inputs == make_inputs()


class TestOtherReasons:
    """Entitlement effects per termination reason."""

    def test_with_cause_loses_proportionals_and_fine(self, rules_2024):
        result = calculate_termination(make_inputs(
            reason=TerminationReason.DISMISSAL_WITH_CAUSE,
            notice_type=NoticeType.NOT_APPLICABLE,
        ), rules_2024)

        assert result.earnings.notice_indemnified == 0
        assert result.vacation_proportional == 0
        assert result.thirteenth_proportional == 0
        assert result.fgts_fine == 0
        assert result.meta.projected_date == date(2024, 1, 10)
        assert result.salary_balance == pytest.approx(1000.00)

    def test_with_cause_keeps_overdue_vacation(self, rules_2024):
        result = calculate_termination(make_inputs(
            reason=TerminationReason.DISMISSAL_WITH_CAUSE,
            notice_type=NoticeType.NOT_APPLICABLE,
            vacation_overdue_days=30,
        ), rules_2024)

        assert result.vacation_due == pytest.approx(3000.00)
        assert result.vacation_third == pytest.approx(1000.00)

    def test_agreement_halves_notice_and_fine(self, rules_2024):
        """Two years: 36 days of notice, half paid; 20% fine."""
        result = calculate_termination(make_inputs(
            reason=TerminationReason.AGREEMENT,
            start_date=date(2022, 3, 1),
            end_date=date(2024, 3, 1),
            fgts_balance=10000.0,
        ), rules_2024)

        assert result.meta.years_worked == 2
        assert result.meta.notice_days == 36
        assert result.earnings.notice_indemnified == pytest.approx(1800.00)
        assert result.fgts_fine == pytest.approx(2000.00)
        assert result.meta.projected_date == date(2024, 3, 19)

    def test_resignation_not_fulfilled_deducts_a_month(self, rules_2024):
        result = calculate_termination(make_inputs(
            reason=TerminationReason.RESIGNATION,
            notice_type=NoticeType.NOT_FULFILLED,
        ), rules_2024)

        assert result.discounts.notice_deduction == pytest.approx(3000.00)
        assert result.notice_warning == pytest.approx(-3000.00)
        assert result.fgts_fine == 0
        assert result.earnings.notice_indemnified == 0

    def test_resignation_worked_notice(self, rules_2024):
        result = calculate_termination(make_inputs(
            reason=TerminationReason.RESIGNATION,
            notice_type=NoticeType.WORKED,
        ), rules_2024)

        assert result.discounts.notice_deduction == 0
        assert result.notice_warning == 0

    def test_probation_end_has_no_notice(self, rules_2024):
        result = calculate_termination(make_inputs(
            reason=TerminationReason.PROBATION_END,
            notice_type=NoticeType.NOT_APPLICABLE,
            start_date=date(2024, 1, 1),
            end_date=date(2024, 3, 30),
        ), rules_2024)

        assert result.meta.notice_days == 0
        assert result.fgts_fine == 0
        assert result.meta.thirteenth_months == 3

    def test_death_pays_proportionals_without_fine(self, rules_2024):
        result = calculate_termination(make_inputs(
            reason=TerminationReason.DEATH,
            notice_type=NoticeType.NOT_APPLICABLE,
            end_date=date(2024, 6, 20),
        ), rules_2024)

        assert result.fgts_fine == 0
        assert result.earnings.notice_indemnified == 0
        assert result.thirteenth_proportional > 0


class TestEdgeCases:
    """Dates and amounts the engine must handle without raising."""

    def test_end_on_last_day_pays_full_month(self, rules_2024):
        result = calculate_termination(make_inputs(end_date=date(2024, 2, 29)), rules_2024)
        assert result.salary_balance == 3000.0

    def test_thirteenth_already_advanced(self, rules_2024):
        result = calculate_termination(make_inputs(thirteenth_advanced=True), rules_2024)
        assert result.discounts.thirteenth_advance == pytest.approx(1500.00)

    def test_dependents_lower_irrf(self, rules_2024):
        big = make_inputs(salary=12000.0, end_date=date(2024, 11, 20))
        without = calculate_termination(big, rules_2024)
        with_deps = calculate_termination(big.model_copy(update={"dependents": 3}), rules_2024)
        assert with_deps.discounts.irrf < without.discounts.irrf

    def test_reversed_dates_do_not_raise(self, rules_2024):
        result = calculate_termination(make_inputs(
            start_date=date(2024, 1, 10),
            end_date=date(2023, 1, 10),
        ), rules_2024)
        assert result.meta.years_worked == 1

    def test_reversed_dates_in_year_one_do_not_raise(self, rules_2024):
        result = calculate_termination(make_inputs(
            start_date=date(1, 6, 1),
            end_date=date(1, 3, 1),
        ), rules_2024)
        assert result.meta.vacation_months == 0

    def test_end_date_at_calendar_limit_does_not_raise(self, rules_2024):
        result = calculate_termination(make_inputs(
            start_date=date(9998, 1, 1),
            end_date=date(9999, 12, 20),
        ), rules_2024)
        assert result.meta.projected_date == date.max

    def test_zero_salary_gives_zero_amounts(self, rules_2024):
        result = calculate_termination(make_inputs(salary=0.0, fgts_balance=0.0), rules_2024)
        assert result.total_gross == 0
        assert result.total_net == 0

    def test_loads_default_tables_when_omitted(self):
        result = calculate_termination(make_inputs())
        assert result.meta.tax_year >= 2024


class TestValidateInputs:
    """Tests for opt-in input validation."""

    def test_clean_inputs(self):
        validation = validate_inputs(make_inputs())
        assert validation.ok
        assert validation.warnings == []
        validation.raise_for_errors()

    def test_collects_all_errors(self):
        validation = validate_inputs(make_inputs(
            salary=-1.0,
            start_date=date(2024, 2, 1),
            end_date=date(2024, 1, 1),
            fgts_balance=-5.0,
            dependents=-1,
            vacation_overdue_days=-3,
        ))
        assert not validation.ok
        assert len(validation.errors) == 5

    def test_raise_for_errors(self):
        validation = validate_inputs(make_inputs(salary=0.0))
        with pytest.raises(InputValidationError, match="salary must be positive"):
            validation.raise_for_errors()

    def test_notice_type_mismatch_is_a_warning(self):
        validation = validate_inputs(make_inputs(
            reason=TerminationReason.DISMISSAL_WITH_CAUSE,
            notice_type=NoticeType.INDEMNIFIED,
        ))
        assert validation.ok
        assert any("does not apply" in w for w in validation.warnings)

    def test_many_overdue_days_warns(self):
        validation = validate_inputs(make_inputs(vacation_overdue_days=75))
        assert validation.ok
        assert len(validation.warnings) == 1
