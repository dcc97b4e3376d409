"""Tests for INSS (progressive) and IRRF (marginal) withholding."""

import pytest

from cltcalc.sdk.taxes import (
    TaxBracket,
    calc_inss,
    calc_irrf,
    calc_marginal_withholding,
    calc_progressive_withholding,
    find_bracket,
    load_tax_rules,
)


class TestFindBracket:
    """Tests for bracket lookup."""

    def test_bound_is_inclusive(self, rules_2024):
        """An amount exactly on a bound belongs to the lower bracket."""
        bracket = find_bracket(2259.20, rules_2024.irrf.brackets)
        assert bracket.rate == 0.0

    def test_above_every_bound_gets_last(self):
        """Amounts above all bounds fall into the last bracket."""
        brackets = [TaxBracket(up_to=100, rate=0.1), TaxBracket(up_to=200, rate=0.2)]
        assert find_bracket(500, brackets).rate == 0.2


class TestInss:
    """Tests for progressive INSS withholding."""

    def test_first_bracket_only(self, rules_2024):
        """Minimum wage pays 7.5% flat."""
        assert calc_inss(1412.00, rules_2024) == pytest.approx(105.90)

    def test_sums_slices(self, rules_2024):
        """3000 crosses three brackets; each slice pays its own rate."""
        # 1412*7.5% + 1254.68*9% + 333.32*12%
        assert calc_inss(3000, rules_2024) == pytest.approx(258.82)

    def test_ceiling_above_top_bound(self, rules_2024):
        """Bases above the top bound pay exactly the ceiling."""
        assert calc_inss(20000, rules_2024) == rules_2024.inss.ceiling

    def test_zero_base(self, rules_2024):
        assert calc_inss(0, rules_2024) == 0

    def test_monotonic(self, rules_2024):
        """A larger base never pays less."""
        previous = 0.0
        for base in range(0, 12000, 50):
            current = calc_inss(base, rules_2024)
            assert current >= previous
            previous = current

    def test_continuous_across_bounds(self, rules_2024):
        """No jump at a bracket boundary."""
        for bracket in rules_2024.inss.brackets[:-1]:
            below = calc_inss(bracket.up_to, rules_2024)
            above = calc_inss(bracket.up_to + 0.01, rules_2024)
            assert above - below < 0.02

    def test_progressive_generic_table(self):
        """Slices work for any ascending table."""
        brackets = [TaxBracket(up_to=100, rate=0.1), TaxBracket(up_to=200, rate=0.2)]
        assert calc_progressive_withholding(150, brackets, ceiling=30) == pytest.approx(20.0)
        assert calc_progressive_withholding(250, brackets, ceiling=30) == 30


class TestIrrf:
    """Tests for marginal IRRF withholding."""

    def test_exempt_up_to_first_bound(self, rules_2024):
        """The boundary value itself is exempt."""
        assert calc_irrf(2259.20, 0, rules_2024) == 0.0

    def test_second_bracket(self, rules_2024):
        """Whole base times rate minus the bracket deduction."""
        # 2500 * 7.5% - 169.44
        assert calc_irrf(2500, 0, rules_2024) == pytest.approx(18.06)

    def test_top_bracket(self, rules_2024):
        # 10000 * 27.5% - 896.00
        assert calc_irrf(10000, 0, rules_2024) == pytest.approx(1854.00)

    def test_dependents_never_increase_tax(self, rules_2024):
        """Each dependent lowers (or keeps) the withholding."""
        for base in (2500, 4000, 8000):
            amounts = [calc_irrf(base, d, rules_2024) for d in range(5)]
            assert amounts == sorted(amounts, reverse=True)

    def test_never_negative(self, rules_2024):
        """Huge dependent deductions floor at zero."""
        assert calc_irrf(3000, 50, rules_2024) == 0.0

    def test_zero_rate_bracket_short_circuits(self):
        brackets = [TaxBracket(up_to=100, rate=0.0, deduction=0), TaxBracket(up_to=float("inf"), rate=0.1)]
        assert calc_marginal_withholding(80, 0, brackets, 10) == 0.0
        assert calc_marginal_withholding(300, 1, brackets, 100) == pytest.approx(20.0)


@pytest.mark.parametrize("year", [2024, 2025])
class TestIrrfTables:
    """Checks that hold for every shipped IRRF table."""

    def test_monotonic(self, year):
        """A larger base never pays less, including one cent past each bound."""
        rules = load_tax_rules(year)
        bases = [float(b) for b in range(0, 12000, 10)]
        for bracket in rules.irrf.brackets[:-1]:
            bases += [bracket.up_to, round(bracket.up_to + 0.01, 2)]

        previous = 0.0
        for base in sorted(bases):
            current = calc_irrf(base, 0, rules)
            assert current >= previous, f"IRRF drops at {base:.2f}"
            previous = current

    def test_amount_on_bound_uses_lower_bracket(self, year):
        """A base exactly on a bound is taxed by the bracket it closes."""
        rules = load_tax_rules(year)
        for bracket in rules.irrf.brackets[:-1]:
            assert find_bracket(bracket.up_to, rules.irrf.brackets) is bracket
            expected = max(0.0, round(bracket.up_to * bracket.rate - bracket.deduction, 2))
            assert calc_irrf(bracket.up_to, 0, rules) == pytest.approx(expected)
