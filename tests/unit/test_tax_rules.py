"""Tests for loading the yearly tax tables.

Alternate table directories are built under tmp_path and selected with
CLT_CALC_TAX_RULES_DIR.
"""

import shutil
from pathlib import Path

import pytest
from pydantic import ValidationError

import cltcalc
from cltcalc.sdk import set_setting
from cltcalc.sdk.taxes import (
    TaxRulesNotFoundError,
    get_available_years,
    get_tax_rules_dir,
    load_tax_rules,
    resolve_year,
)

SHIPPED_DIR = Path(cltcalc.__file__).parent / "tax_rules"


@pytest.fixture
def rules_dir(tmp_path, monkeypatch):
    """Alternate tables directory holding only 2024."""
    d = tmp_path / "tables"
    d.mkdir()
    shutil.copy(SHIPPED_DIR / "2024.yaml", d / "2024.yaml")
    monkeypatch.setenv("CLT_CALC_TAX_RULES_DIR", str(d))
    return d


class TestShippedTables:
    """Tests for the tables packaged with cltcalc."""

    def test_default_dir_is_package_dir(self):
        assert get_tax_rules_dir() == SHIPPED_DIR

    def test_years_available_descending(self):
        years = get_available_years()
        assert 2024 in years and 2025 in years
        assert years == sorted(years, reverse=True)

    @pytest.mark.parametrize("year", [2024, 2025])
    def test_loads_and_validates(self, year):
        """Each shipped file parses into a consistent TaxRules."""
        rules = load_tax_rules(year)
        assert rules.year == year
        assert rules.minimum_wage > 0
        assert len(rules.inss.brackets) == 4
        assert rules.irrf.brackets[-1].up_to == float("inf")
        assert len(rules.unemployment.brackets) == 3

    def test_year_as_string(self):
        assert load_tax_rules("2024").year == 2024

    def test_default_is_newest(self):
        assert load_tax_rules().year == get_available_years()[0]

    def test_tax_year_setting_is_default(self):
        """settings.json tax_year picks the default table."""
        set_setting("tax_year", 2024)
        assert load_tax_rules().year == 2024


class TestYearResolution:
    """Tests for picking a table year."""

    def test_missing_year_falls_back_to_earlier(self, rules_dir):
        """A later year without its own file uses the newest earlier one."""
        assert resolve_year(2026) == 2024
        assert load_tax_rules(2026).year == 2024

    def test_year_before_all_tables_raises(self, rules_dir):
        with pytest.raises(TaxRulesNotFoundError, match="2019"):
            load_tax_rules(2019)

    def test_empty_dir_raises(self, tmp_path, monkeypatch):
        empty = tmp_path / "empty"
        empty.mkdir()
        monkeypatch.setenv("CLT_CALC_TAX_RULES_DIR", str(empty))

        with pytest.raises(TaxRulesNotFoundError):
            load_tax_rules()

    def test_not_found_is_file_not_found(self):
        """Callers catching FileNotFoundError also catch missing tables."""
        assert issubclass(TaxRulesNotFoundError, FileNotFoundError)

    def test_ignores_non_year_files(self, rules_dir):
        (rules_dir / "notes.yaml").write_text("year: 1\n")
        assert get_available_years(rules_dir) == [2024]

    def test_tax_rules_dir_setting(self, tmp_path, monkeypatch):
        """The tax_rules_dir setting is used when the env var is unset."""
        d = tmp_path / "from_settings"
        d.mkdir()
        shutil.copy(SHIPPED_DIR / "2024.yaml", d / "2024.yaml")
        set_setting("tax_rules_dir", str(d))

        assert get_tax_rules_dir() == d
        assert get_available_years() == [2024]


class TestMalformedTables:
    """Tests for schema validation of table files."""

    def _write(self, rules_dir, text):
        (rules_dir / "2030.yaml").write_text(text)

    def test_descending_brackets_rejected(self, rules_dir):
        original = (rules_dir / "2024.yaml").read_text()
        broken = original.replace("{up_to: 2666.68, rate: 0.09}", "{up_to: 1000.00, rate: 0.09}")
        self._write(rules_dir, broken.replace("year: 2024", "year: 2030"))

        with pytest.raises(ValidationError, match="strictly increasing"):
            load_tax_rules(2030)

    def test_irrf_must_be_open_ended(self, rules_dir):
        original = (rules_dir / "2024.yaml").read_text()
        broken = original.replace(
            "{up_to: .inf, rate: 0.275, deduction: 896.00}",
            "{up_to: 99999.00, rate: 0.275, deduction: 896.00}",
        )
        self._write(rules_dir, broken.replace("year: 2024", "year: 2030"))

        with pytest.raises(ValidationError, match="open-ended"):
            load_tax_rules(2030)

    def test_rate_above_one_rejected(self, rules_dir):
        original = (rules_dir / "2024.yaml").read_text()
        broken = original.replace("{up_to: 1412.00, rate: 0.075}", "{up_to: 1412.00, rate: 7.5}")
        self._write(rules_dir, broken.replace("year: 2024", "year: 2030"))

        with pytest.raises(ValidationError):
            load_tax_rules(2030)

    def test_unknown_top_level_keys_ignored(self, rules_dir):
        original = (rules_dir / "2024.yaml").read_text()
        self._write(rules_dir, original.replace("year: 2024", "year: 2030") + "\nnotes: revised\n")

        assert load_tax_rules(2030).year == 2030
