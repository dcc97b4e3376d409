"""Tests for the clt-calc CLI.

Config and data directories are isolated by the autouse isolated_env
fixture; tables are pinned with --year 2024.
"""

import json

import pytest
from click.testing import CliRunner

from cltcalc import __version__
from cltcalc.cli.__main__ import cli
from cltcalc.sdk import set_setting

ONE_YEAR = ["3000", "2023-01-10", "2024-01-10", "--fgts", "8000", "--year", "2024"]


@pytest.fixture
def runner():
    return CliRunner()


class TestTermination:
    """Tests for the termination command."""

    def test_json_output(self, runner):
        result = runner.invoke(cli, ["termination", *ONE_YEAR, "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["inputs"]["notice_type"] == "indemnified"
        assert data["result"]["meta"]["notice_days"] == 33
        assert data["result"]["meta"]["projected_date"] == "2024-02-12"
        assert data["result"]["total_net"] == pytest.approx(7989.58, abs=0.01)
        assert data["warnings"] == []

    def test_table_output(self, runner):
        result = runner.invoke(cli, ["termination", *ONE_YEAR])

        assert result.exit_code == 0, result.output
        assert "Saldo de salário" in result.output
        assert "Multa FGTS" in result.output
        assert "Líquido a receber" in result.output

    def test_brazilian_date_format(self, runner):
        result = runner.invoke(cli, [
            "termination", "3000", "10/01/2023", "10/01/2024", "--year", "2024", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["inputs"]["start_date"] == "2023-01-10"

    def test_notice_defaults_per_reason(self, runner):
        result = runner.invoke(cli, [
            "termination", *ONE_YEAR, "--reason", "resignation", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["inputs"]["notice_type"] == "worked"

    def test_inconsistent_inputs_warn(self, runner):
        """Without --strict, validation problems are reported but computed."""
        result = runner.invoke(cli, [
            "termination", "3000", "2024-01-10", "2023-01-10", "--year", "2024", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        warnings = json.loads(result.output)["warnings"]
        assert any("before start date" in w for w in warnings)

    def test_strict_refuses_inconsistent_inputs(self, runner):
        result = runner.invoke(cli, [
            "termination", "3000", "2024-01-10", "2023-01-10", "--year", "2024", "--strict",
        ])

        assert result.exit_code == 1
        assert "Invalid termination inputs" in result.output
        assert "before start date" in result.output

    def test_strict_allows_warnings(self, runner):
        """Warnings alone do not stop a strict run."""
        result = runner.invoke(cli, [
            "termination", "3000", "2023-01-10", "2024-01-10", "--year", "2024", "--strict",
            "-r", "resignation", "-n", "indemnified", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        warnings = json.loads(result.output)["warnings"]
        assert any("no effect" in w for w in warnings)

    def test_export_statement(self, runner, tmp_path):
        out_file = tmp_path / "rescisao.txt"
        result = runner.invoke(cli, ["termination", *ONE_YEAR, "--output", str(out_file)])

        assert result.exit_code == 0, result.output
        text = out_file.read_text(encoding="utf-8")
        assert "Saldo de salário" in text
        assert "Estimativa" in text
        assert "\x1b[" not in text

    def test_unknown_year(self, runner):
        result = runner.invoke(cli, ["termination", "3000", "2023-01-10", "2024-01-10", "--year", "1990"])

        assert result.exit_code == 1
        assert "No tax rules for 1990" in result.output

    def test_default_format_setting(self, runner):
        set_setting("default_output_format", "json")
        result = runner.invoke(cli, ["termination", *ONE_YEAR])

        assert result.exit_code == 0, result.output
        assert "result" in json.loads(result.output)


class TestCalculatorCommands:
    """Tests for the small calculator commands."""

    def test_unemployment(self, runner):
        result = runner.invoke(cli, [
            "unemployment", "2000", "2000", "2000", "--months", "26", "--year", "2024", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["benefit_value"] == pytest.approx(1600.00)
        assert data["installments"] == 5

    def test_vacation_table(self, runner):
        result = runner.invoke(cli, ["vacation", "3000", "--sell", "--year", "2024"])

        assert result.exit_code == 0, result.output
        assert "Abono" in result.output

    def test_overtime(self, runner):
        result = runner.invoke(cli, ["overtime", "2200", "10", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["total"] == pytest.approx(175.00)

    def test_night_shift(self, runner):
        result = runner.invoke(cli, ["night-shift", "2200", "7", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["effective_hours"] == pytest.approx(8.0)

    def test_net_salary(self, runner):
        result = runner.invoke(cli, ["net-salary", "3000", "--year", "2024", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["inss"] == pytest.approx(258.82)

    def test_fgts_with_projection(self, runner):
        result = runner.invoke(cli, [
            "fgts", "10000", "--salary", "3000", "--years", "1", "--year", "2024", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["anniversary"]["annual_withdrawal"] == pytest.approx(2650.00)
        assert data["projection"]["deposited"] == pytest.approx(12880.00)

    def test_fgts_without_projection(self, runner):
        result = runner.invoke(cli, ["fgts", "10000", "--year", "2024", "--format", "json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["projection"] is None

    def test_invest(self, runner):
        result = runner.invoke(cli, ["invest", "1000", "12"])

        assert result.exit_code == 0, result.output
        assert "Poupança" in result.output

    def test_exit_date(self, runner):
        result = runner.invoke(cli, ["exit-date", "1200", "--date", "2024-05-10", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["safe"] is False
        assert data["days_to_wait"] == 5
        assert data["total_at_stake"] == pytest.approx(233.33, abs=0.01)

    def test_thirteenth(self, runner):
        result = runner.invoke(cli, ["thirteenth", "3000", "--months", "6", "--year", "2024", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["first_installment"] == pytest.approx(750.00)
        assert data["net"] == pytest.approx(1386.18)

    def test_domestic_json(self, runner):
        result = runner.invoke(cli, [
            "domestic", "1500", "--transport", "200", "--year", "2024", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total_net"] == pytest.approx(1296.18)
        assert data["dae"]["total"] == pytest.approx(413.82)
        assert data["employer_cost"] == pytest.approx(1820.00)

    def test_domestic_table(self, runner):
        result = runner.invoke(cli, ["domestic", "1500", "--year", "2024"])

        assert result.exit_code == 0, result.output
        assert "DAE" in result.output
        assert "Employer monthly cost" in result.output

    def test_clt_vs_pj(self, runner):
        result = runner.invoke(cli, ["clt-vs-pj", "3000", "10000", "--year", "2024", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["pj"]["total"] == pytest.approx(110400.00)
        assert data["clt"]["benefits"] == pytest.approx(10800.00)
        assert data["break_even_pj_gross"] > 0

    def test_clt_vs_pj_table(self, runner):
        result = runner.invoke(cli, ["clt-vs-pj", "3000", "10000", "--year", "2024"])

        assert result.exit_code == 0, result.output
        assert "PJ pays" in result.output

    def test_work_schedule(self, runner):
        result = runner.invoke(cli, ["work-schedule", "--entry", "07:30"])

        assert result.exit_code == 0, result.output
        assert "17:18" in result.output

    def test_work_schedule_rejects_bad_time(self, runner):
        result = runner.invoke(cli, ["work-schedule", "--entry", "7h30"])

        assert result.exit_code == 2
        assert "HH:MM" in result.output

    def test_survival(self, runner):
        result = runner.invoke(cli, [
            "survival", "10000", "--fgts", "3000", "--savings", "2000", "--cost", "3500",
            "--benefit", "1800", "--benefit-months", "5", "--format", "json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["months"] == 7
        assert data["runs_out"] is True
        assert data["status"] == "attention"


class TestHourlyCommands:
    """Tests for the persisted hourly-rate widget."""

    def test_show_without_salary(self, runner):
        result = runner.invoke(cli, ["hourly", "show"])

        assert result.exit_code == 0
        assert "No salary saved yet" in result.output

    def test_set_persists(self, runner):
        result = runner.invoke(cli, ["hourly", "set", "2200"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli, ["hourly", "show", "--format", "json"])
        data = json.loads(result.output)
        assert data["monthly_salary"] == 2200
        assert data["rates"]["hour_rate"] == pytest.approx(10.00)


class TestTablesCommands:
    def test_list(self, runner):
        result = runner.invoke(cli, ["tables", "list"])

        assert result.exit_code == 0
        assert "2024" in result.output
        assert "2025" in result.output

    def test_show_json(self, runner):
        result = runner.invoke(cli, ["tables", "show", "2024", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["year"] == 2024
        assert data["irrf"]["brackets"][-1]["up_to"] is None
        assert data["inss"]["ceiling"] == pytest.approx(908.85)
        assert data["inss"]["max_bound"] == pytest.approx(7786.02)
        assert data["irrf"]["simplified_discount"] == pytest.approx(564.80)
        assert data["family_salary"] == {"limit": 1819.26, "value": 62.04}

    def test_show_table(self, runner):
        result = runner.invoke(cli, ["tables", "show", "2024"])

        assert result.exit_code == 0, result.output
        assert "INSS" in result.output
        assert "Salário-família" in result.output
        assert "R$ 62,04" in result.output


class TestSettingsCommands:
    """Tests for settings show/set/unset."""

    def test_show_empty(self, runner):
        result = runner.invoke(cli, ["settings", "show"])

        assert result.exit_code == 0
        assert "No settings configured" in result.output

    def test_set_tax_year(self, runner, isolated_env):
        result = runner.invoke(cli, ["settings", "set", "tax_year", "2024"])

        assert result.exit_code == 0, result.output
        saved = json.loads((isolated_env["config_dir"] / "settings.json").read_text())
        assert saved == {"tax_year": 2024}

    def test_set_rejects_bad_year(self, runner):
        result = runner.invoke(cli, ["settings", "set", "tax_year", "next"])
        assert result.exit_code == 2

    def test_set_rejects_unknown_key(self, runner):
        result = runner.invoke(cli, ["settings", "set", "colour", "blue"])
        assert result.exit_code == 2

    def test_unset(self, runner):
        set_setting("default_output_format", "json")
        result = runner.invoke(cli, ["settings", "unset", "default_output_format"])

        assert result.exit_code == 0
        assert "Cleared" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output
