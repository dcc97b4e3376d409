"""Shared fixtures.

Every test runs against isolated config/data directories so a developer's
settings.json (tax_year, tax_rules_dir, default_output_format) never leaks in.
"""

import pytest

from cltcalc.sdk import load_tax_rules


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point config and data lookups at empty temporary directories."""
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()

    monkeypatch.setenv("CLT_CALC_CONFIG_PATH", str(config_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(data_dir))
    monkeypatch.delenv("CLT_CALC_TAX_RULES_DIR", raising=False)

    return {
        "config_dir": config_dir,
        "data_dir": data_dir,
    }


@pytest.fixture
def rules_2024():
    """Shipped 2024 tables, pinned so results don't move with new years."""
    return load_tax_rules(2024)
