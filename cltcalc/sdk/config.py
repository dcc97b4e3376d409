"""Configuration management for CLT Calc.

Configuration lives in a single machine-local file:

settings.json - tool preferences
   - tax_year: default year of the tax tables (newest shipped if unset)
   - tax_rules_dir: directory with alternate <year>.yaml tax tables
   - default_output_format: "table" or "json"

Config directory resolution:
1. CLT_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/clt-calc/ (XDG_CONFIG_HOME fallback)

Data path follows the XDG base directories:
- Data: XDG_DATA_HOME/clt-calc/ or ~/.local/share/clt-calc/
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

APP_NAME = "clt-calc"
SETTINGS_FILENAME = "settings.json"

# Settings the CLI knows how to set; anything else is rejected by `settings set`.
KNOWN_SETTINGS = {
    "tax_year": "Default year of the tax tables (e.g. 2025)",
    "tax_rules_dir": "Directory with alternate <year>.yaml tax tables",
    "default_output_format": "Output format when --format is not given (table or json)",
}


class ConfigNotFoundError(Exception):
    """Raised when configuration is missing or unreadable."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. CLT_CALC_CONFIG_PATH environment variable
    2. ~/.config/clt-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    env_path = os.environ.get("CLT_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)

    Raises:
        ConfigNotFoundError: If the file exists but is not valid JSON
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    try:
        with open(settings_file, "r") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigNotFoundError(f"Settings file is not valid JSON: {settings_file}\n{e}")


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Args:
        key: Setting key (e.g., "tax_year", "default_output_format")
        default: Default value if key not found
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was present."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_data_path() -> Path:
    """Get the data directory path (XDG_DATA_HOME/clt-calc/).

    Returns:
        Path to the data directory (created if doesn't exist)
    """
    xdg_data_home = os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share")
    data_path = Path(xdg_data_home) / APP_NAME
    data_path.mkdir(parents=True, exist_ok=True)
    return data_path


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for the CLI and MCP entry points.

    Level comes from the argument, else the LOG_LEVEL environment variable,
    else WARNING.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )
