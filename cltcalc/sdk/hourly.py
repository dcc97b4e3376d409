"""Hourly-rate widget state ("quanto vale sua hora").

The widget keeps a tiny record (monthly salary, weekly hours) in a
key-value store: loaded once when the widget is created and saved on every
change. The store is injected so callers choose where it lives.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from .calculators.overtime import MONTHLY_DIVISOR
from .config import get_data_path

logger = logging.getLogger(__name__)

STORE_FILENAME = "store.json"
HOURLY_KEY = "hourlyData"
DEFAULT_WEEKLY_HOURS = 44


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """In-process store, for tests and one-shot use."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store backed by a JSON file (default: store.json in the data dir)."""

    def __init__(self, path: Optional[Path] = None):
        self.path = path or get_data_path() / STORE_FILENAME

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            # unreadable file behaves like an empty store
            logger.warning(f"{self.path.name}: ignoring unreadable store ({e})")
            return {}

    def get(self, key: str) -> Optional[Any]:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)


@dataclass
class HourlyData:
    monthly_salary: float = 0.0
    weekly_hours: float = DEFAULT_WEEKLY_HOURS


@dataclass
class HourlyRates:
    hour_rate: float
    minute_rate: float


class HourlyRateWidget:
    """Hourly/minute rate derived from a persisted monthly salary."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        saved = store.get(HOURLY_KEY)
        # Nothing saved yet: the UI should prompt for a salary
        self.is_new = saved is None
        self.data = HourlyData(
            monthly_salary=float((saved or {}).get("monthlySalary", 0) or 0),
            weekly_hours=float((saved or {}).get("weeklyHours", DEFAULT_WEEKLY_HOURS) or DEFAULT_WEEKLY_HOURS),
        )

    def update(self, monthly_salary: Optional[float] = None, weekly_hours: Optional[float] = None) -> HourlyData:
        """Change one or both fields and save immediately."""
        if monthly_salary is not None:
            self.data.monthly_salary = monthly_salary
        if weekly_hours is not None:
            self.data.weekly_hours = weekly_hours
        self.store.set(HOURLY_KEY, {
            "monthlySalary": self.data.monthly_salary,
            "weeklyHours": self.data.weekly_hours,
        })
        self.is_new = False
        return self.data

    def rates(self) -> Optional[HourlyRates]:
        """Rates from the CLT 220-hour divisor; None until a salary is set."""
        if not self.data.monthly_salary:
            return None
        hour_rate = self.data.monthly_salary / MONTHLY_DIVISOR
        return HourlyRates(hour_rate=hour_rate, minute_rate=hour_rate / 60)

    def to_dict(self) -> dict:
        rates = self.rates()
        return {
            **asdict(self.data),
            "rates": asdict(rates) if rates else None,
        }
