"""Overtime and night-shift premium calculations.

Hourly rate uses the CLT monthly divisor (220 hours for a 44-hour week).
"""

from dataclasses import dataclass

MONTHLY_DIVISOR = 220
# 1 night hour is legally 52m30s (CLT art. 73)
NIGHT_HOUR_MINUTES = 52.5
# DSR on night premium estimated as 5 rest days over 25 working days
NIGHT_DSR_RATE = 0.20


@dataclass
class OvertimeResult:
    hourly_rate: float
    overtime_value: float
    dsr_value: float
    total: float


@dataclass
class NightShiftResult:
    hourly_rate: float
    effective_hours: float
    allowance: float
    dsr_value: float
    total: float


def calculate_overtime(
    salary: float,
    hours: float,
    rate: float = 50,
    dsr: bool = True,
    divisor: int = MONTHLY_DIVISOR,
) -> OvertimeResult:
    """Overtime pay with optional weekly-rest (DSR) reflection.

    Args:
        salary: Monthly gross salary
        hours: Overtime hours in the month
        rate: Premium in percent (50 for +50%, 100 for Sundays/holidays)
        dsr: Add the DSR supplement (overtime / 6)
        divisor: Monthly hours divisor
    """
    hourly_rate = salary / divisor
    overtime_value = hourly_rate * (1 + rate / 100) * hours
    dsr_value = overtime_value / 6 if dsr else 0.0

    return OvertimeResult(
        hourly_rate=hourly_rate,
        overtime_value=overtime_value,
        dsr_value=dsr_value,
        total=overtime_value + dsr_value,
    )


def calculate_night_shift(
    salary: float,
    hours: float,
    rate: float = 20,
    reduced_hour: bool = True,
    divisor: int = MONTHLY_DIVISOR,
) -> NightShiftResult:
    """Night-shift premium (adicional noturno).

    Args:
        salary: Monthly gross salary
        hours: Clock hours worked at night in the month
        rate: Premium in percent (20 urban, 25 rural)
        reduced_hour: Convert clock hours to legal night hours
        divisor: Monthly hours divisor
    """
    hourly_rate = salary / divisor
    effective_hours = hours * (60 / NIGHT_HOUR_MINUTES) if reduced_hour else hours
    allowance = effective_hours * hourly_rate * (rate / 100)
    dsr_value = allowance * NIGHT_DSR_RATE

    return NightShiftResult(
        hourly_rate=hourly_rate,
        effective_hours=effective_hours,
        allowance=allowance,
        dsr_value=dsr_value,
        total=allowance + dsr_value,
    )
