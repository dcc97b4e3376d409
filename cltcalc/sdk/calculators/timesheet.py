"""Daily work schedule: when to come back from lunch and when to leave."""

from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60


@dataclass
class WorkSchedule:
    entry: str
    lunch_start: str
    lunch_return: str
    exit: str
    worked_minutes: int


def parse_clock(value: str) -> int:
    """'08:30' -> minutes after midnight."""
    try:
        hours, minutes = (int(part) for part in value.split(":"))
    except ValueError:
        raise ValueError(f"Invalid time '{value}'. Use HH:MM.")
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        raise ValueError(f"Invalid time '{value}'. Use HH:MM.")
    return hours * 60 + minutes


def format_clock(minutes: int) -> str:
    """Minutes after midnight -> 'HH:MM', wrapping past midnight."""
    hours, mins = divmod(minutes % MINUTES_PER_DAY, 60)
    return f"{hours:02d}:{mins:02d}"


def calculate_work_schedule(
    entry: str = "08:00",
    lunch_start: str = "12:00",
    lunch_minutes: int = 60,
    work_hours: int = 8,
    work_minutes: int = 48,
) -> WorkSchedule:
    """Exit time for a day with a fixed journey and one lunch break.

    A lunch start earlier than the entry time is taken as the next day
    (night shifts).
    """
    entry_min = parse_clock(entry)
    lunch_min = parse_clock(lunch_start)
    if lunch_min < entry_min:
        lunch_min += MINUTES_PER_DAY

    journey = work_hours * 60 + work_minutes
    morning = lunch_min - entry_min
    lunch_return = lunch_min + lunch_minutes
    afternoon = max(journey - morning, 0)
    exit_min = lunch_return + afternoon

    return WorkSchedule(
        entry=format_clock(entry_min),
        lunch_start=format_clock(lunch_min),
        lunch_return=format_clock(lunch_return),
        exit=format_clock(exit_min),
        worked_minutes=morning + afternoon,
    )
