"""Date and tenure arithmetic for terminations.

Two day-count conventions coexist here and both are intentional: rates use
a fixed 30-day month (salary / 30), while tenure, notice projection and
month proration use real calendar days.
"""

import calendar
import math
from datetime import date, timedelta

from .entitlements import Entitlements
from .schemas import NoticeType

NOTICE_BASE_DAYS = 30
NOTICE_DAYS_PER_YEAR = 3
NOTICE_EXTRA_DAYS_CAP = 60
NOTICE_MAX_DAYS = 90

# A month counts towards 13th salary / vacation accrual from 15 days worked.
MIN_DAYS_FOR_MONTH = 15
MAX_ACCRUAL_MONTHS = 12


def years_worked(start: date, end: date) -> int:
    """Completed years of service (365-day years, order of dates ignored)."""
    return abs((end - start).days) // 365


def notice_days(years: int, probation_end: bool = False) -> int:
    """Notice period in days: 30 plus 3 per year of service, max 90.

    Lei 12.506/2011. Zero when the contract simply reached its probation end.
    """
    if probation_end:
        return 0
    extra = min(years * NOTICE_DAYS_PER_YEAR, NOTICE_EXTRA_DAYS_CAP)
    return min(NOTICE_BASE_DAYS + extra, NOTICE_MAX_DAYS)


def projection_credit(days: int, notice_type: NoticeType, entitlements: Entitlements) -> float:
    """Days of indemnified notice that extend the contract end date.

    Worked or deducted notice does not project the contract; indemnified
    notice projects it fully, or by half under mutual agreement.
    """
    if notice_type != NoticeType.INDEMNIFIED:
        return 0
    if entitlements.is_agreement:
        return days / 2
    if entitlements.notice_indemnity:
        return days
    return 0


def projected_exit_date(end: date, credit: float) -> date:
    """Contract end date pushed forward by the notice credit."""
    try:
        return end + timedelta(days=math.floor(credit))
    except OverflowError:
        return date.max


def last_day_of_month(d: date) -> int:
    return calendar.monthrange(d.year, d.month)[1]


def _replace_year(d: date, year: int) -> date:
    # 29 February falls back to the 28th in non-leap years
    if d.month == 2 and d.day == 29 and not calendar.isleap(year):
        return date(year, 2, 28)
    return d.replace(year=year)


def vacation_anniversary(start: date, projected: date) -> date:
    """Most recent contract anniversary on or before the projected date."""
    anniversary = _replace_year(start, projected.year)
    if anniversary > projected:
        anniversary = _replace_year(start, max(projected.year - 1, date.min.year))
    return anniversary


def vacation_anchor(start: date, projected: date) -> date:
    """Start of the current vacation accrual period."""
    return max(start, vacation_anniversary(start, projected))


def thirteenth_anchor(start: date, projected: date) -> date:
    """Start of the 13th-salary accrual period: 1 January or hire date."""
    return max(start, date(projected.year, 1, 1))


def prorated_months(anchor: date, until: date) -> int:
    """Count accrual months between two dates.

    Walks calendar months from anchor's month to until's month. The first
    month starts at anchor's day, the last ends at until's day; a month with
    at least 15 days (inclusive) counts. Capped at 12.
    """
    months = 0
    year, month = anchor.year, anchor.month

    while (year, month) <= (until.year, until.month):
        start_day = anchor.day if (year, month) == (anchor.year, anchor.month) else 1
        if (year, month) == (until.year, until.month):
            end_day = until.day
        else:
            end_day = calendar.monthrange(year, month)[1]

        if end_day - start_day + 1 >= MIN_DAYS_FOR_MONTH:
            months += 1

        month += 1
        if month > 12:
            year, month = year + 1, 1

    return min(months, MAX_ACCRUAL_MONTHS)
