"""Zoned year-progress calculator.

Everything here is a pure function of ``(instant, timezone)``. The clock is
never read in this module; callers sample it once and pass it in.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import ProgressFacts

# Fixed English names keep the rendered strings independent of the process locale.
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_ONE_DECIMAL = Decimal("0.1")


class InvalidTimezone(ValueError):
    """Raised for an empty, malformed or unknown IANA zone identifier."""

    def __init__(self, timezone_id: str) -> None:
        super().__init__(f"Unknown IANA timezone: {timezone_id!r}")
        self.timezone_id = timezone_id


def load_zone(timezone_id: str) -> ZoneInfo:
    if not timezone_id or not isinstance(timezone_id, str):
        raise InvalidTimezone(str(timezone_id or ""))
    try:
        return ZoneInfo(timezone_id)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise InvalidTimezone(timezone_id) from exc


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def format_percentage(day_of_year: int, total_days: int) -> str:
    value = Decimal(day_of_year) * 100 / Decimal(total_days)
    return str(value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def format_date(moment: datetime) -> str:
    return f"{WEEKDAYS[moment.weekday()]}, {moment.day} {MONTHS[moment.month - 1]}"


def format_time(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    marker = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {marker}"


def format_generated_at(moment: datetime) -> str:
    return f"{moment.hour:02d}:{moment.minute:02d} on {moment.day:02d} {MONTHS[moment.month - 1][:3]}"


def compute_progress(now: datetime, timezone_id: str) -> ProgressFacts:
    zone = load_zone(timezone_id)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    zoned = now.astimezone(zone)

    year = zoned.year
    total_days = 366 if is_leap_year(year) else 365
    day_of_year = zoned.timetuple().tm_yday

    return ProgressFacts(
        calendar_year=year,
        day_of_year=day_of_year,
        days_remaining=total_days - day_of_year,
        total_days_in_year=total_days,
        percentage_complete=format_percentage(day_of_year, total_days),
        formatted_date=format_date(zoned),
        formatted_time=format_time(zoned),
        generated_at_label=format_generated_at(zoned),
    )
