"""Year-progress calculation for YearWall."""

from .calculator import InvalidTimezone, compute_progress, is_leap_year, load_zone
from .models import ProgressFacts

__all__ = [
    "InvalidTimezone",
    "ProgressFacts",
    "compute_progress",
    "is_leap_year",
    "load_zone",
]
