"""Typed progress models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProgressFacts:
    calendar_year: int
    day_of_year: int
    days_remaining: int
    total_days_in_year: int
    percentage_complete: str
    formatted_date: str
    formatted_time: str
    generated_at_label: str

    @property
    def percentage_value(self) -> float:
        return float(self.percentage_complete)
