"""Sprint day calendar built from availability preferences."""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

from .models import WEEKDAY_NAMES, AvailabilitySpec, SprintDay

logger = logging.getLogger(__name__)

DEFAULT_SPRINT_LENGTH = 7
WEEKEND_DAYS = frozenset({"Saturday", "Sunday"})


class AvailabilityCalendar:
    """Lays out the ordered sprint days and their hour capacity."""

    def __init__(self, availability: AvailabilitySpec) -> None:
        self._availability = availability

    def build_days(self, start_date: date, sprint_length: int = DEFAULT_SPRINT_LENGTH) -> List[SprintDay]:
        if sprint_length <= 0:
            raise ValueError(f"Sprint length must be positive, got {sprint_length}.")

        days: List[SprintDay] = []
        for offset in range(sprint_length):
            current = start_date + timedelta(days=offset)
            weekday_name = WEEKDAY_NAMES[current.weekday()]
            hours = self.hours_for(current, weekday_name)
            days.append(
                SprintDay(
                    date=current,
                    weekday_name=weekday_name,
                    hours_available=hours,
                )
            )

        zero_days = [day.date.isoformat() for day in days if day.hours_available == 0]
        if zero_days:
            logger.debug("No study capacity on %s", ", ".join(zero_days))
        return days

    def hours_for(self, day: date, weekday_name: Optional[str] = None) -> float:
        weekday_name = weekday_name or WEEKDAY_NAMES[day.weekday()]
        availability = self._availability

        hours: Optional[float] = availability.date_overrides.get(day)
        if hours is None:
            hours = availability.weekday_overrides.get(weekday_name)
        if hours is None:
            if weekday_name in WEEKEND_DAYS:
                hours = availability.weekend_hours
            else:
                hours = availability.weekday_hours
        if hours is None:
            return 0.0
        if hours < 0:
            raise ValueError(f"Availability for {day.isoformat()} cannot be negative ({hours}).")
        return float(hours)


def total_available_hours(days: List[SprintDay]) -> float:
    return sum(day.hours_available for day in days)


__all__ = ["AvailabilityCalendar", "DEFAULT_SPRINT_LENGTH", "WEEKEND_DAYS", "total_available_hours"]
