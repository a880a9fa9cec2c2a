from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from sprint_planner.availability import AvailabilityCalendar, total_available_hours
from sprint_planner.models import AvailabilitySpec


def test_days_follow_date_then_weekday_then_bucket_lookup() -> None:
    availability = AvailabilitySpec(
        weekday_hours=3,
        weekend_hours=6,
        date_overrides={date(2024, 5, 5): 1.5},
        weekday_overrides={"monday": 2},
    )

    days = AvailabilityCalendar(availability).build_days(date(2024, 5, 3), 7)

    assert [day.date for day in days] == [date(2024, 5, 3 + offset) for offset in range(7)]
    assert [day.weekday_name for day in days] == [
        "Friday",
        "Saturday",
        "Sunday",
        "Monday",
        "Tuesday",
        "Wednesday",
        "Thursday",
    ]
    assert [day.hours_available for day in days] == [3, 6, 1.5, 2, 3, 3, 3]
    assert all(day.hours_scheduled == 0 and day.items == [] for day in days)
    assert total_available_hours(days) == 21.5


def test_missing_availability_degrades_to_zero_capacity() -> None:
    days = AvailabilityCalendar(AvailabilitySpec(weekday_hours=2)).build_days(date(2024, 5, 4), 3)

    assert [day.hours_available for day in days] == [0.0, 0.0, 2.0]


def test_date_override_can_close_a_day() -> None:
    availability = AvailabilitySpec(weekday_hours=4, date_overrides={date(2024, 5, 6): 0})

    days = AvailabilityCalendar(availability).build_days(date(2024, 5, 6), 2)

    assert [day.hours_available for day in days] == [0.0, 4.0]


@pytest.mark.parametrize("length", [0, -3])
def test_non_positive_sprint_length_is_rejected(length: int) -> None:
    calendar = AvailabilityCalendar(AvailabilitySpec(weekday_hours=3))

    with pytest.raises(ValueError, match="Sprint length"):
        calendar.build_days(date(2024, 5, 6), length)


def test_negative_hours_are_rejected() -> None:
    with pytest.raises(ValidationError):
        AvailabilitySpec(weekday_hours=-1)
    with pytest.raises(ValidationError):
        AvailabilitySpec(date_overrides={date(2024, 5, 6): -2})


def test_unknown_weekday_override_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AvailabilitySpec(weekday_overrides={"Funday": 3})


def test_unvalidated_negative_hours_are_rejected_at_lookup() -> None:
    availability = AvailabilitySpec.model_construct(
        weekday_hours=-2.0,
        weekend_hours=None,
        date_overrides={},
        weekday_overrides={},
    )

    with pytest.raises(ValueError, match="cannot be negative"):
        AvailabilityCalendar(availability).build_days(date(2024, 5, 6), 1)
