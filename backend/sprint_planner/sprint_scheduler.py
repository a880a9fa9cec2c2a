"""Greedy sprint scheduling over prerequisite-ordered topic budgets."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .availability import AvailabilityCalendar, total_available_hours
from .config import Settings, get_settings
from .models import (
    HOURS_PRECISION,
    FocusLevel,
    PlanningRequest,
    ScheduleItem,
    SprintDay,
    SprintPlan,
    TopicAllocation,
    Underscheduled,
)
from .prerequisites import PrerequisiteSorter
from .telemetry import emit_event
from .weights import WeightCalculator, WeightPolicy

logger = logging.getLogger(__name__)

HIGH_FOCUS_CONFIDENCE_THRESHOLD = 2
CRUCIAL_CREDIT_THRESHOLD = 4.0


class DayCursor:
    """Position in the sprint's day sequence, shared by every topic.

    The cursor only moves forward; it is never reset between topics.
    """

    def __init__(self, days: Sequence[SprintDay]) -> None:
        self._days = days
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def exhausted(self) -> bool:
        return self._index >= len(self._days)

    @property
    def current(self) -> SprintDay:
        if self.exhausted:
            raise IndexError("Day cursor has moved past the last sprint day.")
        return self._days[self._index]

    def advance(self) -> None:
        if not self.exhausted:
            self._index += 1


@dataclass
class ScheduleOutcome:
    days: List[SprintDay]
    underscheduled: List[Underscheduled] = field(default_factory=list)


class SprintScheduler:
    """Packs topic budgets into day buckets in order, splitting across days as needed."""

    def __init__(
        self,
        *,
        preferred_time: Optional[str] = None,
        high_focus_threshold: int = HIGH_FOCUS_CONFIDENCE_THRESHOLD,
        crucial_credit_threshold: float = CRUCIAL_CREDIT_THRESHOLD,
    ) -> None:
        self._preferred_time = preferred_time
        self._high_focus_threshold = high_focus_threshold
        self._crucial_credit_threshold = crucial_credit_threshold

    def schedule(self, topics: Sequence[TopicAllocation], days: Sequence[SprintDay]) -> ScheduleOutcome:
        working_days = [day.model_copy(deep=True) for day in days]
        cursor = DayCursor(working_days)
        underscheduled: List[Underscheduled] = []

        for topic in topics:
            remaining = self._place_topic(topic, cursor)
            if remaining > 0:
                logger.warning(
                    "Sprint ran out of days with %.2fh of %s unscheduled",
                    remaining,
                    topic.topic_id,
                )
                underscheduled.append(Underscheduled(topic_id=topic.topic_id, shortfall_hours=remaining))

        return ScheduleOutcome(days=working_days, underscheduled=underscheduled)

    def _place_topic(self, topic: TopicAllocation, cursor: DayCursor) -> float:
        remaining = topic.allocated_hours
        while remaining > 0 and not cursor.exhausted:
            day = cursor.current
            free = day.free_hours
            if free <= 0:
                cursor.advance()
                continue

            chunk = min(remaining, free)
            focus_level = self.focus_level(topic)
            day.items.append(
                ScheduleItem(
                    topic_id=topic.topic_id,
                    topic_name=topic.topic_name,
                    subject_name=topic.subject_name,
                    duration_hours=chunk,
                    focus_level=focus_level,
                    justification=self.justification(topic, focus_level, first_on_day=not day.items),
                )
            )
            day.hours_scheduled = round(day.hours_scheduled + chunk, HOURS_PRECISION)
            remaining = round(remaining - chunk, HOURS_PRECISION)

            if day.is_full:
                cursor.advance()
        return remaining

    def focus_level(self, topic: TopicAllocation) -> FocusLevel:
        if topic.confidence <= self._high_focus_threshold:
            return "High Focus"
        return "Normal"

    def justification(self, topic: TopicAllocation, focus_level: FocusLevel, *, first_on_day: bool) -> str:
        text = f"Scheduled based on weight {topic.weight:.1f}."
        if focus_level == "High Focus":
            text = f"High Focus required: Weak area ({topic.confidence}/5)."
            if self._preferred_time and first_on_day:
                text += f" Assigned to your preferred {self._preferred_time} slot."
        if topic.subject_credit_weight >= self._crucial_credit_threshold:
            text += f" Crucial subject (Credits: {topic.subject_credit_weight:g})."
        return text


def plan_sprint(request: PlanningRequest, settings: Optional[Settings] = None) -> SprintPlan:
    """Compute one stateless sprint schedule for the request."""
    settings = settings or get_settings()
    started = time.perf_counter()
    sprint_length = request.sprint_length or settings.default_sprint_length
    preferred_time = request.preferred_time or settings.default_preferred_time

    days = AvailabilityCalendar(request.availability).build_days(request.start_date, sprint_length)
    available = total_available_hours(days)

    calculator = WeightCalculator(
        WeightPolicy(
            credit_multiplier=settings.credit_multiplier,
            confidence_multiplier=settings.confidence_multiplier,
            default_confidence=settings.default_confidence,
            default_credit_weight=settings.default_credit_weight,
            hour_unit=settings.hour_unit,
        )
    )
    allocations = calculator.allocate(request.subjects, available)
    ordered = PrerequisiteSorter().sort(allocations)

    scheduler = SprintScheduler(
        preferred_time=preferred_time,
        high_focus_threshold=settings.high_focus_confidence_threshold,
        crucial_credit_threshold=settings.crucial_credit_threshold,
    )
    outcome = scheduler.schedule(ordered, days)

    plan = SprintPlan(
        start_date=request.start_date,
        sprint_length=sprint_length,
        total_available_hours=available,
        total_allocated_hours=sum(allocation.allocated_hours for allocation in allocations),
        total_scheduled_hours=sum(day.hours_scheduled for day in outcome.days),
        days=outcome.days,
        allocations=allocations,
        underscheduled=outcome.underscheduled,
    )

    duration_ms = (time.perf_counter() - started) * 1000
    emit_event(
        "sprint_generation",
        start_date=request.start_date,
        sprint_length=sprint_length,
        topic_count=len(allocations),
        item_count=sum(len(day.items) for day in plan.days),
        available_hours=plan.total_available_hours,
        allocated_hours=plan.total_allocated_hours,
        scheduled_hours=plan.total_scheduled_hours,
        underscheduled=plan.underscheduled,
        duration_ms=round(duration_ms, 2),
    )
    return plan


__all__ = ["DayCursor", "ScheduleOutcome", "SprintScheduler", "plan_sprint"]
