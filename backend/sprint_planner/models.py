"""Planning request and sprint schedule models."""

from __future__ import annotations

import datetime as dt
from typing import Dict, List, Literal, Optional, Set

from pydantic import BaseModel, Field, field_validator, model_validator

FocusLevel = Literal["Normal", "High Focus"]

HOURS_PRECISION = 9

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class Topic(BaseModel):
    """Smallest schedulable unit of study content."""

    topic_id: str = Field(min_length=1)
    name: str
    confidence: Optional[int] = Field(default=None, ge=1, le=5)
    prerequisite_ids: List[str] = Field(default_factory=list)


class Subject(BaseModel):
    name: str
    credit_weight: Optional[float] = Field(default=None, ge=0.0)
    baseline_confidence: Optional[int] = Field(default=None, ge=1, le=5)
    topics: List[Topic] = Field(default_factory=list)


class AvailabilitySpec(BaseModel):
    """Hours available per day, by exact date, weekday name or weekday/weekend bucket."""

    weekday_hours: Optional[float] = Field(default=None, ge=0.0)
    weekend_hours: Optional[float] = Field(default=None, ge=0.0)
    date_overrides: Dict[dt.date, float] = Field(default_factory=dict)
    weekday_overrides: Dict[str, float] = Field(default_factory=dict)

    @field_validator("date_overrides", "weekday_overrides")
    @classmethod
    def _reject_negative_hours(cls, value: Dict) -> Dict:
        for key, hours in value.items():
            if hours < 0:
                raise ValueError(f"Availability for {key} cannot be negative ({hours}).")
        return value

    @field_validator("weekday_overrides")
    @classmethod
    def _normalize_weekday_names(cls, value: Dict[str, float]) -> Dict[str, float]:
        normalized: Dict[str, float] = {}
        for key, hours in value.items():
            name = key.strip().capitalize()
            if name not in WEEKDAY_NAMES:
                raise ValueError(f"Unknown weekday name '{key}'.")
            normalized[name] = hours
        return normalized


class PlanningRequest(BaseModel):
    """Normalized input for one sprint planning run."""

    subjects: List[Subject] = Field(default_factory=list)
    availability: AvailabilitySpec = Field(default_factory=AvailabilitySpec)
    start_date: dt.date
    sprint_length: Optional[int] = Field(default=None, ge=1)
    preferred_time: Optional[str] = None

    @model_validator(mode="after")
    def _check_unique_topic_ids(self) -> "PlanningRequest":
        seen: Set[str] = set()
        for subject in self.subjects:
            for topic in subject.topics:
                if topic.topic_id in seen:
                    raise ValueError(f"Duplicate topic id '{topic.topic_id}' in planning request.")
                seen.add(topic.topic_id)
        return self


class TopicAllocation(BaseModel):
    """Weight and hour budget computed for a single topic."""

    topic_id: str
    topic_name: str
    subject_name: str
    subject_credit_weight: float
    confidence: int
    prerequisite_ids: List[str] = Field(default_factory=list)
    weight: float = 0.0
    allocated_hours: float = Field(default=0.0, ge=0.0)


class ScheduleItem(BaseModel):
    topic_id: str
    topic_name: str
    subject_name: str
    duration_hours: float = Field(gt=0.0)
    focus_level: FocusLevel = "Normal"
    justification: str


class SprintDay(BaseModel):
    date: dt.date
    weekday_name: str
    hours_available: float = Field(ge=0.0)
    hours_scheduled: float = 0.0
    items: List[ScheduleItem] = Field(default_factory=list)

    @property
    def free_hours(self) -> float:
        return round(self.hours_available - self.hours_scheduled, HOURS_PRECISION)

    @property
    def is_full(self) -> bool:
        return self.free_hours <= 0


class Underscheduled(BaseModel):
    """Hours of a topic that did not fit before the sprint ran out of days."""

    topic_id: str
    shortfall_hours: float = Field(gt=0.0)


class SprintPlan(BaseModel):
    start_date: dt.date
    sprint_length: int
    total_available_hours: float = 0.0
    total_allocated_hours: float = 0.0
    total_scheduled_hours: float = 0.0
    days: List[SprintDay] = Field(default_factory=list)
    allocations: List[TopicAllocation] = Field(default_factory=list)
    underscheduled: List[Underscheduled] = Field(default_factory=list)

    def scheduled_hours_for(self, topic_id: str) -> float:
        return sum(
            item.duration_hours
            for day in self.days
            for item in day.items
            if item.topic_id == topic_id
        )


__all__ = [
    "AvailabilitySpec",
    "FocusLevel",
    "HOURS_PRECISION",
    "PlanningRequest",
    "ScheduleItem",
    "SprintDay",
    "SprintPlan",
    "Subject",
    "Topic",
    "TopicAllocation",
    "Underscheduled",
    "WEEKDAY_NAMES",
]
