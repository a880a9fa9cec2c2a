"""Maps a student's study profile onto a planning request."""

from __future__ import annotations

from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .models import AvailabilitySpec, PlanningRequest, Subject, Topic

WEAK_AREA_CONFIDENCE = 2
STRONG_AREA_CONFIDENCE = 5


class SubjectProfile(BaseModel):
    name: str
    credits: float = Field(ge=0.0)
    confidence_level: int = Field(ge=1, le=5)
    strong_areas: List[str] = Field(default_factory=list)
    weak_areas: List[str] = Field(default_factory=list)
    cognitive_load: Literal["High", "Medium", "Low"] = "Medium"


class AvailabilityPreferences(BaseModel):
    weekdays: float = Field(default=3.0, ge=0.0)
    weekends: float = Field(default=6.0, ge=0.0)
    preferred_time: Optional[str] = "Night"


class StudentProfile(BaseModel):
    name: str = "Student"
    availability: AvailabilityPreferences = Field(default_factory=AvailabilityPreferences)
    subjects: List[SubjectProfile] = Field(default_factory=list)
    target_date: Optional[date] = None


def subject_topics(subject: SubjectProfile) -> List[Topic]:
    """Weak areas become low-confidence topics, strong areas maintenance topics."""
    topics = [
        Topic(topic_id=f"{subject.name}_weak_{index}", name=area, confidence=WEAK_AREA_CONFIDENCE)
        for index, area in enumerate(subject.weak_areas)
    ]
    topics.extend(
        Topic(topic_id=f"{subject.name}_strong_{index}", name=area, confidence=STRONG_AREA_CONFIDENCE)
        for index, area in enumerate(subject.strong_areas)
    )
    if not topics:
        topics.append(
            Topic(
                topic_id=f"{subject.name}_general",
                name=f"{subject.name} - Core Concepts",
                confidence=subject.confidence_level,
            )
        )
    return topics


def build_planning_request(
    profile: StudentProfile,
    *,
    start_date: date,
    sprint_length: Optional[int] = None,
) -> PlanningRequest:
    subjects = [
        Subject(
            name=subject.name,
            credit_weight=subject.credits,
            baseline_confidence=subject.confidence_level,
            topics=subject_topics(subject),
        )
        for subject in profile.subjects
    ]
    return PlanningRequest(
        subjects=subjects,
        availability=AvailabilitySpec(
            weekday_hours=profile.availability.weekdays,
            weekend_hours=profile.availability.weekends,
        ),
        start_date=start_date,
        sprint_length=sprint_length,
        preferred_time=profile.availability.preferred_time,
    )


__all__ = [
    "AvailabilityPreferences",
    "StudentProfile",
    "SubjectProfile",
    "build_planning_request",
    "subject_topics",
]
