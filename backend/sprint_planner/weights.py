"""Topic priority weights and proportional hour budgets.

Weight = credit * credit_multiplier + (6 - confidence) * confidence_multiplier.
The default 1.5 / 2.0 split biases the budget toward weak topics over merely
high-credit ones; both multipliers are policy and can be tuned via settings.
Budgets are rounded to the nearest half hour without a renormalization pass,
so the summed budget may drift slightly from the available hours.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import Subject, TopicAllocation

logger = logging.getLogger(__name__)

CONFIDENCE_SCALE_MAX = 5
DEFAULT_CONFIDENCE = 3
DEFAULT_CREDIT_WEIGHT = 3.0
DEFAULT_HOUR_UNIT = 0.5


@dataclass(frozen=True)
class WeightPolicy:
    credit_multiplier: float = 1.5
    confidence_multiplier: float = 2.0
    default_confidence: int = DEFAULT_CONFIDENCE
    default_credit_weight: float = DEFAULT_CREDIT_WEIGHT
    hour_unit: float = DEFAULT_HOUR_UNIT


class WeightCalculator:
    """Scores every topic and splits the sprint's hours proportionally."""

    def __init__(self, policy: Optional[WeightPolicy] = None) -> None:
        self._policy = policy or WeightPolicy()

    @property
    def policy(self) -> WeightPolicy:
        return self._policy

    def effective_confidence(self, topic_confidence: Optional[int], subject: Subject) -> int:
        if topic_confidence:
            return topic_confidence
        if subject.baseline_confidence:
            return subject.baseline_confidence
        return self._policy.default_confidence

    def credit_weight(self, subject: Subject) -> float:
        if subject.credit_weight is None:
            return self._policy.default_credit_weight
        return subject.credit_weight

    def weigh(self, subjects: Sequence[Subject]) -> List[TopicAllocation]:
        allocations: List[TopicAllocation] = []
        for subject in subjects:
            credit = self.credit_weight(subject)
            for topic in subject.topics:
                confidence = self.effective_confidence(topic.confidence, subject)
                confidence_score = (CONFIDENCE_SCALE_MAX + 1) - confidence
                weight = credit * self._policy.credit_multiplier + confidence_score * self._policy.confidence_multiplier
                allocations.append(
                    TopicAllocation(
                        topic_id=topic.topic_id,
                        topic_name=topic.name,
                        subject_name=subject.name,
                        subject_credit_weight=credit,
                        confidence=confidence,
                        prerequisite_ids=list(topic.prerequisite_ids),
                        weight=weight,
                    )
                )
        return allocations

    def allocate(self, subjects: Sequence[Subject], total_available_hours: float) -> List[TopicAllocation]:
        if total_available_hours < 0:
            raise ValueError(f"Total available hours cannot be negative ({total_available_hours}).")

        allocations = self.weigh(subjects)
        total_weight = sum(allocation.weight for allocation in allocations)
        if total_weight <= 0:
            if allocations:
                logger.warning("Topics carry no weight; nothing will be allocated.")
            return allocations

        for allocation in allocations:
            raw_hours = (allocation.weight / total_weight) * total_available_hours
            allocation.allocated_hours = self.round_hours(raw_hours)

        logger.debug(
            "Allocated %.1fh across %d topics from %.1fh available",
            sum(allocation.allocated_hours for allocation in allocations),
            len(allocations),
            total_available_hours,
        )
        return allocations

    def round_hours(self, raw_hours: float) -> float:
        unit = self._policy.hour_unit
        if raw_hours <= 0:
            return 0.0
        if raw_hours < unit:
            return unit
        # Half-up rounding to the nearest unit.
        return math.floor(raw_hours / unit + 0.5) * unit


__all__ = [
    "DEFAULT_CONFIDENCE",
    "DEFAULT_CREDIT_WEIGHT",
    "DEFAULT_HOUR_UNIT",
    "WeightCalculator",
    "WeightPolicy",
]
