from __future__ import annotations

from typing import Optional

import pytest

from sprint_planner.models import Subject, Topic
from sprint_planner.weights import WeightCalculator, WeightPolicy


def _subject(name: str = "Data Structures", credit: Optional[float] = 3, baseline: Optional[int] = None, **confidences) -> Subject:
    return Subject(
        name=name,
        credit_weight=credit,
        baseline_confidence=baseline,
        topics=[Topic(topic_id=topic_id, name=topic_id.title(), confidence=value) for topic_id, value in confidences.items()],
    )


def test_weight_combines_credit_and_inverted_confidence() -> None:
    allocations = WeightCalculator().weigh([_subject(credit=4, trees=2)])

    assert allocations[0].weight == pytest.approx(4 * 1.5 + 4 * 2.0)
    assert allocations[0].confidence == 2
    assert allocations[0].subject_credit_weight == 4


def test_missing_confidence_falls_back_to_subject_then_default() -> None:
    calculator = WeightCalculator()

    from_subject = calculator.weigh([_subject(credit=3, baseline=1, graphs=None)])[0]
    from_default = calculator.weigh([_subject(credit=None, graphs=None)])[0]

    assert from_subject.confidence == 1
    assert from_subject.weight == pytest.approx(14.5)
    assert from_default.confidence == 3
    assert from_default.subject_credit_weight == 3
    assert from_default.weight == pytest.approx(10.5)


def test_lower_confidence_never_gets_less_time() -> None:
    calculator = WeightCalculator()
    allocations = calculator.allocate([_subject(weak=1, shaky=2, solid=4, strong=5)], 20)

    weights = [allocation.weight for allocation in allocations]
    hours = [allocation.allocated_hours for allocation in allocations]
    assert weights == sorted(weights, reverse=True)
    assert hours == sorted(hours, reverse=True)


def test_hours_are_split_proportionally() -> None:
    allocations = WeightCalculator().allocate([_subject(weak=1, strong=5)], 21)

    assert [allocation.allocated_hours for allocation in allocations] == [14.5, 6.5]


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0.0, 0.0),
        (0.01, 0.5),
        (0.2, 0.5),
        (0.74, 0.5),
        (0.75, 1.0),
        (1.24, 1.0),
        (1.25, 1.5),
        (7.485, 7.5),
    ],
)
def test_rounding_to_half_hours(raw: float, expected: float) -> None:
    assert WeightCalculator().round_hours(raw) == expected


def test_rounding_drift_is_not_renormalized() -> None:
    allocations = WeightCalculator().allocate([_subject(a=3, b=3, c=3)], 4)

    assert [allocation.allocated_hours for allocation in allocations] == [1.5, 1.5, 1.5]
    assert sum(allocation.allocated_hours for allocation in allocations) == 4.5


def test_no_topics_yields_empty_allocation() -> None:
    assert WeightCalculator().allocate([Subject(name="Empty", credit_weight=3)], 10) == []


def test_zero_capacity_allocates_nothing() -> None:
    allocations = WeightCalculator().allocate([_subject(a=2, b=4)], 0)

    assert [allocation.allocated_hours for allocation in allocations] == [0.0, 0.0]


def test_policy_multipliers_are_tunable() -> None:
    calculator = WeightCalculator(WeightPolicy(credit_multiplier=1.0, confidence_multiplier=1.0))

    assert calculator.weigh([_subject(credit=4, trees=2)])[0].weight == pytest.approx(8.0)
