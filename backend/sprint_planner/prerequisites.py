"""Prerequisite-aware topic ordering."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Dict, List, Sequence

from .models import TopicAllocation

logger = logging.getLogger(__name__)


class PrerequisiteSorter:
    """Orders topics so prerequisites come before the topics that need them.

    Ties between ready topics keep their input order. Topics caught in a cycle are
    appended after the sorted ones, in input order, so every topic is returned
    exactly once.
    """

    def sort(self, topics: Sequence[TopicAllocation]) -> List[TopicAllocation]:
        topic_map: Dict[str, TopicAllocation] = {}
        for topic in topics:
            if not topic.topic_id:
                raise ValueError(f"Topic '{topic.topic_name}' is missing an id.")
            if topic.topic_id in topic_map:
                raise ValueError(f"Duplicate topic id '{topic.topic_id}'.")
            topic_map[topic.topic_id] = topic

        if not topic_map:
            return []

        graph: Dict[str, List[str]] = {topic_id: [] for topic_id in topic_map}
        indegree: Dict[str, int] = {topic_id: 0 for topic_id in topic_map}

        for topic in topics:
            for prerequisite_id in dict.fromkeys(topic.prerequisite_ids):
                if prerequisite_id == topic.topic_id:
                    logger.warning("Topic %s references itself as a prerequisite; skipping.", topic.topic_id)
                    continue
                if prerequisite_id not in topic_map:
                    logger.warning(
                        "Topic %s references missing prerequisite %s; ignoring.",
                        topic.topic_id,
                        prerequisite_id,
                    )
                    continue
                graph[prerequisite_id].append(topic.topic_id)
                indegree[topic.topic_id] += 1

        ready: Deque[str] = deque(topic.topic_id for topic in topics if indegree[topic.topic_id] == 0)
        ordered_ids: List[str] = []
        while ready:
            topic_id = ready.popleft()
            ordered_ids.append(topic_id)
            for dependent in graph[topic_id]:
                indegree[dependent] -= 1
                if indegree[dependent] == 0:
                    ready.append(dependent)

        if len(ordered_ids) != len(topic_map):
            visited = set(ordered_ids)
            unresolved = [topic.topic_id for topic in topics if topic.topic_id not in visited]
            logger.warning(
                "Detected prerequisite cycle involving %s; appending in input order.",
                ", ".join(unresolved),
            )
            ordered_ids.extend(unresolved)

        return [topic_map[topic_id] for topic_id in ordered_ids]


__all__ = ["PrerequisiteSorter"]
