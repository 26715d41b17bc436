"""Ranking explainability helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from mindful_tasks.config import ScoringWeights, get_weights
from mindful_tasks.prioritizer import prioritize_tasks, score_task
from mindful_tasks.schema import Task

_FACTORS = ("priority", "deadline", "energy_fit", "mood")


def explain_task(
    task: Task,
    mood: Optional[str] = None,
    energy_level: Optional[str] = None,
    now: Optional[datetime] = None,
    weights: Optional[ScoringWeights] = None,
) -> dict:
    """Return the weighted contribution of each factor to a task's score."""

    weights = weights or get_weights()
    components = score_task(task, mood, energy_level, now, weights, return_components=True)
    contributions = sorted(
        ({"factor": name, "weight": getattr(weights, name) * components[name]} for name in _FACTORS),
        key=lambda item: item["weight"],
        reverse=True,
    )
    return {
        "task_id": task.task_id,
        "title": task.title,
        "score": components["score"],
        "completed": components["completed"],
        "contributions": contributions,
        "dominant_factor": None if components["completed"] else contributions[0]["factor"],
    }


def explain_ranking(
    tasks: Sequence[Task],
    mood: Optional[str] = None,
    energy_level: Optional[str] = None,
    now: Optional[datetime] = None,
    weights: Optional[ScoringWeights] = None,
) -> list[dict]:
    """Explain every task in ranked order."""

    weights = weights or get_weights()
    now = now or datetime.now(timezone.utc)
    ranked = prioritize_tasks(tasks, mood, energy_level, now, weights)
    return [explain_task(task, mood, energy_level, now, weights) for task in ranked]
