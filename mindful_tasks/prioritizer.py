"""Mood- and energy-aware task prioritization."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from mindful_tasks.config import (
    COMPLETED_TASK_SCORE,
    DEADLINE_THRESHOLDS,
    ENERGY_FIT_SCORES,
    MOOD_TASK_SCORES,
    PRIORITY_SCORES,
    ScoringWeights,
    get_weights,
)
from mindful_tasks.errors import InvalidTaskError
from mindful_tasks.normalize import energy_distance, normalize_energy, normalize_mood
from mindful_tasks.schema import EnergyLevel, Priority, Task

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def _coerce_enum(enum_cls, value, field_name: str, task_id: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError as exc:
        raise InvalidTaskError(f"Task {task_id!r}: invalid {field_name} {value!r}") from exc


def validate_task(task: Task) -> tuple[Priority, EnergyLevel]:
    """Check a task record and return its priority and required energy as enums."""

    task_id = getattr(task, "task_id", "?")
    deadline = getattr(task, "deadline", None)
    if not isinstance(deadline, datetime):
        raise InvalidTaskError(f"Task {task_id!r}: deadline must be a datetime, got {deadline!r}")
    priority = _coerce_enum(Priority, getattr(task, "priority", None), "priority", task_id)
    energy = _coerce_enum(EnergyLevel, getattr(task, "required_energy", None), "required_energy", task_id)
    return priority, energy


def _align_now(now: datetime, deadline: datetime) -> datetime:
    # Naive values are local wall-clock time.
    if deadline.tzinfo is None and now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    if deadline.tzinfo is not None and now.tzinfo is None:
        return now.astimezone()
    return now


def days_until(deadline: datetime, now: datetime) -> int:
    """Whole days remaining, floored; negative once the deadline has passed."""

    return (deadline - _align_now(now, deadline)) // _ONE_DAY


def deadline_score(deadline: datetime, now: datetime) -> float:
    days = days_until(deadline, now)
    thresholds = DEADLINE_THRESHOLDS
    if days <= 0:
        return thresholds.due_now_score
    if days <= thresholds.soon_days:
        return thresholds.soon_score
    if days <= thresholds.week_days:
        return thresholds.week_score
    return thresholds.later_score


def energy_fit_score(task_energy: EnergyLevel, user_energy: EnergyLevel | str | None) -> float:
    return ENERGY_FIT_SCORES[energy_distance(task_energy, normalize_energy(user_energy))]


def mood_score(task_energy: EnergyLevel, mood: Optional[str]) -> float:
    return MOOD_TASK_SCORES[normalize_mood(mood)][task_energy]


def score_task(
    task: Task,
    mood: Optional[str] = None,
    energy_level: Optional[str] = None,
    now: Optional[datetime] = None,
    weights: Optional[ScoringWeights] = None,
    return_components: bool = False,
):
    """Compute the composite score of one task, bounded to [0, 1] unless completed."""

    priority, task_energy = validate_task(task)
    weights = weights or get_weights()
    now = now or datetime.now(timezone.utc)

    priority_part = PRIORITY_SCORES[priority]
    deadline_part = deadline_score(task.deadline, now)
    energy_part = energy_fit_score(task_energy, energy_level)
    mood_part = mood_score(task_energy, mood)

    if task.is_completed:
        bounded = COMPLETED_TASK_SCORE
    else:
        score = (
            weights.priority * priority_part
            + weights.deadline * deadline_part
            + weights.energy_fit * energy_part
            + weights.mood * mood_part
        )
        bounded = max(0.0, min(1.0, score))

    if return_components:
        return {
            "score": bounded,
            "priority": priority_part,
            "deadline": deadline_part,
            "energy_fit": energy_part,
            "mood": mood_part,
            "completed": bool(task.is_completed),
        }

    return bounded


def prioritize_tasks(
    tasks: Sequence[Task],
    mood: Optional[str] = None,
    energy_level: Optional[str] = None,
    now: Optional[datetime] = None,
    weights: Optional[ScoringWeights] = None,
) -> list[Task]:
    """
    Return a new list of tasks ordered by descending score.

    Every task is validated before any is scored. The sort is stable, so
    tasks with equal scores keep their input order; completed tasks always
    trail the incomplete ones.
    """

    for task in tasks:
        validate_task(task)

    weights = weights or get_weights()
    now = now or datetime.now(timezone.utc)
    logger.debug("Prioritizing %d tasks (mood=%r, energy=%r)", len(tasks), mood, energy_level)

    scored = [(score_task(task, mood, energy_level, now, weights), task) for task in tasks]
    ranked = [task for _, task in sorted(scored, key=lambda pair: pair[0], reverse=True)]

    if ranked:
        logger.debug("Top task: %s", ranked[0].title)
    return ranked
