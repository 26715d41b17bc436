"""Time-of-day and day-of-week productivity analysis."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

import numpy as np

from mindful_tasks.config import (
    BASE_PRODUCTIVITY,
    ENERGY_FACTOR,
    MOOD_ADJUSTMENTS,
    NO_DATA_LABEL,
    SENTIMENT_FACTOR,
    TIME_BUCKETS,
    WEEKDAYS,
)
from mindful_tasks.errors import InvalidCompletionError
from mindful_tasks.normalize import normalize_mood
from mindful_tasks.schema import CompletedTask, ProductivityResult, TimeOfDayRange

logger = logging.getLogger(__name__)


def _as_float(value, field_name: str, task_id: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidCompletionError(f"Completion {task_id!r}: {field_name} is not numeric") from exc


def validate_completion(completion: CompletedTask) -> None:
    """Reject records the productivity score is undefined for."""

    task_id = completion.task_id
    if not isinstance(completion.completed_at, datetime):
        raise InvalidCompletionError(f"Completion {task_id!r}: completed_at must be a datetime")

    difficulty = _as_float(completion.difficulty, "difficulty", task_id)
    if not difficulty > 0:
        raise InvalidCompletionError(f"Completion {task_id!r}: difficulty must be > 0, got {difficulty}")

    energy = _as_float(completion.energy_requirement, "energy_requirement", task_id)
    if not 1.0 <= energy <= 3.0:
        raise InvalidCompletionError(f"Completion {task_id!r}: energy_requirement must be within 1..3")

    sentiment = _as_float(completion.journal_sentiment, "journal_sentiment", task_id)
    if not -1.0 <= sentiment <= 1.0:
        raise InvalidCompletionError(f"Completion {task_id!r}: journal_sentiment must be within -1..1")


def productivity_score(completion: CompletedTask) -> float:
    """Derived score: base + energy + mood + sentiment - 1/difficulty, floored at zero."""

    validate_completion(completion)
    score = BASE_PRODUCTIVITY
    score += float(completion.energy_requirement) * ENERGY_FACTOR
    score += MOOD_ADJUSTMENTS[normalize_mood(completion.mood)]
    score += float(completion.journal_sentiment) * SENTIMENT_FACTOR
    score -= 1.0 / float(completion.difficulty)
    return max(score, 0.0)


def time_of_day_bucket(moment: datetime) -> TimeOfDayRange:
    hour = moment.hour
    for bucket, start, end in TIME_BUCKETS:
        if start <= hour < end:
            return bucket
    return TimeOfDayRange.LATE_NIGHT


def day_of_week_bucket(moment: datetime) -> str:
    return WEEKDAYS[moment.weekday()]


def _best_bucket(averages: dict[str, float], counts: dict[str, int]) -> str:
    # Empty buckets never win; ties resolve to the earliest bucket in canonical order.
    best_label = None
    best_value = None
    for label, value in averages.items():
        if not counts[label]:
            continue
        if best_value is None or value > best_value:
            best_label, best_value = label, value
    return best_label


def _empty_result() -> ProductivityResult:
    time_labels = [bucket.value for bucket, _, _ in TIME_BUCKETS]
    return ProductivityResult(
        best_time_of_day=NO_DATA_LABEL,
        best_time_range=None,
        best_day_of_week=NO_DATA_LABEL,
        time_scores={label: 0.0 for label in time_labels},
        day_scores={day: 0.0 for day in WEEKDAYS},
        time_counts={label: 0 for label in time_labels},
        day_counts={day: 0 for day in WEEKDAYS},
    )


def analyze_productivity(completions: Sequence[CompletedTask]) -> ProductivityResult:
    """Average derived scores per bucket and report the most productive windows."""

    if not completions:
        return _empty_result()

    for completion in completions:
        validate_completion(completion)

    time_buckets: dict[str, list[float]] = {bucket.value: [] for bucket, _, _ in TIME_BUCKETS}
    day_buckets: dict[str, list[float]] = {day: [] for day in WEEKDAYS}

    for completion in completions:
        score = productivity_score(completion)
        time_buckets[time_of_day_bucket(completion.completed_at).value].append(score)
        day_buckets[day_of_week_bucket(completion.completed_at)].append(score)

    time_scores = {label: float(np.mean(values)) if values else 0.0 for label, values in time_buckets.items()}
    day_scores = {label: float(np.mean(values)) if values else 0.0 for label, values in day_buckets.items()}

    time_counts = {label: len(values) for label, values in time_buckets.items()}
    day_counts = {label: len(values) for label, values in day_buckets.items()}

    best_time = _best_bucket(time_scores, time_counts)
    best_day = _best_bucket(day_scores, day_counts)
    logger.debug("Analyzed %d completions: best time %s, best day %s", len(completions), best_time, best_day)

    return ProductivityResult(
        best_time_of_day=best_time,
        best_time_range=TimeOfDayRange(best_time),
        best_day_of_week=best_day,
        time_scores=time_scores,
        day_scores=day_scores,
        time_counts=time_counts,
        day_counts=day_counts,
    )


def productivity_summary(result: ProductivityResult) -> dict:
    """JSON-friendly view of an analysis result for charts and the CLI."""

    return {
        "has_data": result.has_data,
        "best_time_of_day": result.best_time_of_day,
        "best_day_of_week": result.best_day_of_week,
        "time_of_day": [
            {"bucket": label, "average": result.time_scores[label], "count": result.time_counts[label]}
            for label in result.time_scores
        ],
        "day_of_week": [
            {"bucket": label, "average": result.day_scores[label], "count": result.day_counts[label]}
            for label in result.day_scores
        ],
    }
