"""
Scoring constants and weight configuration.

Single source of truth for:
- Prioritizer factor weights and lookup tables
- Analyzer adjustments and bucket boundaries

Weights can be overridden via environment variables; the lookup tables are
fixed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from mindful_tasks.schema import EnergyLevel, MoodCategory, Priority, TimeOfDayRange


def _get_env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class ScoringWeights:
    """
    Relative contribution of each prioritization factor.

    Deadline urgency carries the most weight; mood only nudges the order.
    """

    priority: float = 0.30
    deadline: float = 0.40
    energy_fit: float = 0.20
    mood: float = 0.10

    def __post_init__(self) -> None:
        for name in ("priority", "deadline", "energy_fit", "mood"):
            if getattr(self, name) < 0:
                raise ValueError(f"Weight '{name}' must be non-negative")

    @classmethod
    def from_env(cls) -> "ScoringWeights":
        """
        Construct weights from environment variables.

        Environment variables (all optional):
        - MT_WEIGHT_PRIORITY
        - MT_WEIGHT_DEADLINE
        - MT_WEIGHT_ENERGY_FIT
        - MT_WEIGHT_MOOD
        """
        defaults = cls()
        return cls(
            priority=_get_env_float("MT_WEIGHT_PRIORITY", defaults.priority),
            deadline=_get_env_float("MT_WEIGHT_DEADLINE", defaults.deadline),
            energy_fit=_get_env_float("MT_WEIGHT_ENERGY_FIT", defaults.energy_fit),
            mood=_get_env_float("MT_WEIGHT_MOOD", defaults.mood),
        )


DEFAULT_WEIGHTS = ScoringWeights()

PRIORITY_SCORES: Mapping[Priority, float] = MappingProxyType(
    {
        Priority.HIGH: 1.0,
        Priority.MEDIUM: 0.6,
        Priority.LOW: 0.3,
    }
)


@dataclass(frozen=True)
class DeadlineThresholds:
    """Urgency by whole days remaining; overdue and due-today share the top score."""

    due_now_score: float = 1.0
    soon_days: int = 3
    soon_score: float = 0.8
    week_days: int = 7
    week_score: float = 0.5
    later_score: float = 0.2


DEADLINE_THRESHOLDS = DeadlineThresholds()

# Indexed by the number of steps between user and task energy.
ENERGY_FIT_SCORES: tuple[float, float, float] = (1.0, 0.5, 0.1)

_POSITIVE_TASK_SCORES = MappingProxyType({EnergyLevel.LOW: 0.3, EnergyLevel.MEDIUM: 0.6, EnergyLevel.HIGH: 0.9})

# Excited shares the positive row here but not the analyzer adjustment.
MOOD_TASK_SCORES: Mapping[MoodCategory, Mapping[EnergyLevel, float]] = MappingProxyType(
    {
        MoodCategory.STRESSED: MappingProxyType(
            {EnergyLevel.LOW: 0.8, EnergyLevel.MEDIUM: 0.5, EnergyLevel.HIGH: 0.2}
        ),
        MoodCategory.POSITIVE: _POSITIVE_TASK_SCORES,
        MoodCategory.EXCITED: _POSITIVE_TASK_SCORES,
        MoodCategory.ANGRY: MappingProxyType(
            {EnergyLevel.LOW: 0.3, EnergyLevel.MEDIUM: 0.5, EnergyLevel.HIGH: 0.8}
        ),
        MoodCategory.NEUTRAL: MappingProxyType(
            {EnergyLevel.LOW: 0.6, EnergyLevel.MEDIUM: 0.7, EnergyLevel.HIGH: 0.6}
        ),
    }
)

COMPLETED_TASK_SCORE = -1.0

# Analyzer constants
BASE_PRODUCTIVITY = 1.0
ENERGY_FACTOR = 0.5
SENTIMENT_FACTOR = 0.5

MOOD_ADJUSTMENTS: Mapping[MoodCategory, float] = MappingProxyType(
    {
        MoodCategory.POSITIVE: 1.0,
        MoodCategory.NEUTRAL: 0.5,
        MoodCategory.STRESSED: 0.0,
        MoodCategory.ANGRY: 0.5,
        MoodCategory.EXCITED: 0.5,
    }
)

# (bucket, first hour inclusive, last hour exclusive), in canonical order.
TIME_BUCKETS: tuple[tuple[TimeOfDayRange, int, int], ...] = (
    (TimeOfDayRange.EARLY_MORNING, 5, 8),
    (TimeOfDayRange.MORNING, 8, 11),
    (TimeOfDayRange.MIDDAY, 11, 14),
    (TimeOfDayRange.AFTERNOON, 14, 17),
    (TimeOfDayRange.EVENING, 17, 21),
    (TimeOfDayRange.NIGHT, 21, 24),
    (TimeOfDayRange.LATE_NIGHT, 0, 5),
)

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

NO_DATA_LABEL = "No data"


_DEFAULT_WEIGHTS: Optional[ScoringWeights] = None


def get_weights(force_reload: bool = False) -> ScoringWeights:
    """
    Return the process-wide weights, read from the environment once.

    Use `force_reload=True` after changing environment variables at runtime.
    """
    global _DEFAULT_WEIGHTS
    if _DEFAULT_WEIGHTS is None or force_reload:
        _DEFAULT_WEIGHTS = ScoringWeights.from_env()
    return _DEFAULT_WEIGHTS
