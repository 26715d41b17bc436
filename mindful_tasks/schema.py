"""Core data schema for tasks, completions and mood signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class EnergyLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MoodCategory(str, Enum):
    """Buckets free-text mood tokens collapse into."""

    STRESSED = "stressed"
    POSITIVE = "positive"
    EXCITED = "excited"
    ANGRY = "angry"
    NEUTRAL = "neutral"


class TimeOfDayRange(str, Enum):
    EARLY_MORNING = "Early Morning"
    MORNING = "Morning"
    MIDDAY = "Midday"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"
    LATE_NIGHT = "Late Night"


@dataclass(frozen=True)
class Task:
    """Pending or completed task as handed over by the storage layer."""

    task_id: str
    title: str
    priority: Priority
    required_energy: EnergyLevel
    deadline: datetime
    is_completed: bool = False


@dataclass(frozen=True)
class CompletedTask:
    """Historical completion record used for productivity analysis."""

    task_id: str
    completed_at: datetime
    energy_requirement: float
    difficulty: float
    mood: str
    journal_sentiment: float


@dataclass
class ProductivityResult:
    best_time_of_day: str
    best_time_range: Optional[TimeOfDayRange]
    best_day_of_week: str
    time_scores: dict[str, float] = field(default_factory=dict)
    day_scores: dict[str, float] = field(default_factory=dict)
    time_counts: dict[str, int] = field(default_factory=dict)
    day_counts: dict[str, int] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        return self.best_time_range is not None


@dataclass(frozen=True)
class MoodCheckIn:
    mood: str
    date: datetime


@dataclass(frozen=True)
class JournalEntry:
    date: datetime
    mood: Optional[str] = None
