"""Mood and energy token normalization shared by the prioritizer and analyzer."""

from __future__ import annotations

from enum import Enum

from mindful_tasks.schema import EnergyLevel, MoodCategory

_ENERGY_ORDER = (EnergyLevel.LOW, EnergyLevel.MEDIUM, EnergyLevel.HIGH)

_MOOD_TOKENS = {
    "stressed": MoodCategory.STRESSED,
    "sad": MoodCategory.STRESSED,
    "happy": MoodCategory.POSITIVE,
    "energetic": MoodCategory.POSITIVE,
    "excited": MoodCategory.EXCITED,
    "angry": MoodCategory.ANGRY,
    "neutral": MoodCategory.NEUTRAL,
}


def _token(value: object) -> str:
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().lower()


def normalize_energy(value: EnergyLevel | str | None) -> EnergyLevel:
    """Map an energy token to a level; missing or unknown tokens become medium."""

    if isinstance(value, EnergyLevel):
        return value
    if value is None:
        return EnergyLevel.MEDIUM
    try:
        return EnergyLevel(_token(value))
    except ValueError:
        return EnergyLevel.MEDIUM


def normalize_mood(value: MoodCategory | str | None) -> MoodCategory:
    """Map a free-text mood token to its category; unknown moods are neutral."""

    if isinstance(value, MoodCategory):
        return value
    if value is None:
        return MoodCategory.NEUTRAL
    return _MOOD_TOKENS.get(_token(value), MoodCategory.NEUTRAL)


def energy_distance(a: EnergyLevel, b: EnergyLevel) -> int:
    return abs(_ENERGY_ORDER.index(a) - _ENERGY_ORDER.index(b))

