import pytest

from mindful_tasks.normalize import energy_distance, normalize_energy, normalize_mood
from mindful_tasks.schema import EnergyLevel, MoodCategory


@pytest.mark.parametrize(
    "token,expected",
    [
        ("high", EnergyLevel.HIGH),
        (" Low ", EnergyLevel.LOW),
        ("MEDIUM", EnergyLevel.MEDIUM),
        (None, EnergyLevel.MEDIUM),
        ("exhausted", EnergyLevel.MEDIUM),
        (EnergyLevel.HIGH, EnergyLevel.HIGH),
    ],
)
def test_normalize_energy(token, expected):
    assert normalize_energy(token) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("Stressed", MoodCategory.STRESSED),
        ("sad", MoodCategory.STRESSED),
        ("happy", MoodCategory.POSITIVE),
        ("ENERGETIC", MoodCategory.POSITIVE),
        ("excited", MoodCategory.EXCITED),
        ("angry", MoodCategory.ANGRY),
        ("calm", MoodCategory.NEUTRAL),
        (None, MoodCategory.NEUTRAL),
        ("", MoodCategory.NEUTRAL),
    ],
)
def test_normalize_mood(token, expected):
    assert normalize_mood(token) == expected


def test_energy_distance():
    assert energy_distance(EnergyLevel.LOW, EnergyLevel.LOW) == 0
    assert energy_distance(EnergyLevel.HIGH, EnergyLevel.MEDIUM) == 1
    assert energy_distance(EnergyLevel.LOW, EnergyLevel.HIGH) == 2
