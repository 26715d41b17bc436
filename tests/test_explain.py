from datetime import datetime, timedelta

import pytest

from mindful_tasks.explain import explain_ranking, explain_task
from mindful_tasks.schema import EnergyLevel, Priority, Task

NOW = datetime(2026, 10, 19, 12, 0)


def test_explain_task_contributions():
    task = Task("r", "Report", Priority.HIGH, EnergyLevel.HIGH, NOW + timedelta(hours=4))
    explanation = explain_task(task, mood="happy", energy_level="high", now=NOW)

    weights = {item["factor"]: item["weight"] for item in explanation["contributions"]}
    assert weights["deadline"] == pytest.approx(0.4)
    assert weights["priority"] == pytest.approx(0.3)
    assert weights["energy_fit"] == pytest.approx(0.2)
    assert weights["mood"] == pytest.approx(0.09)
    assert explanation["dominant_factor"] == "deadline"
    assert explanation["score"] == pytest.approx(sum(weights.values()))


def test_explain_ranking_follows_priority_order():
    tasks = [
        Task("done", "Done", Priority.HIGH, EnergyLevel.LOW, NOW, is_completed=True),
        Task("later", "Later", Priority.LOW, EnergyLevel.LOW, NOW + timedelta(days=20)),
        Task("soon", "Soon", Priority.MEDIUM, EnergyLevel.LOW, NOW + timedelta(days=1)),
    ]
    ranking = explain_ranking(tasks, mood="sad", energy_level="low", now=NOW)
    assert [item["task_id"] for item in ranking] == ["soon", "later", "done"]
    assert ranking[-1]["score"] == -1.0
    assert ranking[-1]["dominant_factor"] is None
