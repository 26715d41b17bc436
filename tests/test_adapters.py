import json
from datetime import datetime

import pytest

from mindful_tasks.adapters.csv_adapter import parse_completions as parse_completions_csv
from mindful_tasks.adapters.csv_adapter import parse_tasks as parse_tasks_csv
from mindful_tasks.adapters.json_adapter import parse_completions as parse_completions_json
from mindful_tasks.adapters.json_adapter import parse_tasks as parse_tasks_json
from mindful_tasks.schema import EnergyLevel, Priority


def test_csv_parse_tasks_success(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "task_id,title,priority,required_energy,deadline,is_completed\n"
        "a,Report,High,low,2026-10-20T17:00:00,false\n"
        "b,Laundry,low,medium,2026-10-18T09:00:00,true\n",
        encoding="utf-8",
    )
    tasks = parse_tasks_csv(str(path))
    assert len(tasks) == 2
    assert tasks[0].priority == Priority.HIGH
    assert tasks[0].required_energy == EnergyLevel.LOW
    assert tasks[0].deadline == datetime(2026, 10, 20, 17, 0)
    assert tasks[1].is_completed is True


def test_csv_parse_tasks_invalid_priority(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "task_id,title,priority,required_energy,deadline\n" "a,Report,urgent,low,2026-10-20T17:00:00\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="Row 2"):
        parse_tasks_csv(str(path))


def test_csv_parse_completions_missing_field(tmp_path):
    path = tmp_path / "completions.csv"
    path.write_text(
        "task_id,completed_at,energy_requirement,difficulty,mood,journal_sentiment\n"
        "c1,2026-10-20T09:00:00,3,,happy,0.8\n",
        encoding="utf-8",
    )
    with pytest.raises(ValueError, match="difficulty"):
        parse_completions_csv(str(path))


def test_csv_parse_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert parse_tasks_csv(str(path)) == []


def test_json_parse_completions_success(tmp_path):
    path = tmp_path / "completions.json"
    payload = [
        {
            "task_id": "c1",
            "completed_at": "2026-10-20T09:00:00",
            "energy_requirement": 3,
            "difficulty": 2,
            "mood": "happy",
            "journal_sentiment": 0,
        }
    ]
    path.write_text(json.dumps(payload), encoding="utf-8")
    completions = parse_completions_json(str(path))
    assert len(completions) == 1
    assert completions[0].journal_sentiment == 0.0
    assert completions[0].completed_at.hour == 9


def test_json_parse_tasks_malformed_deadline(tmp_path):
    path = tmp_path / "tasks.json"
    payload = [{"task_id": "a", "title": "A", "priority": "high", "required_energy": "low", "deadline": "soon"}]
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(ValueError, match="deadline"):
        parse_tasks_json(str(path))


def test_json_payload_must_be_list(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"task_id": "a"}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_tasks_json(str(path))
