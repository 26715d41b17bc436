"""Shared field parsing for the file adapters."""

from __future__ import annotations

from datetime import datetime

from mindful_tasks.schema import CompletedTask, EnergyLevel, Priority, Task

TASK_FIELDS = {"task_id", "title", "priority", "required_energy", "deadline"}
COMPLETION_FIELDS = {"task_id", "completed_at", "energy_requirement", "difficulty", "mood", "journal_sentiment"}

_TRUE_VALUES = {"1", "true", "yes", "y"}


def _missing(record: dict, required: set[str]) -> list[str]:
    return sorted(name for name in required if record.get(name) in (None, ""))


def _timestamp(raw, label: str, name: str) -> datetime:
    try:
        return datetime.fromisoformat(str(raw).strip())
    except ValueError as exc:
        raise ValueError(f"{label}: malformed {name}") from exc


def _number(raw, label: str, name: str) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label}: invalid {name}") from exc


def _flag(raw) -> bool:
    if isinstance(raw, bool):
        return raw
    return str(raw or "").strip().lower() in _TRUE_VALUES


def build_task(record: dict, label: str) -> Task:
    missing = _missing(record, TASK_FIELDS)
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")

    try:
        priority = Priority(str(record["priority"]).strip().lower())
    except ValueError as exc:
        raise ValueError(f"{label}: invalid priority '{record['priority']}'") from exc

    try:
        energy = EnergyLevel(str(record["required_energy"]).strip().lower())
    except ValueError as exc:
        raise ValueError(f"{label}: invalid required_energy '{record['required_energy']}'") from exc

    return Task(
        task_id=str(record["task_id"]).strip(),
        title=str(record["title"]).strip(),
        priority=priority,
        required_energy=energy,
        deadline=_timestamp(record["deadline"], label, "deadline"),
        is_completed=_flag(record.get("is_completed")),
    )


def build_completion(record: dict, label: str) -> CompletedTask:
    missing = _missing(record, COMPLETION_FIELDS)
    if missing:
        raise ValueError(f"{label}: missing required fields {missing}")

    return CompletedTask(
        task_id=str(record["task_id"]).strip(),
        completed_at=_timestamp(record["completed_at"], label, "completed_at"),
        energy_requirement=_number(record["energy_requirement"], label, "energy_requirement"),
        difficulty=_number(record["difficulty"], label, "difficulty"),
        mood=str(record["mood"]).strip(),
        journal_sentiment=_number(record["journal_sentiment"], label, "journal_sentiment"),
    )
