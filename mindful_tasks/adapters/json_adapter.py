"""JSON adapter for task and completion records."""

from __future__ import annotations

import json
import logging
from typing import Callable, TypeVar

from mindful_tasks.adapters.fields import build_completion, build_task
from mindful_tasks.schema import CompletedTask, Task

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse(file_path: str, build: Callable[[dict, str], T]) -> list[T]:
    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    records = []
    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")
        records.append(build(item, f"Item {index}"))

    logger.debug("Parsed %d records from %s", len(records), file_path)
    return records


def parse_tasks(file_path: str) -> list[Task]:
    """Parse a JSON list of objects into tasks."""

    return _parse(file_path, build_task)


def parse_completions(file_path: str) -> list[CompletedTask]:
    """Parse a JSON list of objects into completed-task records."""

    return _parse(file_path, build_completion)
