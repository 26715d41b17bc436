"""CSV adapter for task and completion records."""

from __future__ import annotations

import csv
import logging
from typing import Callable, TypeVar

from mindful_tasks.adapters.fields import build_completion, build_task
from mindful_tasks.schema import CompletedTask, Task

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse(file_path: str, build: Callable[[dict, str], T]) -> list[T]:
    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        records: list[T] = []
        for row_number, row in enumerate(reader, start=2):
            records.append(build(row, f"Row {row_number}"))

    logger.debug("Parsed %d records from %s", len(records), file_path)
    return records


def parse_tasks(file_path: str) -> list[Task]:
    """Parse a CSV file into tasks."""

    return _parse(file_path, build_task)


def parse_completions(file_path: str) -> list[CompletedTask]:
    """Parse a CSV file into completed-task records."""

    return _parse(file_path, build_completion)
