# src/shelf/tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from ..errors import InvalidIndexError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskManager:
    """
    In-memory ordered task list.

    No persistence and no locking: one logical caller at a time.
    Readers get copies, so callers cannot mutate the internal list.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def add_task(self, label: str) -> None:
        self._tasks.append(Task(label=label))
        logger.debug("Task added index=%s label=%r", len(self._tasks) - 1, label)

    def get_tasks(self) -> list[Task]:
        return [replace(t) for t in self._tasks]

    def get_labels(self) -> list[str]:
        return [t.display() for t in self._tasks]

    def mark_task_as_completed(self, index: int) -> None:
        """
        Mark the task at `index` as completed.

        Idempotent: marking an already completed task changes nothing.
        Raises InvalidIndexError for index < 0 or index >= len.
        """
        if index < 0 or index >= len(self._tasks):
            raise InvalidIndexError(index, len(self._tasks))
        self._tasks[index].completed = True

    def clear_completed_tasks(self) -> None:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.completed]
        logger.debug("Cleared completed tasks removed=%s", before - len(self._tasks))

    def load_tasks(self, tasks: Iterable[Task | str]) -> None:
        """Replace the whole list. Strings are parsed with Task.from_text."""
        self._tasks = [
            Task.from_text(t) if isinstance(t, str) else replace(t) for t in tasks
        ]
        logger.debug("Tasks loaded total=%s", len(self._tasks))
