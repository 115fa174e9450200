# src/shelf/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

COMPLETED_MARKER = "[Completed] "


@dataclass(slots=True)
class Task:
    """
    A single task entry.

    Completion is a field, not part of the label. The marker only appears
    when rendering (display) or when importing legacy strings (from_text).
    """

    label: str
    completed: bool = False

    def display(self) -> str:
        if self.completed:
            return f"{COMPLETED_MARKER}{self.label}"
        return self.label

    @classmethod
    def from_text(cls, text: str) -> Task:
        if text.startswith(COMPLETED_MARKER):
            return cls(label=text[len(COMPLETED_MARKER) :], completed=True)
        return cls(label=text)
