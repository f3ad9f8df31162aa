# tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Any

SHARED_DEFAULT_TASKS_KEY = "shared_default_tasks"


class DayStatus(StrEnum):
    """Completion status of one calendar day, derived from its task list."""

    EMPTY = "empty"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True, slots=True)
class Task:
    """
    One to-do item.

    Tasks carry no id: a list is ordered by position, and merging matches
    tasks by exact `text`.
    """

    text: str
    done: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text.strip():
            raise ValueError("task text is required")

    def toggled(self) -> Task:
        return replace(self, done=not self.done)

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "done": self.done}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task must be an object, got {type(raw).__name__}")
        text = raw.get("text")
        if not isinstance(text, str):
            raise ValueError("task text must be a string")
        return cls(text=text, done=raw.get("done") is True)


# Hardcoded fallback set: used when the store is unreachable or holds no shared defaults.
DEFAULT_TASKS: tuple[Task, ...] = (
    Task("LeetCode"),
    Task("GitHub Contribution"),
    Task("Workout"),
)
