# tasks/task_merge.py

from __future__ import annotations

"""
Merge rules between the shared default tasks and one date's own tasks.

Shared defaults are always listed first. A date-specific task whose text
equals a shared-default text is dropped, so shared defaults win on collision
(including their `done` flag).
"""

from collections.abc import Iterable, Sequence

from .task_models import DayStatus, Task


def _texts(tasks: Iterable[Task]) -> set[str]:
    return {t.text for t in tasks}


def merge_with_defaults(shared: Sequence[Task], date_specific: Iterable[Task]) -> list[Task]:
    """
    Return `shared ++ date_specific` without duplicate texts.

    Relative order of both inputs is preserved. Repeats inside `date_specific`
    itself keep their first occurrence. Merging an already merged list with
    the same shared defaults returns an equal list.
    """
    merged = list(shared)
    seen = _texts(shared)
    for task in date_specific:
        if task.text in seen:
            continue
        seen.add(task.text)
        merged.append(task)
    return merged


def split_date_specific(tasks: Iterable[Task], shared: Iterable[Task]) -> list[Task]:
    """Tasks whose text is not a shared-default text (what gets persisted per date)."""
    shared_texts = _texts(shared)
    return [t for t in tasks if t.text not in shared_texts]


def derive_day_status(tasks: Sequence[Task] | None) -> DayStatus:
    if not tasks:
        return DayStatus.EMPTY
    if all(t.done for t in tasks):
        return DayStatus.COMPLETED
    return DayStatus.INCOMPLETE
