# src/taskpad/tasks/task_views.py

"""
Derived views over a task list.

Everything here is pure: inputs are never mutated, results are new lists.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .task_models import PRIORITY_RANK, FilterMode, SortMode, Task, TaskStats


def parse_due_date(raw: str | None) -> date | None:
    """
    Parse a stored dueDate.

    Accepts "YYYY-MM-DD" and full ISO timestamps (date part is used).
    Empty or malformed values return None and are treated as "no deadline".
    """
    if not raw:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def priority_rank(priority: str) -> int:
    return PRIORITY_RANK.get(priority, 0)


def filter_tasks(tasks: Iterable[Task], mode: str) -> list[Task]:
    items = list(tasks)
    if mode == FilterMode.COMPLETED:
        return [t for t in items if t.completed]
    if mode == FilterMode.PENDING:
        return [t for t in items if not t.completed]
    return items


def sort_tasks(tasks: Iterable[Task], mode: str) -> list[Task]:
    """
    Return a new ordered list. Python's sort is stable, so ties keep their
    prior relative order in every mode (reverse=True included).
    """
    items = list(tasks)

    if mode in (SortMode.DATE_ASC, SortMode.DATE_DESC):
        dated: list[tuple[date, Task]] = []
        undated: list[Task] = []
        for t in items:
            d = parse_due_date(t.due_date)
            if d is None:
                undated.append(t)
            else:
                dated.append((d, t))
        dated.sort(key=lambda pair: pair[0], reverse=mode == SortMode.DATE_DESC)
        # Tasks without a deadline go last in both directions.
        return [t for _, t in dated] + undated

    if mode == SortMode.PRIORITY_HIGH:
        return sorted(items, key=lambda t: priority_rank(t.priority), reverse=True)

    if mode == SortMode.PRIORITY_LOW:
        return sorted(items, key=lambda t: priority_rank(t.priority))

    return items


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    items = list(tasks)
    total = len(items)
    completed = sum(1 for t in items if t.completed)
    return TaskStats(total=total, completed=completed, pending=total - completed)
