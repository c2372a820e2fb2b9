# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """
    Known priority values.

    Task.priority is a plain str: foreign values are stored as given and
    rank below LOW when sorting.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FilterMode(StrEnum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


class SortMode(StrEnum):
    DATE_ASC = "date-asc"
    DATE_DESC = "date-desc"
    PRIORITY_HIGH = "priority-high"
    PRIORITY_LOW = "priority-low"
    NONE = "none"


PRIORITY_RANK: dict[str, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


def _stored_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    return raw is True or raw == 1


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    description: str
    due_date: str | None
    priority: str
    completed: bool
    created_at: str
    updated_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Persisted shape. updatedAt is omitted until the first update."""
        out: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "dueDate": self.due_date,
            "priority": self.priority,
            "completed": self.completed,
            "createdAt": self.created_at,
        }
        if self.updated_at is not None:
            out["updatedAt"] = self.updated_at
        return out

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task | None:
        """Build a Task from a persisted object; None if it has no usable id."""
        tid = raw.get("id")
        if tid is None or str(tid) == "":
            return None
        due = raw.get("dueDate")
        updated = raw.get("updatedAt")
        return cls(
            id=str(tid),
            title=str(raw.get("title") or ""),
            description=str(raw.get("description") or ""),
            due_date=str(due) if due else None,
            priority=str(raw.get("priority") or ""),
            completed=_stored_bool(raw.get("completed")),
            created_at=str(raw.get("createdAt") or ""),
            updated_at=str(updated) if updated else None,
        )


@dataclass(frozen=True, slots=True)
class TaskInput:
    """Raw form values as entered by the user (untrimmed)."""

    title: str
    description: str = ""
    due_date: str | None = None
    priority: str = Priority.MEDIUM

    @classmethod
    def from_task(cls, task: Task) -> TaskInput:
        return cls(
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            priority=task.priority,
        )


@dataclass(frozen=True, slots=True)
class TaskStats:
    total: int
    completed: int
    pending: int

    def as_dict(self) -> dict[str, int]:
        return {"total": self.total, "completed": self.completed, "pending": self.pending}
