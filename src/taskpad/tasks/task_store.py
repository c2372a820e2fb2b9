# src/taskpad/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime

from ..core.ports import KeyValueStore
from .task_models import FilterMode, SortMode, Task, TaskInput, TaskStats
from .task_views import compute_stats, filter_tasks, sort_tasks

logger = logging.getLogger(__name__)

TASKS_KEY = "tasks"

ADD_LABEL = "Add Task"
UPDATE_LABEL = "Update Task"

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _iso(ts: datetime) -> str:
    """2025-01-01T12:00:00.000Z"""
    return ts.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _clean_due(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


class TaskStore:
    """
    Owner of the task collection.

    - newest tasks first; list order is the tiebreak for every sort
    - the whole collection is written under TASKS_KEY after each mutation
    - unknown ids are a silent no-op (mutators return False)
    - one edit slot: begin_edit replaces whatever was being edited

    The persisted value is a snapshot; the in-memory list is the truth
    while the store is alive. Tasks are frozen, so callers can only change
    them through the mutators below.
    """

    def __init__(
        self,
        kv: KeyValueStore,
        *,
        filter_mode: str = FilterMode.ALL,
        sort_mode: str = SortMode.DATE_ASC,
        clock: Clock | None = None,
    ) -> None:
        self._kv = kv
        self._clock: Clock = clock or _utc_now
        self._tasks: list[Task] = self._load()
        self._last_id = 0
        self.filter_mode: str = str(filter_mode)
        self.sort_mode: str = str(sort_mode)
        self.editing_task_id: str | None = None
        logger.info("TaskStore ready total=%s", len(self._tasks))

    # ---- persistence ----

    def _load(self) -> list[Task]:
        raw = self._kv.get_item(TASKS_KEY)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored tasks are not valid JSON; starting empty.")
            return []
        if not isinstance(data, list):
            logger.warning("Stored tasks are not a list (%s); starting empty.", type(data).__name__)
            return []

        out: list[Task] = []
        seen: set[str] = set()
        for item in data:
            if not isinstance(item, dict):
                continue
            task = Task.from_dict(item)
            if task is None or task.id in seen:
                logger.debug("Skipping stored task entry without a usable id: %r", item)
                continue
            seen.add(task.id)
            out.append(task)
        return out

    def _save(self) -> None:
        payload = json.dumps([t.to_dict() for t in self._tasks], ensure_ascii=False)
        self._kv.set_item(TASKS_KEY, payload)

    def reload(self) -> None:
        """Replace the in-memory list with what is currently persisted."""
        self._tasks = self._load()
        if self.editing_task_id is not None and self._find(self.editing_task_id) is None:
            self.editing_task_id = None

    # ---- lookup ----

    def _find(self, task_id: str) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def _swap(self, task: Task) -> None:
        self._tasks = [task if t.id == task.id else t for t in self._tasks]

    def _new_id(self) -> str:
        candidate = int(self._clock().timestamp() * 1000)
        taken = {t.id for t in self._tasks}
        candidate = max(candidate, self._last_id + 1)
        while str(candidate) in taken:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: str) -> Task | None:
        return self._find(task_id)

    # ---- mutations ----

    def create(self, data: TaskInput) -> Task:
        task = Task(
            id=self._new_id(),
            title=data.title.strip(),
            description=(data.description or "").strip(),
            due_date=_clean_due(data.due_date),
            priority=str(data.priority),
            completed=False,
            created_at=_iso(self._clock()),
        )
        self._tasks.insert(0, task)
        self._save()
        logger.debug("Task created id=%s priority=%s due=%s", task.id, task.priority, task.due_date)
        return task

    def update(self, task_id: str, data: TaskInput) -> bool:
        task = self._find(task_id)
        if task is None:
            logger.debug("update: unknown id=%s", task_id)
            return False
        self._swap(
            replace(
                task,
                title=data.title.strip(),
                description=(data.description or "").strip(),
                due_date=_clean_due(data.due_date),
                priority=str(data.priority),
                updated_at=_iso(self._clock()),
            )
        )
        self._save()
        logger.debug("Task updated id=%s", task_id)
        return True

    def delete(self, task_id: str) -> bool:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if t.id != task_id]
        if len(self._tasks) == before:
            logger.debug("delete: unknown id=%s", task_id)
            return False
        if self.editing_task_id == task_id:
            self.editing_task_id = None
        self._save()
        logger.debug("Task deleted id=%s", task_id)
        return True

    def toggle_completion(self, task_id: str) -> bool:
        task = self._find(task_id)
        if task is None:
            logger.debug("toggle: unknown id=%s", task_id)
            return False
        self._swap(replace(task, completed=not task.completed))
        self._save()
        logger.debug("Task toggled id=%s completed=%s", task_id, not task.completed)
        return True

    # ---- edit slot ----

    def begin_edit(self, task_id: str) -> TaskInput | None:
        task = self._find(task_id)
        if task is None:
            return None
        self.editing_task_id = task_id
        return TaskInput.from_task(task)

    def end_edit(self) -> None:
        self.editing_task_id = None

    @property
    def submit_label(self) -> str:
        return UPDATE_LABEL if self.editing_task_id is not None else ADD_LABEL

    # ---- views ----

    def set_filter(self, mode: str) -> None:
        self.filter_mode = str(mode)

    def set_sort(self, mode: str) -> None:
        self.sort_mode = str(mode)

    def filter(self, tasks: list[Task] | None = None, mode: str | None = None) -> list[Task]:
        return filter_tasks(self._tasks if tasks is None else tasks, mode or self.filter_mode)

    def sort(self, tasks: list[Task] | None = None, mode: str | None = None) -> list[Task]:
        return sort_tasks(self._tasks if tasks is None else tasks, mode or self.sort_mode)

    def visible_tasks(self) -> list[Task]:
        return self.sort(self.filter())

    def statistics(self) -> TaskStats:
        return compute_stats(self._tasks)
