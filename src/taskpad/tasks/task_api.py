# src/taskpad/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.ports import ConfirmGate
from .task_models import Task, TaskInput
from .task_store import TaskStore

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this task?"


def submit_form(store: TaskStore, data: TaskInput) -> Task | None:
    """
    Form submit gesture: update the task in the edit slot if there is one,
    otherwise create a new task. The edit slot is cleared either way.

    Returns the created/updated task, or None if the edited task vanished.
    """
    editing = store.editing_task_id
    try:
        if editing is None:
            return store.create(data)
        if store.update(editing, data):
            return store.get(editing)
        logger.info("Edited task id=%s no longer exists; nothing updated.", editing)
        return None
    finally:
        store.end_edit()


def request_delete(store: TaskStore, task_id: str, confirm: ConfirmGate | None) -> bool:
    """
    Delete gesture: ask the confirmation gate first (if any).
    Returns True only when a task was actually removed.
    """
    if store.get(task_id) is None:
        return False
    if confirm is not None and not confirm(DELETE_PROMPT):
        logger.debug("Delete of id=%s declined.", task_id)
        return False
    return store.delete(task_id)
