# tests/test_task_store.py

from __future__ import annotations

import dataclasses
import json

import pytest

from taskpad.storage.kv_store import InMemoryKeyValueStore
from taskpad.tasks.task_models import TaskInput, TaskStats
from taskpad.tasks.task_store import ADD_LABEL, TASKS_KEY, UPDATE_LABEL, TaskStore

from .fakes import FakeClock


def _stored(kv: InMemoryKeyValueStore) -> list[dict]:
    return json.loads(kv.get_item(TASKS_KEY) or "[]")


def test_create_prepends_trims_and_persists(store: TaskStore, kv, clock: FakeClock) -> None:
    first = store.create(TaskInput(title="  Old  ", priority="low"))
    clock.advance()
    task = store.create(
        TaskInput(title="  A  ", description="  details ", due_date=None, priority="high")
    )

    assert len(store.tasks) == 2
    assert store.tasks[0] is task
    assert store.tasks[1] is first
    assert task.title == "A"
    assert task.description == "details"
    assert task.completed is False
    assert task.updated_at is None
    assert task.created_at == "2025-01-01T12:00:01.000Z"
    assert task.id != first.id

    stored = _stored(kv)
    assert [t["id"] for t in stored] == [task.id, first.id]
    assert set(stored[0]) == {
        "id",
        "title",
        "description",
        "dueDate",
        "priority",
        "completed",
        "createdAt",
    }


def test_ids_are_unique_within_the_same_millisecond(store: TaskStore) -> None:
    ids = {store.create(TaskInput(title=f"t{i}")).id for i in range(5)}
    assert len(ids) == 5


def test_ids_do_not_collide_with_loaded_tasks(kv, clock: FakeClock) -> None:
    first = TaskStore(kv, clock=clock).create(TaskInput(title="a"))
    reopened = TaskStore(kv, clock=clock)
    second = reopened.create(TaskInput(title="b"))
    assert second.id != first.id


def test_malformed_priority_is_accepted(store: TaskStore) -> None:
    task = store.create(TaskInput(title="x", priority="urgent"))
    assert task.priority == "urgent"


def test_empty_due_date_is_stored_as_absent(store: TaskStore) -> None:
    task = store.create(TaskInput(title="x", due_date="   "))
    assert task.due_date is None


def test_update_overwrites_fields_and_stamps_updated_at(store: TaskStore, clock: FakeClock) -> None:
    task = store.create(TaskInput(title="a", description="d", due_date="2025-02-01", priority="low"))
    store.toggle_completion(task.id)
    created_at = task.created_at
    clock.advance(60)

    assert store.update(task.id, TaskInput(title=" b ", description="", due_date=None, priority="high"))

    updated = store.get(task.id)
    assert updated is not None
    assert updated.title == "b"
    assert updated.description == ""
    assert updated.due_date is None
    assert updated.priority == "high"
    assert updated.completed is True
    assert updated.created_at == created_at
    assert updated.updated_at == "2025-01-01T12:01:00.000Z"


def test_update_unknown_id_is_a_silent_noop(store: TaskStore, kv) -> None:
    # Divergence from a void API: the store reports the miss as False.
    store.create(TaskInput(title="a"))
    before = kv.get_item(TASKS_KEY)

    assert store.update("nonexistent-id", TaskInput(title="zzz")) is False
    assert kv.get_item(TASKS_KEY) == before


def test_delete_removes_exactly_one(store: TaskStore, clock: FakeClock) -> None:
    a = store.create(TaskInput(title="a"))
    clock.advance()
    b = store.create(TaskInput(title="b"))

    assert store.delete(a.id) is True
    assert [t.id for t in store.tasks] == [b.id]

    assert store.delete("missing") is False
    assert len(store.tasks) == 1


def test_delete_clears_edit_slot_of_deleted_task(store: TaskStore) -> None:
    a = store.create(TaskInput(title="a"))
    store.begin_edit(a.id)
    store.delete(a.id)
    assert store.editing_task_id is None


def test_toggle_twice_restores_original(store: TaskStore, kv) -> None:
    task = store.create(TaskInput(title="a"))
    store.toggle_completion(task.id)
    assert store.get(task.id).completed is True
    assert _stored(kv)[0]["completed"] is True

    store.toggle_completion(task.id)
    assert store.get(task.id).completed is False
    assert _stored(kv)[0]["completed"] is False

    assert store.toggle_completion("missing") is False


def test_returned_tasks_cannot_be_changed_behind_the_store(store: TaskStore, kv, clock) -> None:
    created = store.create(TaskInput(title="a"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        store.tasks[0].completed = True
    with pytest.raises(dataclasses.FrozenInstanceError):
        created.title = "hijacked"

    store.toggle_completion(created.id)
    assert created.completed is False
    assert store.get(created.id).completed is True
    assert TaskStore(kv, clock=clock).tasks == store.tasks


def test_stored_completed_flag_is_read_literally(clock: FakeClock) -> None:
    raw = json.dumps(
        [
            {"id": "1", "title": "a", "completed": "false"},
            {"id": "2", "title": "b", "completed": "true"},
            {"id": "3", "title": "c", "completed": True},
            {"id": "4", "title": "d"},
        ]
    )
    store = TaskStore(InMemoryKeyValueStore({TASKS_KEY: raw}), clock=clock)
    assert [t.completed for t in store.tasks] == [False, True, True, False]


def test_begin_edit_returns_snapshot_and_replaces_slot(store: TaskStore, clock: FakeClock) -> None:
    a = store.create(TaskInput(title="a", description="da", due_date="2025-03-01", priority="low"))
    clock.advance()
    b = store.create(TaskInput(title="b"))
    assert store.submit_label == ADD_LABEL

    snap = store.begin_edit(a.id)
    assert snap == TaskInput(title="a", description="da", due_date="2025-03-01", priority="low")
    assert store.editing_task_id == a.id
    assert store.submit_label == UPDATE_LABEL

    store.begin_edit(b.id)
    assert store.editing_task_id == b.id

    assert store.begin_edit("missing") is None
    assert store.editing_task_id == b.id

    store.end_edit()
    store.end_edit()
    assert store.editing_task_id is None
    assert store.submit_label == ADD_LABEL


def test_statistics(store: TaskStore) -> None:
    tasks = [store.create(TaskInput(title=t)) for t in ("a", "b", "c")]
    store.toggle_completion(tasks[1].id)
    assert store.statistics() == TaskStats(total=3, completed=1, pending=2)
    assert store.statistics().as_dict() == {"total": 3, "completed": 1, "pending": 2}


def test_visible_tasks_applies_filter_then_sort(store: TaskStore, clock: FakeClock) -> None:
    low = store.create(TaskInput(title="low", priority="low"))
    clock.advance()
    high = store.create(TaskInput(title="high", priority="high"))
    clock.advance()
    done = store.create(TaskInput(title="done", priority="high"))
    store.toggle_completion(done.id)

    store.set_filter("pending")
    store.set_sort("priority-low")
    assert [t.id for t in store.visible_tasks()] == [low.id, high.id]

    store.set_filter("all")
    store.set_sort("none")
    assert [t.id for t in store.visible_tasks()] == [done.id, high.id, low.id]


def test_persistence_round_trip(store: TaskStore, kv, clock: FakeClock) -> None:
    a = store.create(TaskInput(title="a", due_date="2025-05-05", priority="medium"))
    clock.advance()
    store.create(TaskInput(title="b", description="bee"))
    store.update(a.id, TaskInput(title="a2", priority="high"))
    store.toggle_completion(a.id)

    reloaded = TaskStore(kv, clock=clock)
    assert reloaded.tasks == store.tasks


def test_reload_picks_up_external_writes(store: TaskStore, kv) -> None:
    store.create(TaskInput(title="a"))
    kv.set_item(TASKS_KEY, "[]")
    store.reload()
    assert store.tasks == []


def test_missing_or_corrupt_storage_starts_empty(clock: FakeClock) -> None:
    assert TaskStore(InMemoryKeyValueStore(), clock=clock).tasks == []
    assert TaskStore(InMemoryKeyValueStore({TASKS_KEY: "{not json"}), clock=clock).tasks == []
    assert TaskStore(InMemoryKeyValueStore({TASKS_KEY: '{"a": 1}'}), clock=clock).tasks == []


def test_load_skips_unusable_entries(clock: FakeClock) -> None:
    raw = json.dumps(
        [
            {"id": "1", "title": "ok", "priority": "low", "completed": False, "createdAt": "x"},
            "garbage",
            {"title": "no id"},
            {"id": "1", "title": "duplicate"},
        ]
    )
    store = TaskStore(InMemoryKeyValueStore({TASKS_KEY: raw}), clock=clock)
    assert [t.title for t in store.tasks] == ["ok"]
