# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState
from taskpad.storage.kv_store import InMemoryKeyValueStore
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeClock, FakeConfirm


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="Task Manager Pro",
        log_level="WARNING",
        data_dir=tmp_path,
        storage_path=tmp_path / "storage.sqlite3",
        default_filter="all",
        default_sort="date-asc",
        confirm_delete=True,
    )


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(kv: InMemoryKeyValueStore, clock: FakeClock) -> TaskStore:
    return TaskStore(kv, clock=clock)


@pytest.fixture()
def confirm() -> FakeConfirm:
    return FakeConfirm(answer=True)


@pytest.fixture()
def state(settings: SimpleNamespace, kv: InMemoryKeyValueStore, confirm: FakeConfirm) -> AppState:
    """
    AppState wired through the real composition root, but on an in-memory
    key-value store and a scripted confirmation gate.
    """
    return create_initial_state(settings=settings, kv=kv, confirm=confirm)
