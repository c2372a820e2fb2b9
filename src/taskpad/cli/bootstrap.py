# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key-value store, task store and theme into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import console_confirm
from ..core.ports import ConfirmGate, KeyValueStore
from ..core.state import AppState
from ..core.theme import ThemePreference
from ..storage.kv_store import SqliteKeyValueStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    kv: KeyValueStore | None = None,
    confirm: ConfirmGate | None = console_confirm,
) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and storage are injectable so tests can run against tmp paths
    or an in-memory store. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = SqliteKeyValueStore(settings.storage_path)

    store = TaskStore(
        kv,
        filter_mode=settings.default_filter,
        sort_mode=settings.default_sort,
    )

    return AppState(
        settings=settings,
        kv=kv,
        store=store,
        theme=ThemePreference(kv),
        confirm=confirm if settings.confirm_delete else None,
    )
