# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import ConfirmGate, KeyValueStore
from .theme import ThemePreference


@dataclass
class AppState:
    # Settings are kept on the state so handlers can read them without globals.
    settings: object

    kv: KeyValueStore
    store: TaskStore
    theme: ThemePreference

    # None means "delete without asking".
    confirm: ConfirmGate | None = None
