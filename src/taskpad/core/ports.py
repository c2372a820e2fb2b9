# src/taskpad/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store and theme depend on Protocols instead of concrete storage,
so the SQLite backend can be swapped for an in-memory one in tests.
"""

from collections.abc import Callable
from typing import Protocol

ConfirmGate = Callable[[str], bool]
# Asked before an irreversible action; returns True to proceed.


class KeyValueStore(Protocol):
    """
    String-keyed durable storage holding string values.

    Semantics follow browser localStorage: missing keys read as None,
    set_item overwrites the previous value completely.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
