# src/taskpad/core/theme.py

from __future__ import annotations

import logging
from enum import StrEnum

from .ports import KeyValueStore

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


class ThemePreference:
    """Light/dark preference stored under THEME_KEY as a bare literal."""

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv
        self.current: Theme = self.load()

    def load(self) -> Theme:
        raw = (self._kv.get_item(THEME_KEY) or "").strip()
        try:
            return Theme(raw)
        except ValueError:
            return Theme.LIGHT

    def toggle(self) -> Theme:
        self.current = Theme.LIGHT if self.current == Theme.DARK else Theme.DARK
        self._kv.set_item(THEME_KEY, self.current.value)
        logger.debug("Theme switched to %s", self.current.value)
        return self.current

    @property
    def is_dark(self) -> bool:
        return self.current == Theme.DARK

    @property
    def icon(self) -> str:
        # The toggle shows the mode you would switch to.
        return "☀️" if self.is_dark else "🌙"
