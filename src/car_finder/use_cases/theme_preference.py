from __future__ import annotations

import logging
import threading

from car_finder.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "darkMode"


class ThemePreference:
    """Dark mode flag persisted as the literal strings "true" / "false"."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store
        self._dark_mode = False
        self._lock = threading.Lock()

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def restore(self) -> bool:
        """Read the stored flag; anything other than "true" means light mode."""
        with self._lock:
            self._dark_mode = self._store.get(DARK_MODE_KEY) == "true"
            return self._dark_mode

    def set(self, enabled: bool) -> bool:
        with self._lock:
            return self._write(enabled)

    def toggle(self) -> bool:
        with self._lock:
            return self._write(not self._dark_mode)

    def _write(self, enabled: bool) -> bool:
        # Caller holds the lock
        self._store.set(DARK_MODE_KEY, "true" if enabled else "false")
        self._dark_mode = enabled
        logger.info("Theme changed", extra={"dark_mode": enabled})
        return enabled
