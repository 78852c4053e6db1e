from __future__ import annotations

from car_finder.ports.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """
    Canonical contract implementation for tests.

    - Durable for the lifetime of the instance only
    - Optional initial values simulate state left by a previous run
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
