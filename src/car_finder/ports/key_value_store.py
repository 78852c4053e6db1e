from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """
    Port for durable settings storage.

    Values are opaque strings; callers own their encoding (JSON for the
    wishlist, "true"/"false" for the theme flag).

    Contract:
        - set() is durable once it returns
        - get() returns None for keys that were never written
    """

    @abstractmethod
    def get(self, key: str) -> str | None: ...

    @abstractmethod
    def set(self, key: str, value: str) -> None: ...
