"""Persisted wishlist of Car snapshots."""

from __future__ import annotations

import json
import logging
import threading

from car_finder.domain.car import Car
from car_finder.ports.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

WISHLIST_KEY = "wishlist"


class WishlistStore:
    """
    Set of saved cars keyed by id, kept in insertion order.

    Entries are snapshots taken when a car is added, not references into the
    catalog. Every toggle writes the full list to the key-value store before
    the in-memory state changes; toggles are serialized, so there is never
    more than one write in flight.
    """

    def __init__(self, store: KeyValueStore) -> None:
        """
        Initialize wishlist with its durable store.

        Args:
            store: Key-value store holding the JSON payload under WISHLIST_KEY
        """
        self._store = store
        self._entries: list[Car] = []
        self._lock = threading.Lock()

    def restore(self) -> list[Car]:
        """
        Load persisted entries (called once at startup).

        A missing key yields an empty wishlist. A payload that is not valid
        JSON, not an array, or holds an unreadable snapshot is discarded and
        also yields an empty wishlist.

        Returns:
            Restored entries in stored order
        """
        raw = self._store.get(WISHLIST_KEY)
        entries = self._decode(raw) if raw else []

        with self._lock:
            self._entries = entries
        return list(entries)

    def toggle(self, car: Car) -> list[Car]:
        """
        Add the car if its id is absent, otherwise remove the entry with that id.

        Args:
            car: Car to add (as a snapshot) or whose id to remove

        Returns:
            The new wishlist entries
        """
        with self._lock:
            if self.find(car.id) is not None:
                updated = [entry for entry in self._entries if str(entry.id) != str(car.id)]
                action = "removed"
            else:
                updated = [*self._entries, car]
                action = "added"

            # Persist first: a failed write must leave memory untouched
            self._store.set(WISHLIST_KEY, self._encode(updated))
            self._entries = updated

        logger.info(
            "Wishlist toggled",
            extra={"car_id": car.id, "action": action, "wishlist_size": len(updated)},
        )
        return list(updated)

    def is_wishlisted(self, car_id: int | str) -> bool:
        return self.find(car_id) is not None

    def find(self, car_id: int | str) -> Car | None:
        wanted = str(car_id)
        for entry in self._entries:
            if str(entry.id) == wanted:
                return entry
        return None

    def entries(self) -> list[Car]:
        return list(self._entries)

    @staticmethod
    def _encode(entries: list[Car]) -> str:
        return json.dumps([entry.to_snapshot() for entry in entries])

    @staticmethod
    def _decode(raw: str) -> list[Car]:
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.warning("Discarding persisted wishlist: invalid JSON")
            return []

        if not isinstance(payload, list):
            logger.warning(
                "Discarding persisted wishlist: not an array",
                extra={"payload_type": type(payload).__name__},
            )
            return []

        try:
            return [Car.from_snapshot(snapshot) for snapshot in payload]
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning(
                "Discarding persisted wishlist: unreadable entry",
                extra={"reason": str(exc)},
            )
            return []
