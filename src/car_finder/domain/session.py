from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from car_finder.domain.car import Car


FETCH_ERROR_MESSAGE = "Failed to fetch car data. Please try again later."


class SessionStatus(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class CatalogSession:
    """
    Browsing session state.

    Starts in LOADING; a single catalog load moves it to READY (catalog
    populated) or ERROR (catalog empty, message set). Both are terminal.
    """

    status: SessionStatus = SessionStatus.LOADING
    catalog: list[Car] = field(default_factory=list)
    error_message: str | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is SessionStatus.LOADING

    def mark_ready(self, cars: list[Car]) -> None:
        self.catalog = list(cars)
        self.error_message = None
        self.status = SessionStatus.READY

    def mark_failed(self, message: str = FETCH_ERROR_MESSAGE) -> None:
        self.catalog = []
        self.error_message = message
        self.status = SessionStatus.ERROR

    def find_car(self, car_id: int | str) -> Car | None:
        """Look up a catalog car by id. Ids coming from URLs are compared as text."""
        wanted = str(car_id)
        for car in self.catalog:
            if str(car.id) == wanted:
                return car
        return None
