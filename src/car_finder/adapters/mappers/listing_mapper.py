from __future__ import annotations

import logging
from typing import Any, Mapping

from car_finder.domain.car import DEFAULT_SEATS, Car, optional_text, parse_int, parse_number
from car_finder.domain.errors import MalformedCatalogError

logger = logging.getLogger(__name__)


class ListingMapper:
    """Maps raw listing source records to domain Car entities."""

    @staticmethod
    def to_domain_catalog(payload: Any) -> list[Car]:
        """
        Converts a listing payload to a normalized catalog.

        Record-level problems are local: records that are not objects, lack an
        id, or repeat an id already seen are skipped and logged. Source order
        is preserved.

        Args:
            payload: Decoded JSON payload from the listing source

        Returns:
            list[Car]: Normalized catalog with unique ids

        Raises:
            MalformedCatalogError: If the payload is not an array
        """
        if not isinstance(payload, list):
            raise MalformedCatalogError(
                "Listing source did not return an array",
                payload_type=type(payload).__name__,
            )

        cars: list[Car] = []
        seen_ids: set[str] = set()

        for position, record in enumerate(payload):
            car = ListingMapper.to_domain_car(record)
            if car is None:
                logger.warning(
                    "Skipping unusable listing record",
                    extra={"position": position},
                )
                continue

            # Keyed rendering and wishlist membership rely on unique ids
            key = str(car.id)
            if key in seen_ids:
                logger.warning(
                    "Skipping listing record with duplicate id",
                    extra={"position": position, "car_id": car.id},
                )
                continue

            seen_ids.add(key)
            cars.append(car)

        return cars

    @staticmethod
    def to_domain_car(record: Any) -> Car | None:
        """
        Converts one source record to a Car.

        Source ``make``/``model``/``fuelType`` become ``brand``/``name``/``fuel``.
        Seats are never read from the source: every car gets the fixed
        DEFAULT_SEATS placeholder.

        Args:
            record: Raw source record

        Returns:
            Car, or None if the record is not a mapping or has no id
        """
        if not isinstance(record, Mapping):
            return None

        car_id = record.get("id")
        if isinstance(car_id, bool) or not isinstance(car_id, (int, str)):
            return None

        return Car(
            id=car_id,
            brand=optional_text(record.get("make")) or "",
            name=optional_text(record.get("model")) or "",
            year=parse_int(record.get("year")),
            color=optional_text(record.get("color")),
            mileage=parse_number(record.get("mileage")),
            price=record.get("price"),
            fuel=optional_text(record.get("fuelType")),
            transmission=optional_text(record.get("transmission")),
            engine=optional_text(record.get("engine")),
            horsepower=parse_number(record.get("horsepower")),
            features=_features(record.get("features")),
            owners=parse_int(record.get("owners")),
            image=optional_text(record.get("image")),
            seats=DEFAULT_SEATS,
        )


def _features(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(feature) for feature in value)
