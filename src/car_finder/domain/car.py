from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from car_finder.domain.errors import ValidationError


DEFAULT_SEATS = "5 (est.)"
PLACEHOLDER_IMAGE = "https://dummyimage.com/300x200/ccc/000.jpg&text=No+Image"

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 200


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


# ==============================================================================
# Loose value parsing
# ==============================================================================


def parse_number(value: Any) -> int | float | None:
    """
    Parse a loosely-typed number.

    Listing sources deliver numbers either as JSON numbers or as numeric
    strings. The whole string must be numeric: trailing text such as
    "20000 USD" is not read as a prefix. Anything that cannot be read as a
    number (None, bools, NaN, free text) yields None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if not isinstance(value, str):
        return None

    text = value.strip()
    # Python digit separators ("1_000") are not numbers in the listing data
    if "_" in text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return None if math.isnan(number) else number


def parse_price(value: Any) -> float | None:
    """Parse a price for comparison; None means "no usable price"."""
    number = parse_number(value)
    return None if number is None else float(number)


def parse_int(value: Any) -> int | None:
    number = parse_number(value)
    if number is None or isinstance(number, float) and not number.is_integer():
        return None
    return int(number)


def optional_text(value: Any) -> str | None:
    return None if value is None else str(value)


# ==============================================================================
# Entities and value objects
# ==============================================================================


@dataclass(frozen=True)
class Car:
    id: int | str
    brand: str
    name: str
    year: int | None = None
    color: str | None = None
    mileage: int | float | None = None
    price: Any = None  # raw value from the source, see parse_price()
    fuel: str | None = None
    transmission: str | None = None
    engine: str | None = None
    horsepower: int | float | None = None
    features: tuple[str, ...] = ()
    owners: int | None = None
    image: str | None = None
    seats: str = DEFAULT_SEATS

    @property
    def numeric_price(self) -> float | None:
        return parse_price(self.price)

    @property
    def display_image(self) -> str:
        return self.image or PLACEHOLDER_IMAGE

    def to_snapshot(self) -> dict[str, Any]:
        """JSON-ready snapshot used to persist wishlist entries."""
        return {
            "id": self.id,
            "brand": self.brand,
            "name": self.name,
            "year": self.year,
            "color": self.color,
            "mileage": self.mileage,
            "price": self.price,
            "fuel": self.fuel,
            "transmission": self.transmission,
            "engine": self.engine,
            "horsepower": self.horsepower,
            "features": list(self.features),
            "owners": self.owners,
            "image": self.image,
            "seats": self.seats,
        }

    @classmethod
    def from_snapshot(cls, snapshot: Mapping[str, Any]) -> Car:
        """
        Rebuild a Car from a persisted snapshot.

        Raises:
            TypeError: If the snapshot is not a mapping or has wrong field types
            KeyError: If the snapshot has no id
        """
        if not isinstance(snapshot, Mapping):
            raise TypeError(f"snapshot must be a mapping, got {type(snapshot).__name__}")

        car_id = snapshot["id"]
        if not isinstance(car_id, (int, str)) or isinstance(car_id, bool):
            raise TypeError("snapshot id must be an int or a string")

        features = snapshot.get("features") or []
        if not isinstance(features, list):
            raise TypeError("snapshot features must be a list")

        return cls(
            id=car_id,
            brand=str(snapshot.get("brand") or ""),
            name=str(snapshot.get("name") or ""),
            year=parse_int(snapshot.get("year")),
            color=optional_text(snapshot.get("color")),
            mileage=parse_number(snapshot.get("mileage")),
            price=snapshot.get("price"),
            fuel=optional_text(snapshot.get("fuel")),
            transmission=optional_text(snapshot.get("transmission")),
            engine=optional_text(snapshot.get("engine")),
            horsepower=parse_number(snapshot.get("horsepower")),
            features=tuple(str(feature) for feature in features),
            owners=parse_int(snapshot.get("owners")),
            image=optional_text(snapshot.get("image")),
            seats=str(snapshot.get("seats") or DEFAULT_SEATS),
        )


def _blank_to_none(value: Any) -> str | None:
    # Only a missing or empty option is "no constraint"; text is matched as given
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Active catalog constraints (AND semantics).

    None means "no constraint" for every field. The free-text search on the
    model name is not part of the criteria; it travels next to them.
    """

    brand: str | None = None
    fuel: str | None = None
    seats: str | None = None
    min_price: float | None = None
    max_price: float | None = None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> FilterCriteria:
        """
        Build criteria from loosely-typed filter options.

        Accepts both ``minPrice`` and ``min_price`` spellings. Unknown keys,
        empty values and unparseable price bounds are ignored.
        """
        min_price = options.get("min_price", options.get("minPrice"))
        max_price = options.get("max_price", options.get("maxPrice"))

        return cls(
            brand=_blank_to_none(options.get("brand")),
            fuel=_blank_to_none(options.get("fuel")),
            seats=_blank_to_none(options.get("seats")),
            min_price=parse_price(min_price),
            max_price=parse_price(max_price),
        )

    @property
    def is_empty(self) -> bool:
        return (
            not self.brand
            and not self.fuel
            and not self.seats
            and self.min_price is None
            and self.max_price is None
        )


class SortKey(str, Enum):
    NONE = "none"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"

    @classmethod
    def parse(cls, value: str | None) -> SortKey:
        """
        Read a sort key, including the legacy ``low``/``high`` values.

        Unknown values are a no-op and fall back to NONE.
        """
        if not value:
            return cls.NONE
        aliases = {"low": cls.PRICE_ASC, "high": cls.PRICE_DESC}
        normalized = value.strip().lower()
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            return cls.NONE


@dataclass(frozen=True, slots=True)
class Paging:
    page_index: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def offset(self) -> int:
        return (self.page_index - 1) * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page_index < 1:
            raise PagingValidationError("page_index must be >= 1")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
        if self.page_size > MAX_PAGE_SIZE:
            raise PagingValidationError(f"page_size must be <= {MAX_PAGE_SIZE}")


@dataclass(frozen=True, slots=True)
class CatalogPage:
    cars: list[Car] = field(default_factory=list)
    page_index: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    total_count: int = 0  # Filtered cars before paging
    page_count: int = 0
