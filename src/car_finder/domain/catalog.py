"""
Catalog browsing engine: filter, sort and paginate a normalized catalog.

Every function here is pure. The same inputs always produce the same output,
so the whole pipeline can be recomputed whenever the catalog, the criteria,
the search text, the sort key or the page change.
"""

from __future__ import annotations

import math
from typing import Sequence

from car_finder.domain.car import Car, CatalogPage, FilterCriteria, Paging, SortKey


def apply_filters(
    catalog: Sequence[Car],
    criteria: FilterCriteria,
    search: str = "",
) -> list[Car]:
    """
    Return the cars matching every active criterion and the search text.

    Catalog order is preserved.
    """
    needle = (search or "").lower()
    return [car for car in catalog if _matches(car, criteria, needle)]


def _matches(car: Car, criteria: FilterCriteria, search: str) -> bool:
    if criteria.brand and criteria.brand.lower() not in (car.brand or "").lower():
        return False
    if criteria.fuel and (car.fuel or "").lower() != criteria.fuel.lower():
        return False
    # Every normalized car carries the same seats placeholder
    if criteria.seats and car.seats != criteria.seats:
        return False

    if criteria.min_price is not None or criteria.max_price is not None:
        price = car.numeric_price
        if price is None:
            return False
        if criteria.min_price is not None and price < criteria.min_price:
            return False
        if criteria.max_price is not None and price > criteria.max_price:
            return False

    if search and search not in (car.name or "").lower():
        return False
    return True


def sort_cars(cars: Sequence[Car], key: SortKey) -> list[Car]:
    """
    Order cars by parsed price.

    Stable for equal prices. Cars without a usable price keep their relative
    order and come after every priced car, whatever the direction.
    """
    if key is SortKey.NONE:
        return list(cars)

    priced = [car for car in cars if car.numeric_price is not None]
    unpriced = [car for car in cars if car.numeric_price is None]

    ordered = sorted(
        priced,
        key=lambda car: car.numeric_price,
        reverse=key is SortKey.PRICE_DESC,
    )
    return ordered + unpriced


def page_count(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total > 0 else 0


def paginate(cars: Sequence[Car], paging: Paging) -> list[Car]:
    """Slice one page out of cars. Out-of-range pages are empty, not an error."""
    start = paging.offset
    end = start + paging.page_size
    return list(cars[start:end])


def derive_view(
    catalog: Sequence[Car],
    criteria: FilterCriteria,
    search: str,
    sort_key: SortKey,
    paging: Paging,
) -> CatalogPage:
    """
    Run the full browsing pipeline: filter, then sort, then paginate.

    The page index is taken as given. When the filtered set shrinks below the
    requested page, the returned page is empty.
    """
    filtered = apply_filters(catalog, criteria, search)
    ordered = sort_cars(filtered, sort_key)

    return CatalogPage(
        cars=paginate(ordered, paging),
        page_index=paging.page_index,
        page_size=paging.page_size,
        total_count=len(ordered),
        page_count=page_count(len(ordered), paging.page_size),
    )
