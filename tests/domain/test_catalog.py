"""
Test suite for the catalog browsing engine.

Test sections:
- Filter semantics (brand, fuel, seats, price bounds, search, AND)
- Sort semantics (stability, unpriced cars)
- Pagination (slicing, page count, coverage)
- derive_view pipeline
"""

from __future__ import annotations

import pytest

from car_finder.domain.car import Car, CatalogPage, FilterCriteria, Paging, SortKey
from car_finder.domain.catalog import (
    apply_filters,
    derive_view,
    page_count,
    paginate,
    sort_cars,
)


@pytest.fixture()
def scenario_catalog() -> list[Car]:
    return [
        Car(id=1, brand="Toyota", name="Corolla", price="20000"),
        Car(id=2, brand="Honda", name="Civic", price="22000"),
    ]


@pytest.fixture()
def cars() -> list[Car]:
    return [
        Car(id=1, brand="Toyota", name="Corolla", price="20000", fuel="Gasoline"),
        Car(id=2, brand="Honda", name="Civic", price=22000, fuel="Diesel"),
        Car(id=3, brand="Toyota", name="Camry", price="25000", fuel="Hybrid"),
        Car(id=4, brand="Tesla", name="Model 3", price=20000, fuel="Electric"),
        Car(id=5, brand="Ford", name="Mustang", price="call us", fuel=None),
        Car(id=6, brand="TOYOTA", name="corolla cross", price="31000.50", fuel="gasoline"),
    ]


def ids(cars: list[Car]) -> list[int | str]:
    return [car.id for car in cars]


# ==============================================================================
# Filter Engine
# ==============================================================================


def test_brand_substring_case_insensitive(scenario_catalog: list[Car]) -> None:
    result = apply_filters(scenario_catalog, FilterCriteria(brand="toy"), "")

    assert ids(result) == [1]


def test_brand_matches_any_position(cars: list[Car]) -> None:
    result = apply_filters(cars, FilterCriteria(brand="OTA"), "")

    assert ids(result) == [1, 3, 6]


def test_fuel_exact_case_insensitive(cars: list[Car]) -> None:
    result = apply_filters(cars, FilterCriteria(fuel="GASOLINE"), "")

    assert ids(result) == [1, 6]


def test_fuel_is_not_substring(cars: list[Car]) -> None:
    assert apply_filters(cars, FilterCriteria(fuel="gas"), "") == []


def test_fuel_missing_on_car_only_fails_when_criterion_set(cars: list[Car]) -> None:
    assert 5 in ids(apply_filters(cars, FilterCriteria(), ""))
    assert 5 not in ids(apply_filters(cars, FilterCriteria(fuel="Electric"), ""))


def test_seats_matches_placeholder_as_a_block(cars: list[Car]) -> None:
    assert ids(apply_filters(cars, FilterCriteria(seats="5 (est.)"), "")) == ids(cars)
    assert apply_filters(cars, FilterCriteria(seats="5"), "") == []


def test_padded_fuel_and_seats_do_not_match(cars: list[Car]) -> None:
    criteria = FilterCriteria.from_options({"fuel": " diesel "})
    assert apply_filters(cars, criteria, "") == []

    criteria = FilterCriteria.from_options({"seats": " 5 (est.) "})
    assert apply_filters(cars, criteria, "") == []

    assert ids(apply_filters(cars, FilterCriteria.from_options({"fuel": "diesel"}), "")) == [2]


def test_price_bounds_are_inclusive(cars: list[Car]) -> None:
    result = apply_filters(cars, FilterCriteria(min_price=20000, max_price=25000), "")

    assert ids(result) == [1, 2, 3, 4]


def test_min_price_only(cars: list[Car]) -> None:
    result = apply_filters(cars, FilterCriteria(min_price=25000), "")

    assert ids(result) == [3, 6]


def test_unparseable_price_fails_price_predicates(cars: list[Car]) -> None:
    assert 5 not in ids(apply_filters(cars, FilterCriteria(max_price=1_000_000), ""))
    assert 5 not in ids(apply_filters(cars, FilterCriteria(min_price=0), ""))


def test_price_bounds_property(cars: list[Car]) -> None:
    criteria = FilterCriteria(min_price=21000, max_price=31000.5)

    for car in apply_filters(cars, criteria, ""):
        assert car.numeric_price is not None
        assert criteria.min_price <= car.numeric_price <= criteria.max_price


def test_search_on_model_name_case_insensitive(cars: list[Car]) -> None:
    result = apply_filters(cars, FilterCriteria(), "COROLLA")

    assert ids(result) == [1, 6]


def test_search_does_not_look_at_brand(cars: list[Car]) -> None:
    assert apply_filters(cars, FilterCriteria(), "toyota") == []


def test_empty_criteria_and_search_match_everything(cars: list[Car]) -> None:
    assert apply_filters(cars, FilterCriteria(), "") == cars


def test_all_predicates_are_anded(cars: list[Car]) -> None:
    result = apply_filters(
        cars,
        FilterCriteria(brand="toyota", fuel="gasoline", max_price=30000),
        "corolla",
    )

    assert ids(result) == [1]


def test_filtering_is_idempotent(cars: list[Car]) -> None:
    criteria = FilterCriteria(brand="t", min_price=20000)

    once = apply_filters(cars, criteria, "o")
    twice = apply_filters(once, criteria, "o")

    assert twice == once


def test_filtering_does_not_mutate_catalog(cars: list[Car]) -> None:
    before = list(cars)

    apply_filters(cars, FilterCriteria(brand="honda"), "")

    assert cars == before


# ==============================================================================
# Sort Strategy
# ==============================================================================


def test_sort_price_descending_scenario(scenario_catalog: list[Car]) -> None:
    assert ids(sort_cars(scenario_catalog, SortKey.PRICE_DESC)) == [2, 1]


def test_sort_none_keeps_order(cars: list[Car]) -> None:
    assert sort_cars(cars, SortKey.NONE) == cars


def test_sort_ascending_is_stable_and_puts_unpriced_last(cars: list[Car]) -> None:
    # ids 1 and 4 share price 20000 and keep their input order
    assert ids(sort_cars(cars, SortKey.PRICE_ASC)) == [1, 4, 2, 3, 6, 5]


def test_sort_descending_is_stable_and_puts_unpriced_last(cars: list[Car]) -> None:
    assert ids(sort_cars(cars, SortKey.PRICE_DESC)) == [6, 3, 2, 1, 4, 5]


def test_sort_stability_follows_input_order() -> None:
    cars = [
        Car(id="b", brand="X", name="B", price=100),
        Car(id="a", brand="X", name="A", price="100"),
        Car(id="c", brand="X", name="C", price=50),
    ]

    assert ids(sort_cars(cars, SortKey.PRICE_ASC)) == ["c", "b", "a"]
    assert ids(sort_cars(cars, SortKey.PRICE_DESC)) == ["b", "a", "c"]


def test_sort_returns_new_list(cars: list[Car]) -> None:
    before = list(cars)

    sort_cars(cars, SortKey.PRICE_DESC)

    assert cars == before


# ==============================================================================
# Paginator
# ==============================================================================


def test_paginate_scenario(scenario_catalog: list[Car]) -> None:
    assert ids(paginate(scenario_catalog, Paging(page_index=2, page_size=1))) == [2]
    assert paginate(scenario_catalog, Paging(page_index=3, page_size=1)) == []


def test_paginate_partial_last_page(cars: list[Car]) -> None:
    assert ids(paginate(cars, Paging(page_index=2, page_size=4))) == [5, 6]


@pytest.mark.parametrize(
    ("total", "page_size", "expected"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (6, 4, 2), (2, 1, 2)],
)
def test_page_count(total: int, page_size: int, expected: int) -> None:
    assert page_count(total, page_size) == expected


@pytest.mark.parametrize("page_size", [1, 2, 4, 5, 6, 10])
def test_pages_cover_sequence_exactly_once(cars: list[Car], page_size: int) -> None:
    pages = page_count(len(cars), page_size)

    covered: list[Car] = []
    for index in range(1, pages + 1):
        covered.extend(paginate(cars, Paging(page_index=index, page_size=page_size)))

    assert covered == cars


# ==============================================================================
# derive_view pipeline
# ==============================================================================


def test_derive_view_filters_then_sorts_then_pages(cars: list[Car]) -> None:
    page = derive_view(
        catalog=cars,
        criteria=FilterCriteria(brand="toyota"),
        search="",
        sort_key=SortKey.PRICE_DESC,
        paging=Paging(page_index=1, page_size=2),
    )

    assert page == CatalogPage(
        cars=[cars[5], cars[2]],
        page_index=1,
        page_size=2,
        total_count=3,
        page_count=2,
    )


def test_derive_view_does_not_reset_page_when_results_shrink(cars: list[Car]) -> None:
    page = derive_view(
        catalog=cars,
        criteria=FilterCriteria(brand="honda"),
        search="",
        sort_key=SortKey.NONE,
        paging=Paging(page_index=3, page_size=2),
    )

    assert page.cars == []
    assert page.page_index == 3
    assert page.total_count == 1
    assert page.page_count == 1


def test_derive_view_is_deterministic(cars: list[Car]) -> None:
    arguments = dict(
        catalog=cars,
        criteria=FilterCriteria(max_price=26000),
        search="c",
        sort_key=SortKey.PRICE_ASC,
        paging=Paging(page_index=1, page_size=2),
    )

    assert derive_view(**arguments) == derive_view(**arguments)


def test_derive_view_on_empty_catalog() -> None:
    page = derive_view([], FilterCriteria(), "", SortKey.NONE, Paging())

    assert page.cars == []
    assert page.page_count == 0
    assert page.total_count == 0
