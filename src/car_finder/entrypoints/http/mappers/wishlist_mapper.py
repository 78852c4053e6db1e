from __future__ import annotations

from car_finder.domain.car import Car
from car_finder.entrypoints.http.dtos.wishlist import (
    WishlistResponseDTO,
    WishlistToggleResponseDTO,
)
from car_finder.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from car_finder.use_cases.toggle_wishlist_entry import ToggleWishlistEntryResponse


class WishlistMapper:
    """Maps wishlist domain state to REST DTOs."""

    @staticmethod
    def to_response(entries: list[Car]) -> WishlistResponseDTO:
        return WishlistResponseDTO(
            cars=[CatalogMapper.to_car_response(car, wishlisted=True) for car in entries],
            count=len(entries),
        )

    @staticmethod
    def to_toggle_response(result: ToggleWishlistEntryResponse) -> WishlistToggleResponseDTO:
        return WishlistToggleResponseDTO(
            car_id=result.car.id,
            wishlisted=result.wishlisted,
            cars=[CatalogMapper.to_car_response(car, wishlisted=True) for car in result.entries],
            count=len(result.entries),
        )
