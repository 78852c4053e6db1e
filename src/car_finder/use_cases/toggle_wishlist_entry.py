"""Toggle wishlist entry use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_finder.domain.car import Car
from car_finder.domain.errors import NotFoundError
from car_finder.domain.session import CatalogSession
from car_finder.use_cases.wishlist_store import WishlistStore


@dataclass(frozen=True, slots=True)
class ToggleWishlistEntryRequest:
    """Request to add or remove a car from the wishlist."""

    car_id: str


@dataclass(frozen=True, slots=True)
class ToggleWishlistEntryResponse:
    """Response containing the car's new membership and the full wishlist."""

    car: Car
    wishlisted: bool
    entries: list[Car]


class ToggleWishlistEntry:
    """
    Use case for toggling a car in the wishlist.

    Responsibilities:
    - Resolve the car id against the catalog, then against the wishlist itself
      (so a saved car that left the catalog can still be removed)
    - Delegate membership and persistence to the WishlistStore
    - Raise NotFoundError if the id is unknown to both
    """

    def __init__(self, session: CatalogSession, wishlist: WishlistStore) -> None:
        """
        Initialize use case with dependencies.

        Args:
            session: Current catalog session
            wishlist: Persisted wishlist
        """
        self._session = session
        self._wishlist = wishlist

    def execute(self, request: ToggleWishlistEntryRequest) -> ToggleWishlistEntryResponse:
        """
        Execute the toggle.

        Args:
            request: Request containing car_id

        Returns:
            ToggleWishlistEntryResponse with the new membership state

        Raises:
            NotFoundError: If no catalog car or wishlist entry has that id
        """
        car = self._session.find_car(request.car_id) or self._wishlist.find(request.car_id)

        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        entries = self._wishlist.toggle(car)

        return ToggleWishlistEntryResponse(
            car=car,
            wishlisted=any(str(entry.id) == str(car.id) for entry in entries),
            entries=entries,
        )
