from fastapi import APIRouter, Depends

from car_finder.entrypoints.http.dependencies import (
    get_toggle_wishlist_entry_use_case,
    get_wishlist,
)
from car_finder.entrypoints.http.dtos.wishlist import (
    WishlistResponseDTO,
    WishlistToggleResponseDTO,
)
from car_finder.entrypoints.http.mappers.wishlist_mapper import WishlistMapper
from car_finder.use_cases.toggle_wishlist_entry import (
    ToggleWishlistEntry,
    ToggleWishlistEntryRequest,
)
from car_finder.use_cases.wishlist_store import WishlistStore


router = APIRouter(tags=["Wishlist"])


@router.get(
    "/wishlist",
    response_model=WishlistResponseDTO,
    summary="List wishlist",
    description="Saved car snapshots in the order they were added.",
)
def get_wishlist_entries(
    wishlist: WishlistStore = Depends(get_wishlist),
) -> WishlistResponseDTO:
    return WishlistMapper.to_response(wishlist.entries())


@router.post(
    "/wishlist/{car_id}/toggle",
    response_model=WishlistToggleResponseDTO,
    summary="Toggle wishlist entry",
    description="""
    Add the car to the wishlist, or remove it if it is already saved.

    The id is resolved against the catalog first, then against the wishlist,
    so a saved car that is no longer listed can still be removed.
    The updated wishlist is persisted before the response is sent.
    """,
    responses={
        404: {
            "description": "Car not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Car with identifier '999' not found",
                        "code": "NOT_FOUND",
                    }
                }
            },
        },
    },
)
def toggle_wishlist_entry(
    car_id: str,
    use_case: ToggleWishlistEntry = Depends(get_toggle_wishlist_entry_use_case),
) -> WishlistToggleResponseDTO:
    result = use_case.execute(ToggleWishlistEntryRequest(car_id=car_id))
    return WishlistMapper.to_toggle_response(result)
