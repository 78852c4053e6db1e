from fastapi import APIRouter, Depends

from car_finder.domain.session import CatalogSession
from car_finder.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_catalog_session,
    get_settings,
    get_theme_preference,
    get_wishlist,
)
from car_finder.entrypoints.http.dtos.catalog import (
    CarsBrowseQueryDTO,
    CatalogPageResponseDTO,
    SessionResponseDTO,
)
from car_finder.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from car_finder.infra.config import Settings
from car_finder.use_cases.browse_catalog import BrowseCatalog
from car_finder.use_cases.theme_preference import ThemePreference
from car_finder.use_cases.wishlist_store import WishlistStore


router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CatalogPageResponseDTO,
    summary="Browse car catalog",
    description="""
    Browse the catalog with optional filters, search, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - brand: case-insensitive substring match
    - fuel: case-insensitive exact match
    - seats: exact text match
    - min_price/max_price: inclusive bounds; cars without a usable price never match

    ## Sorting
    - none (catalog order), price_asc, price_desc; equal prices keep catalog order

    ## Pagination
    - 1-based `page`; a page past the end is empty, not an error

    While the catalog is loading, or after the load failed, `cars` is empty
    and `status`/`error` say why.

    ## Example
    ```
    GET /v1/cars?brand=toy&sort=price_desc&page=1&page_size=10
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "status": "ready",
                        "error": None,
                        "cars": [
                            {
                                "id": 1,
                                "brand": "Toyota",
                                "name": "Corolla",
                                "year": 2021,
                                "price": 20000.0,
                                "fuel": "Gasoline",
                                "image": "https://example.com/corolla.jpg",
                                "seats": "5 (est.)",
                                "wishlisted": False,
                            }
                        ],
                        "page": 1,
                        "page_size": 10,
                        "page_count": 1,
                        "total": 1,
                    }
                }
            },
        },
        422: {
            "description": "Validation error",
            "content": {
                "application/json": {"example": {"detail": "Invalid request parameters"}}
            },
        },
    },
)
def get_cars(
    query: CarsBrowseQueryDTO = Depends(),
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
    wishlist: WishlistStore = Depends(get_wishlist),
    settings: Settings = Depends(get_settings),
) -> CatalogPageResponseDTO:
    """Browse cars endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CatalogMapper.to_domain_request(query, default_page_size=settings.page_size)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return CatalogMapper.to_response(result=result, wishlist=wishlist)


@router.get(
    "/session",
    response_model=SessionResponseDTO,
    summary="Session status",
    description="Catalog load status (loading, ready, error), catalog size and theme.",
)
def get_session_status(
    session: CatalogSession = Depends(get_catalog_session),
    theme: ThemePreference = Depends(get_theme_preference),
) -> SessionResponseDTO:
    return CatalogMapper.to_session_response(session, dark_mode=theme.dark_mode)
