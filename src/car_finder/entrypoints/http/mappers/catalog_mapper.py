from __future__ import annotations

from car_finder.domain.car import Car, FilterCriteria, Paging, SortKey
from car_finder.domain.session import CatalogSession
from car_finder.entrypoints.http.dtos.catalog import (
    CarResponseDTO,
    CarsBrowseQueryDTO,
    CatalogPageResponseDTO,
    SessionResponseDTO,
)
from car_finder.use_cases.browse_catalog import BrowseCatalogRequest, BrowseCatalogResponse
from car_finder.use_cases.wishlist_store import WishlistStore


class CatalogMapper:
    """Maps between REST DTOs and domain models for catalog browsing."""

    @staticmethod
    def to_domain_criteria(dto: CarsBrowseQueryDTO) -> FilterCriteria:
        """
        Converts query params to domain filter criteria.

        Empty strings are dropped, so ``?brand=`` means "no brand filter".

        Args:
            dto: The data transfer object containing browse query parameters

        Returns:
            FilterCriteria: Domain criteria
        """
        return FilterCriteria.from_options(
            dto.model_dump(include={"brand", "fuel", "seats", "min_price", "max_price"})
        )

    @staticmethod
    def to_domain_paging(dto: CarsBrowseQueryDTO, default_page_size: int) -> Paging:
        """
        Converts pagination params to domain paging object.

        Args:
            dto: The data transfer object containing browse query parameters
            default_page_size: Page size used when the query omits one

        Returns:
            Paging: Domain paging object
        """
        return Paging(
            page_index=dto.page,
            page_size=dto.page_size or default_page_size,
        )

    @staticmethod
    def to_domain_request(dto: CarsBrowseQueryDTO, default_page_size: int) -> BrowseCatalogRequest:
        """
        Convenience method: builds complete domain request from DTO.

        Args:
            dto: The data transfer object containing browse query parameters
            default_page_size: Page size used when the query omits one

        Returns:
            BrowseCatalogRequest: Complete domain request
        """
        return BrowseCatalogRequest(
            criteria=CatalogMapper.to_domain_criteria(dto),
            search=dto.search,
            sort_key=SortKey.parse(dto.sort),
            paging=CatalogMapper.to_domain_paging(dto, default_page_size),
        )

    @staticmethod
    def to_car_response(car: Car, wishlisted: bool = False) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        The raw source price is parsed at the boundary; the image falls back
        to the placeholder.

        Args:
            car: Domain Car entity
            wishlisted: Whether the car is in the wishlist

        Returns:
            CarResponseDTO: REST response DTO
        """
        return CarResponseDTO(
            id=car.id,
            brand=car.brand,
            name=car.name,
            year=car.year,
            color=car.color,
            mileage=car.mileage,
            price=car.numeric_price,
            fuel=car.fuel,
            transmission=car.transmission,
            engine=car.engine,
            horsepower=car.horsepower,
            features=list(car.features),
            owners=car.owners,
            image=car.display_image,
            seats=car.seats,
            wishlisted=wishlisted,
        )

    @staticmethod
    def to_response(
        result: BrowseCatalogResponse,
        wishlist: WishlistStore,
    ) -> CatalogPageResponseDTO:
        """
        Converts domain browse result to REST response with pagination metadata.

        Args:
            result: Domain browse result containing the page and session status
            wishlist: Wishlist used to flag saved cars

        Returns:
            CatalogPageResponseDTO: REST response with cars and pagination metadata
        """
        page = result.page
        return CatalogPageResponseDTO(
            status=result.status.value,
            error=result.error_message,
            cars=[
                CatalogMapper.to_car_response(car, wishlisted=wishlist.is_wishlisted(car.id))
                for car in page.cars
            ],
            page=page.page_index,
            page_size=page.page_size,
            page_count=page.page_count,
            total=page.total_count,
        )

    @staticmethod
    def to_session_response(session: CatalogSession, dark_mode: bool) -> SessionResponseDTO:
        return SessionResponseDTO(
            status=session.status.value,
            error=session.error_message,
            catalog_size=len(session.catalog),
            dark_mode=dark_mode,
        )
