from __future__ import annotations

from dataclasses import dataclass, field

from car_finder.domain.car import CatalogPage, FilterCriteria, Paging, SortKey
from car_finder.domain.catalog import derive_view
from car_finder.domain.session import CatalogSession, SessionStatus


@dataclass(frozen=True, slots=True)
class BrowseCatalogRequest:
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    search: str = ""
    sort_key: SortKey = SortKey.NONE
    paging: Paging = field(default_factory=Paging)


@dataclass(frozen=True, slots=True)
class BrowseCatalogResponse:
    page: CatalogPage
    status: SessionStatus
    error_message: str | None = None


class BrowseCatalog:
    """
    Catalog browsing with filters, search, sort and pagination.

    Validates paging, then runs the pure derive_view pipeline over the
    session catalog. While the session is LOADING or in ERROR the page is
    empty and the status tells the caller why.
    """

    def __init__(self, session: CatalogSession) -> None:
        self._session = session

    def execute(self, request: BrowseCatalogRequest) -> BrowseCatalogResponse:
        """
        Execute catalog browsing.

        Args:
            request: Criteria, search text, sort key and paging

        Returns:
            Response with the requested page and the session status

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        request.paging.validate()

        page = derive_view(
            catalog=self._session.catalog,
            criteria=request.criteria,
            search=request.search,
            sort_key=request.sort_key,
            paging=request.paging,
        )

        return BrowseCatalogResponse(
            page=page,
            status=self._session.status,
            error_message=self._session.error_message,
        )
