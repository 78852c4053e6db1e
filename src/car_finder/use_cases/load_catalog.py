"""Load catalog use case."""

from __future__ import annotations

import logging

from car_finder.adapters.mappers.listing_mapper import ListingMapper
from car_finder.domain.errors import CatalogFetchError
from car_finder.domain.session import FETCH_ERROR_MESSAGE, CatalogSession
from car_finder.ports.listing_source import ListingSource

logger = logging.getLogger(__name__)


class LoadCatalog:
    """
    Use case for the one-time catalog load of a session.

    Responsibilities:
    - Fetch the raw payload from the listing source
    - Normalize it into Car entities
    - Move the session from LOADING to READY, or to ERROR on any fetch failure

    A session that already left LOADING is never fetched again, so a failed
    load stays failed for the rest of the session.
    """

    def __init__(self, listing_source: ListingSource) -> None:
        """
        Initialize use case with dependencies.

        Args:
            listing_source: Port to the remote listing source
        """
        self._listing_source = listing_source

    def execute(self, session: CatalogSession) -> CatalogSession:
        """
        Execute the catalog load.

        Args:
            session: Session to populate (must be LOADING)

        Returns:
            The same session, now READY or ERROR
        """
        if not session.is_loading:
            logger.warning(
                "Catalog load skipped, session already settled",
                extra={"status": session.status.value},
            )
            return session

        try:
            payload = self._listing_source.fetch()
            cars = ListingMapper.to_domain_catalog(payload)
        except CatalogFetchError as exc:
            logger.error(
                "Catalog load failed",
                extra={"error_code": exc.error_code, "reason": exc.message, "context": exc.context},
            )
            session.mark_failed(FETCH_ERROR_MESSAGE)
            return session
        except Exception:
            # Runs as a background task: nothing awaits it, so the session must settle here
            logger.exception("Catalog load crashed")
            session.mark_failed(FETCH_ERROR_MESSAGE)
            return session

        session.mark_ready(cars)
        logger.info("Catalog loaded", extra={"catalog_size": len(cars)})
        return session
