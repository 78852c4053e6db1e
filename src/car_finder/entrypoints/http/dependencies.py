"""
Dependency injection for FastAPI routes.

Key principle: session state, wishlist and theme are application-wide
singletons created in the app lifespan and kept on ``app.state``. Use cases
are cheap and built per request around them.
"""

from __future__ import annotations

from fastapi import Depends, Request

from car_finder.domain.session import CatalogSession
from car_finder.infra.config import Settings
from car_finder.use_cases.browse_catalog import BrowseCatalog
from car_finder.use_cases.theme_preference import ThemePreference
from car_finder.use_cases.toggle_wishlist_entry import ToggleWishlistEntry
from car_finder.use_cases.wishlist_store import WishlistStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog_session(request: Request) -> CatalogSession:
    """
    Provides the application's catalog session.

    Args:
        request: Incoming request (gives access to app.state)

    Returns:
        CatalogSession: The single session populated by the startup load
    """
    return request.app.state.catalog_session


def get_wishlist(request: Request) -> WishlistStore:
    return request.app.state.wishlist


def get_theme_preference(request: Request) -> ThemePreference:
    return request.app.state.theme


def get_browse_catalog_use_case(
    session: CatalogSession = Depends(get_catalog_session),
) -> BrowseCatalog:
    """
    Factory function that returns a configured BrowseCatalog use case.

    Args:
        session: Catalog session (injected by FastAPI)

    Returns:
        BrowseCatalog: Configured use case instance
    """
    return BrowseCatalog(session=session)


def get_toggle_wishlist_entry_use_case(
    session: CatalogSession = Depends(get_catalog_session),
    wishlist: WishlistStore = Depends(get_wishlist),
) -> ToggleWishlistEntry:
    """
    Factory function that returns a configured ToggleWishlistEntry use case.

    Args:
        session: Catalog session (injected by FastAPI)
        wishlist: Application wishlist (injected by FastAPI)

    Returns:
        ToggleWishlistEntry: Configured use case instance
    """
    return ToggleWishlistEntry(session=session, wishlist=wishlist)
