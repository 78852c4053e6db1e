"""
Unit tests for FastAPI dependency injection functions.

- State providers read the lifespan singletons from app.state
- Use case factories wire those singletons into fresh use case instances
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from car_finder.adapters.in_memory_key_value_store import InMemoryKeyValueStore
from car_finder.domain.session import CatalogSession
from car_finder.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_catalog_session,
    get_settings,
    get_theme_preference,
    get_toggle_wishlist_entry_use_case,
    get_wishlist,
)
from car_finder.infra.config import Settings
from car_finder.use_cases.browse_catalog import BrowseCatalog
from car_finder.use_cases.theme_preference import ThemePreference
from car_finder.use_cases.toggle_wishlist_entry import ToggleWishlistEntry
from car_finder.use_cases.wishlist_store import WishlistStore


@pytest.fixture()
def state() -> SimpleNamespace:
    store = InMemoryKeyValueStore()
    return SimpleNamespace(
        settings=Settings(),
        catalog_session=CatalogSession(),
        wishlist=WishlistStore(store),
        theme=ThemePreference(store),
    )


@pytest.fixture()
def request_stub(state: SimpleNamespace) -> SimpleNamespace:
    """Minimal stand-in for fastapi.Request: only app.state is read."""
    return SimpleNamespace(app=SimpleNamespace(state=state))


# ==============================================================================
# app.state providers
# ==============================================================================


def test_state_providers_return_app_singletons(
    request_stub: SimpleNamespace, state: SimpleNamespace
) -> None:
    assert get_settings(request_stub) is state.settings
    assert get_catalog_session(request_stub) is state.catalog_session
    assert get_wishlist(request_stub) is state.wishlist
    assert get_theme_preference(request_stub) is state.theme


def test_state_providers_are_stable_across_calls(request_stub: SimpleNamespace) -> None:
    assert get_catalog_session(request_stub) is get_catalog_session(request_stub)
    assert get_wishlist(request_stub) is get_wishlist(request_stub)


# ==============================================================================
# Use case factories
# ==============================================================================


def test_browse_catalog_factory_wires_session(state: SimpleNamespace) -> None:
    use_case = get_browse_catalog_use_case(session=state.catalog_session)

    assert isinstance(use_case, BrowseCatalog)
    assert use_case._session is state.catalog_session


def test_toggle_factory_wires_session_and_wishlist(state: SimpleNamespace) -> None:
    use_case = get_toggle_wishlist_entry_use_case(
        session=state.catalog_session, wishlist=state.wishlist
    )

    assert isinstance(use_case, ToggleWishlistEntry)
    assert use_case._session is state.catalog_session
    assert use_case._wishlist is state.wishlist


def test_factories_create_fresh_instances(state: SimpleNamespace) -> None:
    first = get_browse_catalog_use_case(session=state.catalog_session)
    second = get_browse_catalog_use_case(session=state.catalog_session)

    assert first is not second
