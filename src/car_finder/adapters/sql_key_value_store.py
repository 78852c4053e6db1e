"""SQLAlchemy implementation of KeyValueStore."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Callable

from sqlalchemy import select
from sqlalchemy.orm import Session

from car_finder.infra.db.models.preference import PreferenceRow
from car_finder.infra.db.session import get_session
from car_finder.ports.key_value_store import KeyValueStore

SessionFactory = Callable[[], AbstractContextManager[Session]]


class SqlKeyValueStore(KeyValueStore):
    """
    Relational implementation of KeyValueStore.

    - One row per key in the ``preferences`` table
    - Every call runs in its own short session (commit on success)
    - set() upserts via Session.merge, so it is durable once it returns
    """

    def __init__(self, session_factory: SessionFactory = get_session) -> None:
        """
        Initialize store with a session factory.

        Args:
            session_factory: Callable returning a session context manager
                that commits on exit (defaults to infra get_session)
        """
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            query = select(PreferenceRow.value).where(PreferenceRow.key == key)
            return session.execute(query).scalar_one_or_none()

    def set(self, key: str, value: str) -> None:
        with self._session_factory() as session:
            session.merge(PreferenceRow(key=key, value=value))
