"""Application settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from car_finder.adapters.http_listing_source import DEFAULT_LISTINGS_URL, DEFAULT_TIMEOUT
from car_finder.domain.car import DEFAULT_PAGE_SIZE

STORE_BACKENDS = ("memory", "sql")


@dataclass(frozen=True, slots=True)
class Settings:
    listings_url: str = DEFAULT_LISTINGS_URL
    listings_timeout_seconds: int = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    store_backend: str = "memory"  # memory or sql
    database_url: str | None = None  # Required when store_backend=sql
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> Settings:
        store_backend = os.getenv("STORE_BACKEND", "memory").strip().lower()
        if store_backend not in STORE_BACKENDS:
            raise RuntimeError(
                f"STORE_BACKEND must be one of {', '.join(STORE_BACKENDS)}, got {store_backend!r}"
            )

        database_url = os.getenv("DATABASE_URL") or None
        if store_backend == "sql" and not database_url:
            raise RuntimeError("DATABASE_URL environment variable is not set")

        return cls(
            listings_url=os.getenv("LISTINGS_URL") or DEFAULT_LISTINGS_URL,
            listings_timeout_seconds=_int_env("LISTINGS_TIMEOUT_SECONDS", DEFAULT_TIMEOUT),
            page_size=_int_env("PAGE_SIZE", DEFAULT_PAGE_SIZE),
            store_backend=store_backend,
            database_url=database_url,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST") or "127.0.0.1",
            port=_int_env("PORT", 8000),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise RuntimeError(f"{name} must be > 0, got {value}")
    return value
