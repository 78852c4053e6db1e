"""Run the Car Finder API with uvicorn: ``python -m car_finder`` or ``car-finder``."""

from __future__ import annotations

import uvicorn

from car_finder.entrypoints.http.app import build_app
from car_finder.infra.config import Settings


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(
        build_app(settings=settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
