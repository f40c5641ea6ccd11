from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from cars_api.core.config import Settings, get_settings
from cars_api.core.logging import setup_logging
from cars_api.repositories.base import CorruptStorageError
from cars_api.repositories.json_storage import JSONCarStorage
from cars_api.routers import cars as cars_router
from cars_api.services.car_service import CarService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and load the backing file.

    CorruptStorageError propagates: the service must not start on top of a
    data file it cannot understand.
    """
    settings = settings or get_settings()
    app = FastAPI(title="Cars API")
    app.state.settings = settings
    app.state.car_service = CarService.from_storage(JSONCarStorage(settings.data_file))
    app.include_router(cars_router.router)
    return app


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    try:
        app = create_app(settings)
    except CorruptStorageError as exc:
        logger.critical("Cannot load %s: %s", settings.data_file, exc)
        sys.exit(1)
    logger.info("Server listening on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
