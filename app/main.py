from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI

from app.api.routers.connectors import router as connectors_router
from app.shared.config import Settings, get_settings

logger = logging.getLogger(__name__)

API_TITLE = "Goemon Adapter"
API_DESCRIPTION = "API endpoints for interacting with various trading protocols and DEX"
API_VERSION = "1.0.0"


def create_app() -> FastAPI:
    application = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=API_VERSION,
    )
    application.include_router(connectors_router, prefix="/connectors")
    return application


app = create_app()


def start_server(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    )

    logger.info("main: server_starting host=%s port=%s", settings.host, settings.port)
    try:
        server.run()
    except (OSError, SystemExit) as exc:
        logger.error("main: server_start_failed host=%s port=%s error=%s", settings.host, settings.port, exc)
        sys.exit(1)

    if not server.started:
        logger.error("main: server_start_failed host=%s port=%s", settings.host, settings.port)
        sys.exit(1)


def main() -> None:
    settings = get_settings()
    if not settings.start_server:
        return
    start_server(settings)


if __name__ == "__main__":
    main()
