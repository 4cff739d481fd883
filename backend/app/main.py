from __future__ import annotations

import logging
import random
import time

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.config.settings import Settings, load_settings
from app.scanning.scanner import Scanner
from app.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, rng: random.Random | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title=settings.service_name, version=settings.version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.scanner = Scanner(settings, rng=rng)
    app.state.started_at = time.monotonic()
    app.include_router(router, prefix=settings.api_prefix)
    return app


def _log_banner(settings: Settings) -> None:
    prefix = settings.api_prefix
    providers = settings.providers
    logger.info("%s %s listening on %s:%s", settings.service_name, settings.version, settings.host, settings.port)
    logger.info("Endpoints: POST %s/scan, GET %s/stock/{symbol}, GET %s/health", prefix, prefix, prefix)
    logger.info(
        "Providers: twelvedata=%s newsdata=%s",
        "configured" if providers.twelvedata_api_key else "missing key (simulated prices)",
        "configured" if providers.newsdata_api_key else "missing key (no news)",
    )


def run() -> None:
    settings = load_settings()
    configure_logging(settings)
    _log_banner(settings)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
