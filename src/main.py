"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from src.api.routes import request_validation_handler, router
from src.config import get_settings
from src.logging_config import setup_logging
from src.scrape.orchestrator import Scraper

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level, settings.service_name)
    logger.info("starting scrape service")

    # Sessions are opened per request; nothing browser-side lives here
    app.state.settings = settings
    app.state.scraper = Scraper(settings)

    logger.info(
        "scrape service ready",
        extra={
            "browser_type": settings.browser_type,
            "headless": settings.headless,
            "navigation_timeout_ms": settings.navigation_timeout_ms,
        },
    )

    yield

    logger.info("shutting down scrape service")


app = FastAPI(title="Scrape Service", lifespan=lifespan)
app.include_router(router)
app.add_exception_handler(RequestValidationError, request_validation_handler)


@app.get("/health")
async def health():
    return {"status": "ok"}
