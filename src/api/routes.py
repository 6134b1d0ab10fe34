"""POST /scrape endpoint handler."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.api.schemas import ScrapeRequest, ScrapeResponse
from src.scrape.errors import EngineError, ScrapeValidationError
from src.scrape.orchestrator import Scraper

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_scraper(request: Request) -> Scraper:
    return request.app.state.scraper


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 rather than FastAPI's 422."""
    logger.info(
        "rejected invalid request",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@router.post(
    "/scrape",
    response_model=ScrapeResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Invalid URL or no output requested"},
        500: {"description": "Browser engine or unexpected failure"},
    },
)
async def scrape_page(
    body: ScrapeRequest,
    scraper: Scraper = Depends(_get_scraper),
):
    """Load ``body.url`` in a headless browser and return the requested outputs.

    Outputs are the served HTML, the rendered HTML, and the JSON and XML
    responses the page received, each with its request's Authorization header.
    """
    try:
        return await scraper.run(body)
    except ScrapeValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except EngineError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        )
    except Exception as exc:
        logger.exception("unexpected scrape failure", extra={"url": body.url})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An unexpected error occurred: {exc}",
        )
