"""Scrape orchestrator — session -> intercept -> navigate -> extract pipeline."""

from __future__ import annotations

import logging
from typing import Any

from playwright.async_api import Error as PlaywrightError

from src.api.schemas import ScrapeRequest, ScrapeResponse
from src.config import Settings
from src.scrape.aggregate import ScrapeAccumulator
from src.scrape.browser import SessionFactory, is_ok_status, open_browser_session
from src.scrape.errors import NO_OUTPUT_REQUESTED, EngineError, ScrapeValidationError
from src.scrape.interceptor import ResponseInterceptor
from src.scrape.navigation import NavigationOutcome, navigate

logger = logging.getLogger(__name__)


class Scraper:
    """Runs one scrape per call, each in its own isolated browser session."""

    def __init__(
        self, settings: Settings, session_factory: SessionFactory | None = None
    ) -> None:
        self._settings = settings
        self._session_factory = session_factory or self._default_session

    def _default_session(self):
        return open_browser_session(
            browser_type=self._settings.browser_type,
            headless=self._settings.headless,
        )

    async def run(self, request: ScrapeRequest) -> ScrapeResponse:
        """Scrape ``request.url`` and return the requested outputs.

        Raises ``ScrapeValidationError`` when no output is requested and
        ``EngineError`` when the browser fails at the session level. Other
        exceptions propagate unchanged.
        """
        if not request.wants_any_output:
            raise ScrapeValidationError(NO_OUTPUT_REQUESTED)

        logger.info(
            "scrape started",
            extra={
                "url": request.url,
                "source": request.return_source_document,
                "rendered": request.return_rendered_document,
                "json": request.return_json_data,
                "xml": request.return_xml_data,
            },
        )

        try:
            async with self._session_factory() as page:
                accumulator = await self._scrape(page, request)
        except PlaywrightError as exc:
            logger.exception("scrape failed in browser engine", extra={"url": request.url})
            raise EngineError(f"Scraping failed due to a Playwright error: {exc}") from exc

        if accumulator.errors:
            logger.warning(
                "scrape completed with stage errors",
                extra={"url": request.url, "stage_errors": accumulator.errors},
            )
        response = accumulator.build(request)
        logger.info(
            "scrape completed",
            extra={
                "url": request.url,
                "navigation_successful": response.navigation_successful,
                "json_items": len(accumulator.json_items),
                "xml_items": len(accumulator.xml_items),
            },
        )
        return response

    async def _scrape(self, page: Any, request: ScrapeRequest) -> ScrapeAccumulator:
        accumulator = ScrapeAccumulator()

        interceptor: ResponseInterceptor | None = None
        if request.wants_network_data:
            interceptor = ResponseInterceptor(
                capture_json=request.return_json_data,
                capture_xml=request.return_xml_data,
            )
            # Must be listening before goto() or early responses are lost
            interceptor.attach(page)

        try:
            outcome = await navigate(
                page,
                request.url,
                timeout_ms=self._settings.navigation_timeout_ms,
                wait_until=self._settings.navigation_wait_until,
            )
            if outcome.error:
                accumulator.record_error(outcome.error)

            if request.return_source_document:
                await self._read_source(outcome, accumulator)

            if request.return_rendered_document:
                await self._read_rendered(page, accumulator)

            if interceptor is not None:
                accumulator.json_items, accumulator.xml_items = await interceptor.collect()
        finally:
            if interceptor is not None:
                interceptor.detach()

        return accumulator

    async def _read_source(
        self, outcome: NavigationOutcome, accumulator: ScrapeAccumulator
    ) -> None:
        response = outcome.response
        if response is None:
            # A timeout has already been recorded by navigate()
            if not outcome.timed_out:
                accumulator.record_error("No navigation response received.")
            return
        if not is_ok_status(response.status):
            accumulator.record_error(
                f"Could not get source document, navigation status: {response.status}."
            )
            return
        try:
            accumulator.set_source(await response.text())
        except Exception as exc:
            logger.warning("source document unreadable", extra={"error": str(exc)})
            accumulator.record_error(f"Error getting source document: {exc}.")

    async def _read_rendered(self, page: Any, accumulator: ScrapeAccumulator) -> None:
        try:
            accumulator.set_rendered(await page.content())
        except Exception as exc:
            logger.warning("rendered document unreadable", extra={"error": str(exc)})
            accumulator.record_error(f"Error getting rendered document: {exc}.")
