"""Passive network response interceptor.

Listens to page.on("response") and keeps every ok JSON / XML response the
page receives while it loads. No extra network requests are made; bodies are
read from the responses the page itself triggered.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from playwright.async_api import Error as PlaywrightError

from src.api.schemas import ScrapeDataItem
from src.scrape.browser import header_value, is_ok_status

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPES = ("application/xml", "text/xml")


class ResponseInterceptor:
    """Collect JSON and XML responses delivered on a page.

    Response events may be handled concurrently with each other and with the
    navigation itself, so every append to either list goes through one lock.
    """

    def __init__(self, *, capture_json: bool, capture_xml: bool) -> None:
        self._capture_json = capture_json
        self._capture_xml = capture_xml
        self._json_items: list[ScrapeDataItem] = []
        self._xml_items: list[ScrapeDataItem] = []
        self._lock = asyncio.Lock()
        self._page: Any = None

    def attach(self, page: Any) -> None:
        """Register the page.on('response') listener."""
        if self._page is not None:
            return
        page.on("response", self._on_response)
        self._page = page
        logger.debug(
            "interceptor attached",
            extra={"capture_json": self._capture_json, "capture_xml": self._capture_xml},
        )

    def detach(self) -> None:
        """Remove the listener. Items already collected are kept."""
        if self._page is None:
            return
        self._page.remove_listener("response", self._on_response)
        self._page = None
        logger.debug("interceptor detached")

    async def collect(self) -> tuple[list[ScrapeDataItem], list[ScrapeDataItem]]:
        """Return copies of the JSON and XML items captured so far."""
        async with self._lock:
            return list(self._json_items), list(self._xml_items)

    def match_content_type(self, content_type: str) -> str | None:
        """Return the content type an item should be tagged with, or ``None``."""
        content_type = content_type.lower()
        if self._capture_json and JSON_CONTENT_TYPE in content_type:
            return JSON_CONTENT_TYPE
        if self._capture_xml:
            for candidate in XML_CONTENT_TYPES:
                if candidate in content_type:
                    return candidate
        return None

    async def _on_response(self, response: Any) -> None:
        if not is_ok_status(response.status):
            return

        content_type = header_value(response.headers, "content-type") or ""
        matched = self.match_content_type(content_type)
        if matched is None:
            return

        request = response.request
        auth_header = await self._authorization(request)

        try:
            body = await response.text()
        except Exception as exc:
            logger.debug(
                "response body unreadable",
                extra={"request_url": request.url, "error": str(exc)},
            )
            item = ScrapeDataItem(
                content_type=matched,
                request_url=request.url,
                auth_header=auth_header,
                success=False,
                error_message=str(exc) or type(exc).__name__,
            )
        else:
            item = ScrapeDataItem(
                content_type=matched,
                request_url=request.url,
                auth_header=auth_header,
                response=body,
                success=True,
            )

        await self._append(item)

    async def _authorization(self, request: Any) -> str | None:
        # request.headers omits security headers; header_value() reads all of them
        try:
            return await request.header_value("authorization")
        except PlaywrightError as exc:
            logger.debug(
                "request headers unavailable",
                extra={"request_url": request.url, "error": str(exc)},
            )
            return None

    async def _append(self, item: ScrapeDataItem) -> None:
        async with self._lock:
            if item.content_type == JSON_CONTENT_TYPE:
                self._json_items.append(item)
            else:
                self._xml_items.append(item)
        logger.debug(
            "response captured",
            extra={
                "request_url": item.request_url,
                "content_type": item.content_type,
                "success": item.success,
            },
        )
