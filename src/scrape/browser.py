"""Playwright session lifecycle: one isolated browser per scrape."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, Mapping

from playwright.async_api import Page, async_playwright

logger = logging.getLogger(__name__)

# Zero-arg callable returning an async context manager that yields a page.
SessionFactory = Callable[[], AsyncContextManager[Any]]


@asynccontextmanager
async def open_browser_session(
    browser_type: str = "chromium", headless: bool = True
) -> AsyncIterator[Page]:
    """Launch a fresh engine, browser, isolated context and page.

    Everything is closed in reverse order when the block exits, whether it
    returns or raises.
    """
    async with AsyncExitStack() as stack:
        playwright = await stack.enter_async_context(async_playwright())
        launcher = getattr(playwright, browser_type)
        browser = await launcher.launch(headless=headless)
        stack.push_async_callback(browser.close)
        context = await browser.new_context()
        stack.push_async_callback(context.close)
        page = await context.new_page()
        stack.push_async_callback(page.close)
        logger.debug(
            "browser session opened",
            extra={"browser_type": browser_type, "headless": headless},
        )
        yield page
        logger.debug("browser session closing", extra={"browser_type": browser_type})


def header_value(headers: Mapping[str, str], name: str) -> str | None:
    """Case-insensitive header lookup. Returns ``None`` when absent."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def is_ok_status(status: int) -> bool:
    """2xx and 3xx responses count as ok."""
    return 200 <= status < 400
