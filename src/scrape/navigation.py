"""Page navigation with a bounded network-idle wait."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

logger = logging.getLogger(__name__)

NAVIGATION_TIMEOUT_MS = 60_000
NAVIGATION_TIMEOUT_MESSAGE = "Navigation timed out before response."


@dataclass
class NavigationOutcome:
    """What a navigation produced: a response, or a recorded timeout."""

    response: Any = None
    error: str | None = None

    @property
    def timed_out(self) -> bool:
        return self.error is not None


async def navigate(
    page: Any,
    url: str,
    *,
    timeout_ms: int = NAVIGATION_TIMEOUT_MS,
    wait_until: str = "networkidle",
) -> NavigationOutcome:
    """Navigate *page* to *url* and wait for network idle or the timeout.

    A timeout is not fatal: it is returned as an outcome with no response so
    later stages can still read whatever the page rendered. Any other engine
    error propagates.
    """
    try:
        response = await page.goto(url, wait_until=wait_until, timeout=timeout_ms)
    except PlaywrightTimeoutError:
        logger.warning(
            "navigation timed out",
            extra={"url": url, "timeout_ms": timeout_ms, "wait_until": wait_until},
        )
        return NavigationOutcome(error=NAVIGATION_TIMEOUT_MESSAGE)

    logger.debug(
        "navigation settled",
        extra={"url": url, "status": getattr(response, "status", None)},
    )
    return NavigationOutcome(response=response)
