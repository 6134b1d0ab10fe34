"""Browser-driven scraping: session, response interception, navigation."""

from __future__ import annotations

from .aggregate import ScrapeAccumulator
from .browser import SessionFactory, open_browser_session
from .errors import EngineError, ScrapeError, ScrapeValidationError
from .interceptor import ResponseInterceptor
from .navigation import NavigationOutcome, navigate
from .orchestrator import Scraper

__all__ = [
    "EngineError",
    "NavigationOutcome",
    "ResponseInterceptor",
    "ScrapeAccumulator",
    "ScrapeError",
    "ScrapeValidationError",
    "Scraper",
    "SessionFactory",
    "navigate",
    "open_browser_session",
]
