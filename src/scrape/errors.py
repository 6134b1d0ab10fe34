"""Errors that abort a scrape.

Per-stage failures (navigation timeout, unreadable bodies) never raise; they
are recorded on the result instead.
"""

from __future__ import annotations

NO_OUTPUT_REQUESTED = (
    "At least one return type (return_source_document, return_rendered_document, "
    "return_json_data, return_xml_data) must be set to true."
)


class ScrapeError(Exception):
    """Base class for scrape failures surfaced to the caller."""


class ScrapeValidationError(ScrapeError):
    """The request cannot be scraped as given."""


class EngineError(ScrapeError):
    """The browser engine failed at the session level."""
