"""Accumulates per-stage outcomes and assembles the ScrapeResponse."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.api.schemas import ScrapeDataItem, ScrapeRequest, ScrapeResponse


@dataclass
class ScrapeAccumulator:
    """Partial results of a single scrape.

    ``errors`` holds the human-readable reason for every stage that failed
    without aborting the scrape. They are logged, not returned to the caller.
    """

    source_document: str | None = None
    rendered_document: str | None = None
    source_read: bool = False
    rendered_read: bool = False
    json_items: list[ScrapeDataItem] = field(default_factory=list)
    xml_items: list[ScrapeDataItem] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def record_error(self, message: str) -> None:
        self.errors.append(message)

    def set_source(self, document: str) -> None:
        self.source_document = document
        self.source_read = True

    def set_rendered(self, document: str) -> None:
        self.rendered_document = document
        self.rendered_read = True

    @property
    def navigation_successful(self) -> bool:
        return self.source_read or self.rendered_read

    def build(self, request: ScrapeRequest) -> ScrapeResponse:
        """Assemble the response, populating only the outputs *request* asked for."""
        return ScrapeResponse(
            url=request.url,
            navigation_successful=self.navigation_successful,
            source_document=self.source_document if request.return_source_document else None,
            rendered_document=(
                self.rendered_document if request.return_rendered_document else None
            ),
            json_data=list(self.json_items) if request.return_json_data else None,
            xml_data=list(self.xml_items) if request.return_xml_data else None,
        )
