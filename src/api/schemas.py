"""Request/response Pydantic models."""

from __future__ import annotations

from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator

_VALID_SCHEMES = {"http", "https", "ftp"}


class ScrapeRequest(BaseModel):
    """Request to scrape a specified URL."""

    url: str = Field(description="The URL to scrape.")
    return_source_document: bool = Field(
        default=False,
        description="Return the document served for the URL, before any client-side rendering.",
    )
    return_rendered_document: bool = Field(
        default=False,
        description=(
            "Return the document as rendered by the browser, for single-page "
            "applications that build their markup client side."
        ),
    )
    return_json_data: bool = Field(
        default=False,
        description="Inspect every network response while loading the page and return the JSON ones.",
    )
    return_xml_data: bool = Field(
        default=False,
        description="Inspect every network response while loading the page and return the XML ones.",
    )

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("URL is required.")
        parsed = urlparse(value)
        if parsed.scheme not in _VALID_SCHEMES or not parsed.hostname:
            raise ValueError("URL must be a valid absolute URL.")
        return value

    @property
    def wants_any_output(self) -> bool:
        return (
            self.return_source_document
            or self.return_rendered_document
            or self.return_json_data
            or self.return_xml_data
        )

    @property
    def wants_network_data(self) -> bool:
        return self.return_json_data or self.return_xml_data


class ScrapeDataItem(BaseModel):
    """A network response the page received while loading."""

    content_type: str = Field(
        description='One of "application/json", "application/xml" or "text/xml".'
    )
    auth_header: str | None = Field(
        default=None, description="Authorization header sent with the request, if any."
    )
    request_url: str = Field(description="URL of the network request issued by the page.")
    response: str | None = Field(default=None, description="Response body text.")
    success: bool = Field(description="Whether the response body could be read.")
    error_message: str | None = Field(
        default=None, description="Why the response body could not be read."
    )


class ScrapeResponse(BaseModel):
    """Result of a scrape. Optional fields are only set for requested outputs."""

    url: str
    navigation_successful: bool = False
    source_document: str | None = None
    rendered_document: str | None = None
    json_data: list[ScrapeDataItem] | None = None
    xml_data: list[ScrapeDataItem] | None = None
