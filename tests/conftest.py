"""Fixtures: settings and a scraper wired to a fake browser session."""

from __future__ import annotations

import pytest

from src.config import Settings
from src.scrape.orchestrator import Scraper
from tests.fakes import FakePage, FakeSessionFactory


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def make_scraper(settings: Settings):
    def _make(page: FakePage | None = None, **factory_kwargs) -> tuple[Scraper, FakeSessionFactory]:
        factory = FakeSessionFactory(page, **factory_kwargs)
        return Scraper(settings, session_factory=factory), factory

    return _make
