"""Browser session lifecycle and header helper tests."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from playwright.async_api import Error as PlaywrightError

from src.scrape.browser import header_value, is_ok_status, open_browser_session


def _mock_playwright(launch_error: Exception | None = None):
    """Build an async_playwright() stand-in that records teardown order."""
    calls: list[str] = []

    page = MagicMock()
    page.close = AsyncMock(side_effect=lambda: calls.append("page.close"))

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)
    context.close = AsyncMock(side_effect=lambda: calls.append("context.close"))

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock(side_effect=lambda: calls.append("browser.close"))

    playwright = MagicMock()
    if launch_error is not None:
        playwright.chromium.launch = AsyncMock(side_effect=launch_error)
    else:
        playwright.chromium.launch = AsyncMock(return_value=browser)
    playwright.firefox.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=playwright)
    manager.__aexit__ = AsyncMock(
        side_effect=lambda *exc_info: calls.append("playwright.stop")
    )

    factory = MagicMock(return_value=manager)
    return factory, playwright, browser, page, calls


@pytest.mark.asyncio
async def test_session_yields_page_and_closes_in_reverse_order():
    factory, playwright, browser, page, calls = _mock_playwright()

    with patch("src.scrape.browser.async_playwright", factory):
        async with open_browser_session() as session_page:
            assert session_page is page
            assert calls == []

    playwright.chromium.launch.assert_awaited_once_with(headless=True)
    browser.new_context.assert_awaited_once()
    assert calls == ["page.close", "context.close", "browser.close", "playwright.stop"]


@pytest.mark.asyncio
async def test_session_released_when_body_raises():
    factory, _, _, _, calls = _mock_playwright()

    with patch("src.scrape.browser.async_playwright", factory):
        with pytest.raises(RuntimeError, match="scrape blew up"):
            async with open_browser_session():
                raise RuntimeError("scrape blew up")

    assert calls == ["page.close", "context.close", "browser.close", "playwright.stop"]


@pytest.mark.asyncio
async def test_engine_stopped_when_launch_fails():
    factory, _, browser, _, calls = _mock_playwright(
        launch_error=PlaywrightError("Executable doesn't exist")
    )

    with patch("src.scrape.browser.async_playwright", factory):
        with pytest.raises(PlaywrightError, match="Executable doesn't exist"):
            async with open_browser_session():
                pytest.fail("session should not open")

    browser.close.assert_not_awaited()
    assert calls == ["playwright.stop"]


@pytest.mark.asyncio
async def test_browser_type_and_headless_passed_through():
    factory, playwright, _, _, _ = _mock_playwright()

    with patch("src.scrape.browser.async_playwright", factory):
        async with open_browser_session(browser_type="firefox", headless=False):
            pass

    playwright.firefox.launch.assert_awaited_once_with(headless=False)
    playwright.chromium.launch.assert_not_awaited()


class TestHeaderValue:
    def test_mixed_case_keys(self) -> None:
        headers = {"Content-Type": "application/json", "X-Trace": "abc"}
        assert header_value(headers, "content-type") == "application/json"
        assert header_value(headers, "CONTENT-TYPE") == "application/json"
        assert header_value(headers, "x-trace") == "abc"

    def test_missing_key(self) -> None:
        assert header_value({"Accept": "*/*"}, "authorization") is None
        assert header_value({}, "content-type") is None


class TestIsOkStatus:
    @pytest.mark.parametrize("status", [200, 204, 301, 399])
    def test_ok(self, status: int) -> None:
        assert is_ok_status(status) is True

    @pytest.mark.parametrize("status", [0, 199, 400, 404, 500])
    def test_not_ok(self, status: int) -> None:
        assert is_ok_status(status) is False
