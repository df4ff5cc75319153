# === FILE: sitecheck/browser/playwright_page.py ===
"""Headless Chromium pages driven through the Playwright async API."""
from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional

from playwright.async_api import Browser, Error as PlaywrightError
from playwright.async_api import Page as PWPage
from playwright.async_api import Playwright, Response
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from sitecheck.errors import InteractionError, NavigationError, NavigationTimeout, first_line

__all__ = ("PlaywrightPage", "PlaywrightSession")

_CLICK_TIMEOUT_MS = 5000
_ANCHORS_JS = "as => as.map(a => ({href: a.href, text: (a.innerText || '').trim()}))"


def _button_selector(text: str) -> str:
    return f"button:has-text({json.dumps(text)})"


class PlaywrightPage:
    """Adapter from a Playwright page to the SiteCheck page contract."""

    def __init__(self, page: PWPage) -> None:
        self._page = page

    async def goto(self, url: str, timeout: float) -> Optional[Response]:
        try:
            return await self._page.goto(url, timeout=timeout * 1000)
        except PlaywrightTimeoutError as exc:
            raise NavigationTimeout(first_line(exc)) from exc
        except PlaywrightError as exc:
            raise NavigationError(first_line(exc)) from exc

    async def go_back(self) -> None:
        try:
            await self._page.go_back()
        except PlaywrightError as exc:
            raise NavigationError(first_line(exc)) from exc

    async def title(self) -> str:
        return await self._page.title()

    async def is_button_visible(self, text: str, timeout: float) -> bool:
        locator = self._page.locator(_button_selector(text)).first
        try:
            await locator.wait_for(state="visible", timeout=timeout * 1000)
        except PlaywrightTimeoutError:
            return False
        return True

    async def click_button(self, text: str) -> None:
        try:
            await self._page.locator(_button_selector(text)).first.click(timeout=_CLICK_TIMEOUT_MS)
        except PlaywrightError as exc:
            raise InteractionError(first_line(exc)) from exc

    async def anchors(self) -> List[Dict[str, str]]:
        return await self._page.eval_on_selector_all("a[href]", _ANCHORS_JS)


class PlaywrightSession:
    """One Chromium process per run; every page gets its own browser context."""

    def __init__(self, config) -> None:
        self.config = config
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> PlaywrightSession:
        self._playwright = await async_playwright().start()
        self._browser = await self._playwright.chromium.launch(headless=self.config.headless)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._browser is not None:
            await self._browser.close()
        if self._playwright is not None:
            await self._playwright.stop()

    @asynccontextmanager
    async def new_page(self) -> AsyncIterator[PlaywrightPage]:
        if self._browser is None:
            raise RuntimeError("Browser not launched")
        context = await self._browser.new_context(user_agent=self.config.user_agent)
        try:
            yield PlaywrightPage(await context.new_page())
        finally:
            await context.close()
