# File: tests/test_playwright_page.py
# PlaywrightPage error mapping, checked against a stand-in for playwright's Page
from __future__ import annotations

import pytest
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from sitecheck.browser.playwright_page import PlaywrightPage
from sitecheck.errors import InteractionError, NavigationError, NavigationTimeout


class StubLocator:
    def __init__(self, owner: "StubPage", selector: str) -> None:
        self.owner = owner
        self.selector = selector

    @property
    def first(self) -> "StubLocator":
        return self

    async def wait_for(self, state: str, timeout: float) -> None:
        self.owner.waits.append((self.selector, state, timeout))
        if self.selector not in self.owner.visible:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded.")

    async def click(self, timeout: float) -> None:
        if self.owner.click_error is not None:
            raise self.owner.click_error
        self.owner.clicks.append(self.selector)


class StubPage:
    def __init__(self, goto_error=None, click_error=None, visible=()) -> None:
        self.goto_error = goto_error
        self.click_error = click_error
        self.visible = set(visible)
        self.waits = []
        self.clicks = []
        self.goto_calls = []

    async def goto(self, url, timeout):
        self.goto_calls.append((url, timeout))
        if self.goto_error is not None:
            raise self.goto_error
        return None

    async def go_back(self):
        raise PlaywrightError("Target page, context or browser has been closed")

    async def title(self):
        return "Stub"

    def locator(self, selector):
        return StubLocator(self, selector)

    async def eval_on_selector_all(self, selector, script):
        assert selector == "a[href]"
        return [{"href": "https://a.example/x", "text": "X"}]


@pytest.mark.asyncio()
async def test_goto_passes_milliseconds_and_returns_response():
    stub = StubPage()
    page = PlaywrightPage(stub)
    assert await page.goto("https://a.example", timeout=5) is None
    assert stub.goto_calls == [("https://a.example", 5000)]
    assert await page.title() == "Stub"
    assert await page.anchors() == [{"href": "https://a.example/x", "text": "X"}]


@pytest.mark.asyncio()
async def test_goto_error_mapping():
    timeout = PlaywrightTimeoutError("page.goto: Timeout 5000ms exceeded.\nCall log:")
    with pytest.raises(NavigationTimeout, match="^page.goto: Timeout 5000ms exceeded.$"):
        await PlaywrightPage(StubPage(goto_error=timeout)).goto("https://a.example", 5)

    failure = PlaywrightError("page.goto: net::ERR_NAME_NOT_RESOLVED at https://a.example")
    with pytest.raises(NavigationError, match="ERR_NAME_NOT_RESOLVED"):
        await PlaywrightPage(StubPage(goto_error=failure)).goto("https://a.example", 5)

    with pytest.raises(NavigationError):
        await PlaywrightPage(StubPage()).go_back()


@pytest.mark.asyncio()
async def test_consent_button_visibility_and_click():
    stub = StubPage(visible={'button:has-text("Allow all")'})
    page = PlaywrightPage(stub)

    assert not await page.is_button_visible("Accept", 2)
    assert await page.is_button_visible("Allow all", 2)
    assert stub.waits[0] == ('button:has-text("Accept")', "visible", 2000)

    await page.click_button("Allow all")
    assert stub.clicks == ['button:has-text("Allow all")']

    broken = PlaywrightPage(StubPage(click_error=PlaywrightError("Element is not attached")))
    with pytest.raises(InteractionError):
        await broken.click_button("OK")
