# File: tests/conftest.py
import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Union

import pytest

from sitecheck.aggregator import ReportBuilder
from sitecheck.config import CheckConfig


@dataclass
class FakeResponse:
    status: int


RouteT = Union[int, None, BaseException]


class FakePage:
    """
    Scripted page: every href maps to a status, to ``None`` (no response)
    or to an exception that ``goto`` raises. Unknown hrefs answer 200.
    """

    def __init__(
        self,
        *,
        title: str = "",
        anchors: Iterable[dict] = (),
        routes: Optional[Dict[str, RouteT]] = None,
        delays: Optional[Dict[str, float]] = None,
        buttons: Iterable[str] = (),
        click_error: Optional[BaseException] = None,
        back_error: Optional[BaseException] = None,
        back_delay: float = 0.0,
    ) -> None:
        self._title = title
        self._anchors = list(anchors)
        self.routes = routes or {}
        self.delays = delays or {}
        self.buttons = set(buttons)
        self.click_error = click_error
        self.back_error = back_error
        self.back_delay = back_delay
        self.visited: List[str] = []
        self.checked: List[str] = []
        self.clicked: List[str] = []
        self.back_calls = 0

    async def goto(self, url: str, timeout: float):
        self.visited.append(url)
        delay = self.delays.get(url, 0.0)
        if delay:
            await asyncio.sleep(delay)
        outcome = self.routes.get(url, 200)
        if isinstance(outcome, BaseException):
            raise outcome
        return None if outcome is None else FakeResponse(outcome)

    async def go_back(self) -> None:
        self.back_calls += 1
        if self.back_delay:
            await asyncio.sleep(self.back_delay)
        if self.back_error is not None:
            raise self.back_error

    async def title(self) -> str:
        return self._title

    async def is_button_visible(self, text: str, timeout: float) -> bool:
        self.checked.append(text)
        return text in self.buttons

    async def click_button(self, text: str) -> None:
        if self.click_error is not None:
            raise self.click_error
        self.clicked.append(text)

    async def anchors(self) -> List[dict]:
        return [dict(a) for a in self._anchors]


class FakeSession:
    """Hands out pages from *factory*, one per ``new_page()`` call."""

    def __init__(self, factory: Callable[[], FakePage]) -> None:
        self.factory = factory
        self.pages: List[FakePage] = []

    @asynccontextmanager
    async def new_page(self):
        page = self.factory()
        self.pages.append(page)
        yield page


def anchors_for(base: str, names: Iterable[str]) -> List[dict]:
    return [{"href": f"{base}/{name}", "text": f"  {name.title()} "} for name in names]


@pytest.fixture()
def fast_config() -> CheckConfig:
    """
    Return a CheckConfig with budgets small enough for unit tests.
    """
    return CheckConfig(
        homepage_timeout=0.5,
        page_load_budget=0.6,
        link_timeout=0.05,
        link_budget=0.1,
        go_back_budget=0.1,
        consent_timeout=0.01,
        seed_timeout=5.0,
    )


@pytest.fixture()
def builder() -> ReportBuilder:
    return ReportBuilder()


@pytest.fixture()
def make_page() -> Callable[..., FakePage]:
    return FakePage


@pytest.fixture()
def make_session() -> Callable[..., FakeSession]:
    return FakeSession


@pytest.fixture()
def make_anchors() -> Callable[[str, Iterable[str]], List[dict]]:
    return anchors_for
