# === FILE: sitecheck/browser/http_page.py ===
from __future__ import annotations

import asyncio
import re
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Dict, List, Optional
from urllib.parse import urljoin, urlparse

from aiohttp import ClientError, ClientSession, ClientTimeout
from bs4 import BeautifulSoup
from bs4.element import Tag

from sitecheck.errors import InteractionError, NavigationError, NavigationTimeout
from sitecheck.logger import logger

__all__ = ("HttpResponse", "HttpPage", "HttpSession")

_HIDDEN_STYLE_RE = re.compile(r"(display\s*:\s*none|visibility\s*:\s*hidden)", re.IGNORECASE)


@dataclass(slots=True, frozen=True)
class HttpResponse:
    """Статус и итоговый URL (после редиректов) главного документа."""
    status: int
    url: str


@dataclass(slots=True)
class _Document:
    url: str
    status: int
    html: str
    soup: Optional[BeautifulSoup] = None

    def parsed(self) -> BeautifulSoup:
        if self.soup is None:
            self.soup = BeautifulSoup(self.html, "html.parser")
        return self.soup


def _collapse(text: str) -> str:
    return " ".join(text.split())


def _is_hidden(tag: Tag) -> bool:
    for node in [tag, *tag.parents]:
        if not isinstance(node, Tag):
            continue
        if node.has_attr("hidden") or node.get("aria-hidden") == "true":
            return True
        style = node.get("style")
        if isinstance(style, str) and _HIDDEN_STYLE_RE.search(style):
            return True
    return False


class HttpPage:
    """
    Страница без JavaScript: aiohttp загружает документ, BeautifulSoup разбирает.
    История навигации хранится в памяти, go_back() возвращает предыдущий документ
    без повторного запроса.
    """

    def __init__(self, session: ClientSession) -> None:
        self.session = session
        self._history: List[_Document] = []

    @property
    def url(self) -> str:
        return self._history[-1].url if self._history else "about:blank"

    async def goto(self, url: str, timeout: float) -> HttpResponse:
        if urlparse(url).scheme not in ("http", "https"):
            raise NavigationError(f"Unsupported URL scheme: {url}")
        try:
            async with self.session.get(
                url, timeout=ClientTimeout(total=timeout), allow_redirects=True
            ) as resp:
                ctype = resp.headers.get("Content-Type", "").lower()
                html = await resp.text(errors="replace") if "html" in ctype else ""
                doc = _Document(url=str(resp.url), status=resp.status, html=html)
        except asyncio.TimeoutError as exc:
            raise NavigationTimeout(
                f"Navigation timeout of {int(timeout * 1000)}ms exceeded: {url}"
            ) from exc
        except ClientError as exc:
            raise NavigationError(f"{type(exc).__name__}: {exc}") from exc
        self._history.append(doc)
        logger.debug("GET %s -> %s", url, doc.status)
        return HttpResponse(status=doc.status, url=doc.url)

    async def go_back(self) -> None:
        if len(self._history) > 1:
            self._history.pop()

    async def title(self) -> str:
        if not self._history:
            return ""
        tag = self._history[-1].parsed().title
        return _collapse(tag.get_text()) if tag else ""

    async def is_button_visible(self, text: str, timeout: float) -> bool:
        # static markup is either there or not: nothing to wait for
        return self._find_button(text) is not None

    async def click_button(self, text: str) -> None:
        raise InteractionError(f"Cannot click {text!r}: static HTML pages are not interactive")

    async def anchors(self) -> List[Dict[str, str]]:
        if not self._history:
            return []
        doc = self._history[-1]
        result: List[Dict[str, str]] = []
        for tag in doc.parsed().find_all("a", href=True):
            if not isinstance(tag, Tag):
                continue
            href = tag.get("href")
            if not isinstance(href, str):
                continue
            result.append({"href": urljoin(doc.url, href.strip()), "text": _collapse(tag.get_text(" "))})
        return result

    def _find_button(self, text: str) -> Optional[Tag]:
        if not self._history:
            return None
        needle = text.lower()
        for tag in self._history[-1].parsed().find_all("button"):
            if isinstance(tag, Tag) and needle in _collapse(tag.get_text(" ")).lower():
                if not _is_hidden(tag):
                    return tag
        return None


class HttpSession:
    """Одна aiohttp-сессия на весь прогон, новая HttpPage на каждую проверку."""

    def __init__(self, config) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None

    async def __aenter__(self) -> HttpSession:
        self.session = ClientSession(
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    @asynccontextmanager
    async def new_page(self) -> AsyncIterator[HttpPage]:
        if not self.session:
            raise RuntimeError("Session not initialized")
        yield HttpPage(self.session)
