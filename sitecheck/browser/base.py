# sitecheck/browser/base.py
"""
Contract between the check engine and a browser implementation.

The engine never talks to aiohttp or Playwright directly: it needs a page it
can navigate, read a title and anchors from, and click consent buttons on.
Any object that satisfies :class:`Page` is interchangeable.
"""
from __future__ import annotations

from typing import AsyncContextManager, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class Response(Protocol):
    """Main-document response of a navigation."""

    @property
    def status(self) -> int: ...


@runtime_checkable
class Page(Protocol):
    """A single browsing context, reused for every step of one check."""

    async def goto(self, url: str, timeout: float) -> Optional[Response]:
        """Navigate to *url*; raise NavigationTimeout / NavigationError on failure."""
        ...

    async def go_back(self) -> None: ...

    async def title(self) -> str: ...

    async def is_button_visible(self, text: str, timeout: float) -> bool: ...

    async def click_button(self, text: str) -> None: ...

    async def anchors(self) -> List[Dict[str, str]]:
        """``{"href": absolute_url, "text": visible_text}`` for each ``a[href]``, DOM order."""
        ...


class Session(Protocol):
    """Long-lived browser resources for a whole run."""

    def new_page(self) -> AsyncContextManager[Page]: ...
