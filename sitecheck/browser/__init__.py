# File: sitecheck/browser/__init__.py
"""sitecheck.browser: реализации страницы для движка проверок (aiohttp или Playwright)."""

from __future__ import annotations

from sitecheck.browser.base import Page, Response, Session
from sitecheck.browser.http_page import HttpPage, HttpSession


def open_session(config):
    """Возвращает асинхронный контекст-менеджер сессии для config.engine."""
    if config.engine == "playwright":
        from sitecheck.browser.playwright_page import PlaywrightSession

        return PlaywrightSession(config)
    return HttpSession(config)


__all__ = ["Page", "Response", "Session", "HttpPage", "HttpSession", "open_session"]
