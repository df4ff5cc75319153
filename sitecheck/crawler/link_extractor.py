# sitecheck/crawler/link_extractor.py
"""
Link extraction and probe filtering for SiteCheck.
"""
from __future__ import annotations

from typing import List

from sitecheck.browser.base import Page
from sitecheck.crawler.models import LinkDescriptor

MAX_LINKS = 20

_SKIPPED_PREFIXES = ("mailto:", "tel:", "#")


async def extract_links(page: Page, limit: int = MAX_LINKS) -> List[LinkDescriptor]:
    """
    Return the first *limit* anchors of the loaded page, in DOM order.

    Anchors past the limit are never looked at. Repeated hrefs are kept.
    """
    links: List[LinkDescriptor] = []
    for anchor in (await page.anchors())[:limit]:
        links.append(
            LinkDescriptor(
                text=(anchor.get("text") or "").strip(),
                href=anchor.get("href") or "",
            )
        )
    return links


def is_probeable(link: LinkDescriptor) -> bool:
    """False for empty, mailto:, tel: and in-page (#...) targets."""
    return bool(link.href) and not link.href.startswith(_SKIPPED_PREFIXES)
