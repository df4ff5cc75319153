# === FILE: sitecheck/crawler/link_crawler.py ===
from __future__ import annotations

import asyncio

from sitecheck.aggregator import ReportBuilder
from sitecheck.bounded import bounded
from sitecheck.browser.base import Page
from sitecheck.config import CheckConfig
from sitecheck.crawler.link_extractor import extract_links, is_probeable
from sitecheck.crawler.models import NO_RESPONSE, LinkDescriptor, LinkOutcome, SeedLinks
from sitecheck.errors import first_line
from sitecheck.logger import logger

__all__ = ("crawl_links", "probe_link")

ALL_LINKS = "ALL LINKS"
REMAINING_LINKS = "REMAINING LINKS"


async def probe_link(page: Page, link: LinkDescriptor, config: CheckConfig) -> LinkOutcome:
    """Navigate to one link and classify the result. Never raises."""
    try:
        response = await bounded(page.goto(link.href, timeout=config.link_timeout), config.link_budget)
    except Exception as exc:
        return LinkOutcome.errored(link, first_line(exc))
    status = response.status if response is not None else NO_RESPONSE
    if status == 200:
        return LinkOutcome.ok(link)
    return LinkOutcome.bad_status(link, status)


async def _go_back(page: Page, config: CheckConfig) -> None:
    try:
        await bounded(page.go_back(), config.go_back_budget)
    except Exception as exc:
        # every probe navigates by absolute href, so the current location does not matter
        logger.debug("go_back failed: %s", first_line(exc))


async def _probe_all(page: Page, url: str, entry: SeedLinks, config: CheckConfig) -> None:
    try:
        await bounded(page.goto(url, timeout=config.homepage_timeout), config.page_load_budget)
        links = await extract_links(page, config.max_links)
    except Exception as exc:
        entry.add(
            LinkOutcome(
                text=ALL_LINKS,
                href=url,
                error=f"Could not load page or links: {first_line(exc)}",
            )
        )
        logger.warning("Links of %s not checked: %s", url, first_line(exc))
        return

    for link in links:
        if not is_probeable(link):
            continue
        outcome = await probe_link(page, link, config)
        entry.add(outcome)
        if outcome.failed:
            logger.debug("[FAIL] %s -> %s (%s)", link.text, link.href, outcome.status or outcome.error)
        await _go_back(page, config)


async def crawl_links(
    page: Page, url: str, builder: ReportBuilder, config: CheckConfig
) -> SeedLinks:
    """Probe the first links of *url* one by one, recording an outcome for each."""
    entry = builder.start_links(url)
    try:
        await asyncio.wait_for(_probe_all(page, url, entry, config), timeout=config.seed_timeout)
    except asyncio.TimeoutError:
        entry.add(LinkOutcome(text=REMAINING_LINKS, href=url, error="Seed check timeout"))
        logger.warning("Link check of %s stopped after %s s", url, config.seed_timeout)
    logger.info(
        "Links of %s: %d passed, %d failed", url, len(entry.passed), len(entry.failed)
    )
    return entry
