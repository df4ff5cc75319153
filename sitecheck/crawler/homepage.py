# sitecheck/crawler/homepage.py
"""
Homepage verification for one seed URL.

START -> LOADED -> CONSENT_CHECKED -> TITLED -> PASS | FAIL, or straight
from START to FAIL when the navigation itself fails.
"""
from __future__ import annotations

import asyncio

from sitecheck.aggregator import ReportBuilder
from sitecheck.bounded import bounded
from sitecheck.browser.base import Page
from sitecheck.config import CheckConfig
from sitecheck.crawler.consent import dismiss_consent
from sitecheck.crawler.models import SITE_TIMEOUT, SeedResult
from sitecheck.errors import first_line, is_timeout
from sitecheck.logger import logger


def failure_title(exc: BaseException) -> str:
    """Title recorded for a seed whose homepage could not be loaded."""
    if is_timeout(exc):
        return SITE_TIMEOUT
    return f"Error: {first_line(exc)}"


async def _load_and_read_title(page: Page, url: str, config: CheckConfig) -> str:
    await bounded(page.goto(url, timeout=config.homepage_timeout), config.page_load_budget)
    logger.debug("[%s] LOADED", url)
    consent = await dismiss_consent(page, config.consent_texts, config.consent_timeout)
    logger.debug("[%s] CONSENT_CHECKED (%s)", url, consent.value)
    title = await page.title()
    logger.debug("[%s] TITLED %r", url, title)
    return title


async def verify_homepage(
    page: Page, url: str, builder: ReportBuilder, config: CheckConfig
) -> SeedResult:
    """Check that *url* loads and has a title; record exactly one SeedResult."""
    try:
        title = await asyncio.wait_for(
            _load_and_read_title(page, url, config), timeout=config.seed_timeout
        )
    except Exception as exc:
        result = SeedResult(url=url, title=failure_title(exc))
        logger.warning("Homepage FAIL %s: %s", url, result.title)
        builder.record_seed(result, passed=False)
        return result

    result = SeedResult(url=url, title=title)
    passed = bool(title)
    if passed:
        logger.info("Homepage PASS %s: %s", url, title)
    else:
        logger.warning("Homepage FAIL %s: empty title", url)
    builder.record_seed(result, passed=passed)
    return result
