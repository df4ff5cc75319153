# File: sitecheck/engine.py
"""sitecheck.engine: последовательный прогон проверок по списку сидов."""

from __future__ import annotations

from typing import Iterable, Optional

from sitecheck.aggregator import Report, ReportBuilder
from sitecheck.browser import open_session
from sitecheck.browser.base import Session
from sitecheck.config import CheckConfig
from sitecheck.crawler.homepage import verify_homepage
from sitecheck.crawler.link_crawler import crawl_links
from sitecheck.logger import logger

__all__ = ["run_checks"]


async def _check_seed(session: Session, url: str, builder: ReportBuilder, config: CheckConfig) -> None:
    # каждая проверка начинает со свежей страницы
    async with session.new_page() as page:
        await verify_homepage(page, url, builder, config)
    async with session.new_page() as page:
        await crawl_links(page, url, builder, config)


async def _check_all(
    session: Session, urls: Iterable[str], builder: ReportBuilder, config: CheckConfig
) -> None:
    for url in urls:
        logger.info("Starting checks for: %s", url)
        await _check_seed(session, url, builder, config)


async def run_checks(
    urls: Iterable[str],
    config: CheckConfig,
    session: Optional[Session] = None,
    builder: Optional[ReportBuilder] = None,
) -> Report:
    """
    Проверяет сиды строго по очереди, в порядке списка, и возвращает Report.

    Если session не передана, она открывается по config.engine и закрывается в конце.
    """
    builder = builder if builder is not None else ReportBuilder()
    if session is None:
        async with open_session(config) as opened:
            await _check_all(opened, urls, builder, config)
    else:
        await _check_all(session, urls, builder, config)
    report = builder.finalize()
    logger.info("Done: %d passed, %d failed", len(report.passed), len(report.failed))
    return report

