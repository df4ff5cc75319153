# sitecheck/crawler/consent.py
"""
Best-effort dismissal of cookie/consent overlays.

A missed banner is not an error: the caller always continues, whatever
:func:`dismiss_consent` reports.
"""
from __future__ import annotations

import enum
from typing import Sequence

from sitecheck.browser.base import Page
from sitecheck.config import DEFAULT_CONSENT_TEXTS
from sitecheck.errors import first_line
from sitecheck.logger import logger


class ConsentOutcome(enum.Enum):
    DISMISSED = "dismissed"
    NOT_FOUND = "not-found"
    DISMISS_FAILED = "dismiss-failed"


async def _visible(page: Page, text: str, timeout: float) -> bool:
    try:
        return await page.is_button_visible(text, timeout)
    except Exception as exc:
        logger.debug("Visibility check for %r failed: %s", text, first_line(exc))
        return False


async def dismiss_consent(
    page: Page,
    patterns: Sequence[str] = DEFAULT_CONSENT_TEXTS,
    timeout: float = 2.0,
) -> ConsentOutcome:
    """Click the first visible button matching *patterns* (checked in order)."""
    for text in patterns:
        if not await _visible(page, text, timeout):
            continue
        try:
            await page.click_button(text)
        except Exception as exc:
            logger.debug("Consent button %r could not be clicked: %s", text, first_line(exc))
            return ConsentOutcome.DISMISS_FAILED
        logger.debug("Consent button %r clicked", text)
        return ConsentOutcome.DISMISSED
    return ConsentOutcome.NOT_FOUND
