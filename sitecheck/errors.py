# File: sitecheck/errors.py
"""Error taxonomy shared by the browser adapters and the check engine."""

from __future__ import annotations

__all__ = (
    "SiteCheckError",
    "NavigationError",
    "NavigationTimeout",
    "StepTimeout",
    "InteractionError",
    "first_line",
    "is_timeout",
)


class SiteCheckError(Exception):
    """Base class for all SiteCheck errors."""


class NavigationError(SiteCheckError):
    """Navigation or transport failure (DNS, refused connection, bad scheme...)."""


class NavigationTimeout(NavigationError):
    """The requested navigation timeout elapsed before the page settled."""


class StepTimeout(SiteCheckError):
    """An internal budget expired before the awaited step settled."""

    def __init__(self, message: str = "Step timeout") -> None:
        super().__init__(message)


class InteractionError(SiteCheckError):
    """A click or other page interaction could not be performed."""


def first_line(exc: BaseException) -> str:
    """First line of the exception message, or the class name for empty messages."""
    message = str(exc)
    if not message:
        return type(exc).__name__
    return message.split("\n")[0]


def is_timeout(exc: BaseException) -> bool:
    """Classify *exc* as a timeout: by type, or by a lowercase "timeout" in its message."""
    if isinstance(exc, (NavigationTimeout, StepTimeout, TimeoutError)):
        return True
    return "timeout" in first_line(exc)
