# sitecheck/crawler/models.py
"""
Data models for the SiteCheck homepage verifier and link crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

NO_RESPONSE = "No Response"
SITE_TIMEOUT = "SITE TIMEOUT"

StatusT = Union[int, str]


@dataclass(slots=True, frozen=True)
class SeedResult:
    """Verdict of a homepage check: the seed URL and its title (or diagnostic)."""

    url: str
    title: str


@dataclass(slots=True, frozen=True)
class LinkDescriptor:
    """Anchor found on a seed page: visible text and absolute target."""

    text: str
    href: str


@dataclass(slots=True, frozen=True)
class LinkOutcome:
    """Result of probing one link.

    A passed outcome carries neither ``status`` nor ``error``. A failed one
    carries exactly one: ``status`` for a non-200 (or missing) response,
    ``error`` for a navigation failure.
    """

    text: str
    href: str
    status: Optional[StatusT] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.status is not None and self.error is not None:
            raise ValueError("LinkOutcome carries both status and error")

    @property
    def failed(self) -> bool:
        return self.status is not None or self.error is not None

    @classmethod
    def ok(cls, link: LinkDescriptor) -> LinkOutcome:
        return cls(link.text, link.href)

    @classmethod
    def bad_status(cls, link: LinkDescriptor, status: StatusT) -> LinkOutcome:
        return cls(link.text, link.href, status=status)

    @classmethod
    def errored(cls, link: LinkDescriptor, error: str) -> LinkOutcome:
        return cls(link.text, link.href, error=error)


@dataclass(slots=True)
class SeedLinks:
    """Outcomes of one seed's crawl, in probe order."""

    passed: List[LinkOutcome] = field(default_factory=list)
    failed: List[LinkOutcome] = field(default_factory=list)

    def add(self, outcome: LinkOutcome) -> None:
        (self.failed if outcome.failed else self.passed).append(outcome)

    def __len__(self) -> int:
        return len(self.passed) + len(self.failed)
