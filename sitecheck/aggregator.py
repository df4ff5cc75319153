# File: sitecheck/aggregator.py
"""sitecheck.aggregator: накопление результатов проверок и итоговый отчёт."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from sitecheck.crawler.models import LinkOutcome, SeedLinks, SeedResult


@dataclass(slots=True, frozen=True)
class LinkResults:
    """Неизменяемый снимок SeedLinks."""

    passed: Tuple[LinkOutcome, ...] = ()
    failed: Tuple[LinkOutcome, ...] = ()


@dataclass(slots=True, frozen=True)
class Report:
    """Итог прогона: сиды с прошедшей и упавшей главной, плюс ссылки по URL."""

    passed: Tuple[SeedResult, ...] = ()
    failed: Tuple[SeedResult, ...] = ()
    links: Mapping[str, LinkResults] = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> Dict[str, Any]:
        """Словарь для JSON/HTML: сиды в порядке прогона, ссылки присоединены по URL."""

        def seed(entry: SeedResult) -> Dict[str, Any]:
            data: Dict[str, Any] = {"url": entry.url, "title": entry.title}
            results = self.links.get(entry.url)
            if results is not None:
                data["links"] = {
                    "passed": [_outcome(o) for o in results.passed],
                    "failed": [_outcome(o) for o in results.failed],
                }
            return data

        return {
            "passed": [seed(e) for e in self.passed],
            "failed": [seed(e) for e in self.failed],
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление Report."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _outcome(outcome: LinkOutcome) -> Dict[str, Any]:
    data: Dict[str, Any] = {"text": outcome.text, "href": outcome.href}
    if outcome.status is not None:
        data["status"] = outcome.status
    if outcome.error is not None:
        data["error"] = outcome.error
    return data


class ReportBuilder:
    """
    Аккумулятор результатов одного прогона.

    Передаётся в каждую проверку сида; порядок добавления сохраняется,
    finalize() возвращает неизменяемый Report.
    """

    def __init__(self) -> None:
        self.passed: List[SeedResult] = []
        self.failed: List[SeedResult] = []
        self.links: Dict[str, SeedLinks] = {}

    def record_seed(self, result: SeedResult, passed: bool) -> None:
        (self.passed if passed else self.failed).append(result)

    def start_links(self, url: str) -> SeedLinks:
        """Создаёт (или перезаписывает, для повторного сида) запись ссылок для url."""
        entry = SeedLinks()
        self.links[url] = entry
        return entry

    def finalize(self) -> Report:
        return Report(
            passed=tuple(self.passed),
            failed=tuple(self.failed),
            links=MappingProxyType(
                {
                    url: LinkResults(passed=tuple(entry.passed), failed=tuple(entry.failed))
                    for url, entry in self.links.items()
                }
            ),
        )


__all__ = ["LinkResults", "Report", "ReportBuilder"]
