# sitecheck/report/text_report.py

"""
Текстовый лог SiteCheck: секция PASSED, затем FAILED.

Пример:
```
--- PASSED ---
URL: https://good.example, Title: Hello
  Links Passed:
    [PASS] About -> https://good.example/about
  Links Failed:
    [FAIL] Blog -> https://good.example/blog (status: 404)

--- FAILED ---
URL: https://bad.example, Title: SITE TIMEOUT
```
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from sitecheck.aggregator import Report
from sitecheck.crawler.models import SeedResult

DEFAULT_LOG_PATH = "test-log.txt"


def _render_seeds(report: Report, seeds: Iterable[SeedResult], lines: List[str]) -> None:
    for entry in seeds:
        lines.append(f"URL: {entry.url}, Title: {entry.title}\n")
        results = report.links.get(entry.url)
        if results is None:
            continue
        lines.append("  Links Passed:\n")
        for link in results.passed:
            lines.append(f"    [PASS] {link.text} -> {link.href}\n")
        lines.append("  Links Failed:\n")
        for link in results.failed:
            suffix = ""
            if link.status is not None:
                suffix = f" (status: {link.status})"
            elif link.error is not None:
                suffix = f" (error: {link.error})"
            lines.append(f"    [FAIL] {link.text} -> {link.href}{suffix}\n")


def render_text(report: Report) -> str:
    """Рендерит отчёт в текст. Чистая функция: одинаковый Report даёт одинаковый текст."""
    lines: List[str] = ["--- PASSED ---\n"]
    _render_seeds(report, report.passed, lines)
    lines.append("\n--- FAILED ---\n")
    _render_seeds(report, report.failed, lines)
    return "".join(lines)


def write_text(report: Report, output_path: Path | str = DEFAULT_LOG_PATH) -> Path:
    """Сохраняет текстовый лог по указанному пути и возвращает Path."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_text(report), encoding="utf-8")
    return output
