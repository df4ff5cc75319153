# File: sitecheck/report/__init__.py
"""sitecheck.report: текстовый лог, JSON- и HTML-отчёты, используемые CLI и тестами."""

from __future__ import annotations

from sitecheck.report.html_report import render_html
from sitecheck.report.json_report import render_json
from sitecheck.report.text_report import DEFAULT_LOG_PATH, render_text, write_text

__all__ = ["render_text", "write_text", "render_json", "render_html", "DEFAULT_LOG_PATH"]
