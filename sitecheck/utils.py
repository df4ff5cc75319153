# File: sitecheck/utils.py
"""sitecheck.utils: чтение списка URL для проверки."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Union

from sitecheck.logger import logger

__all__: Sequence[str] = ("read_seed_urls", "parse_seed_urls")


def parse_seed_urls(text: str) -> List[str]:
    """Разбивает текст по строкам, обрезает пробелы, пустые строки отбрасывает."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def read_seed_urls(path: Union[str, Path]) -> List[str]:
    """Читает файл со списком URL (по одному на строку), порядок сохраняется."""
    p = Path(path).expanduser()
    if not p.is_file():
        logger.error("URL list not found: %s", p)
        raise FileNotFoundError(f"URL list file not found: {p}")
    urls = parse_seed_urls(p.read_text(encoding="utf-8"))
    logger.debug("Loaded %d seed URLs from %s", len(urls), p)
    return urls
