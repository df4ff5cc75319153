# === FILE: sitecheck/config.py ===
"""
Модуль для загрузки и валидации конфигурации проверок SiteCheck.
Используется Pydantic для описания схемы и проверки данных.
Все таймауты и бюджеты задаются в секундах.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

DEFAULT_CONSENT_TEXTS: tuple[str, ...] = (
    "Accept",
    "I Accept",
    "Agree",
    "Yes, I agree",
    "Allow all",
    "OK",
)


class CheckConfig(BaseModel):
    """Конфигурация одного прогона проверок."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    homepage_timeout: float = Field(60.0, gt=0, description="Таймаут навигации на главную страницу.")
    page_load_budget: float = Field(65.0, gt=0, description="Внешний бюджет загрузки страницы сида.")
    link_timeout: float = Field(5.0, gt=0, description="Таймаут навигации по одной ссылке.")
    link_budget: float = Field(7.0, gt=0, description="Внешний бюджет проверки одной ссылки.")
    go_back_budget: float = Field(7.0, gt=0, description="Бюджет возврата на предыдущую страницу.")
    consent_timeout: float = Field(2.0, gt=0, description="Ожидание видимости кнопки согласия.")
    seed_timeout: float = Field(120.0, gt=0, description="Потолок одной проверки сида.")
    max_links: int = Field(20, ge=0, description="Сколько ссылок со страницы рассматривать.")
    consent_texts: tuple[str, ...] = Field(
        DEFAULT_CONSENT_TEXTS, description="Тексты кнопок cookie-баннеров, по порядку."
    )
    user_agent: str = Field("SiteCheckBot/1.0", min_length=1, description="Заголовок User-Agent.")
    engine: Literal["http", "playwright"] = Field("http", description="Движок браузера.")
    headless: bool = Field(True, description="Запуск Chromium без окна (только playwright).")

    @field_validator("consent_texts", mode="before")
    def _strip_consent_texts(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(str(t).strip() for t in v if str(t).strip())
        return v

    @model_validator(mode="after")
    def _check_budgets(self) -> CheckConfig:
        pairs = (
            ("page_load_budget", "homepage_timeout"),
            ("link_budget", "link_timeout"),
        )
        for budget, timeout in pairs:
            if getattr(self, budget) < getattr(self, timeout):
                raise ValueError(f"{budget} должен быть не меньше {timeout}")
        return self


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CheckConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект CheckConfig.
    Без пути берётся configs/default.yaml, а если его нет, значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return CheckConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    try:
        return CheckConfig(**data)
    except ValidationError:
        raise


__all__ = ["CheckConfig", "DEFAULT_CONSENT_TEXTS", "load_config"]
