# === FILE: robocheck/config.py ===
"""
Загрузка и валидация конфигурации парсера robots.txt.
Схема описана через Pydantic; файл может быть в YAML или JSON.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

# eight times the 2083-character browser URL limit
DEFAULT_MAX_LINE_LENGTH = 2083 * 8
DEFAULT_MAX_DOCUMENT_BYTES = 500 * 1024


class ParserConfig(BaseModel):
    """Policy knobs of the robots.txt parser."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    max_document_bytes: int = Field(
        DEFAULT_MAX_DOCUMENT_BYTES,
        gt=0,
        description="Сколько байт документа (UTF-8) обрабатывается; остаток игнорируется.",
    )
    max_line_length: int = Field(
        DEFAULT_MAX_LINE_LENGTH,
        gt=0,
        description="Максимальная длина строки в символах; хвост отбрасывается.",
    )
    count_global_directives: bool = Field(
        False,
        description="Считать ли Sitemap и Crawl-delay валидными директивами.",
    )


DEFAULT_CONFIG = ParserConfig()

_DEFAULT_CFG = Path("configs/robocheck.yaml")


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


def load_config(path: Union[str, Path, None] = None) -> ParserConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ParserConfig.
    Без пути используется configs/robocheck.yaml, а если его нет - значения по умолчанию.
    Явно указанный, но отсутствующий файл даёт FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return DEFAULT_CONFIG
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

    return ParserConfig(**data)


__all__ = ["ParserConfig", "DEFAULT_CONFIG", "load_config"]
