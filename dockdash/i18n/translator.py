"""Простой переводчик строк интерфейса."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

AVAILABLE_LANGUAGES = ("en", "ru")
STRINGS_DIR = Path(__file__).parent / "strings"

_current_locale = "en"
_translations: Dict[str, str] = {}


def _load_default() -> None:
    try:
        set_language("en")
    except FileNotFoundError:
        _translations.clear()
        _translations["app.title"] = "Docker Dashboard"


def set_language(language: str) -> None:
    """Загружает JSON переводы (en/ru); неизвестный язык заменяется на en."""

    global _current_locale, _translations
    if language not in AVAILABLE_LANGUAGES:
        language = "en"
    file_path = STRINGS_DIR / f"{language}.json"
    _translations = json.loads(file_path.read_text(encoding="utf-8"))
    _current_locale = language


def translate(key: str) -> str:
    """Возвращает перевод ключа или сам ключ, если перевода нет."""

    return _translations.get(key, key)


_load_default()
