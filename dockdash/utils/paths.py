"""Централизованное описание путей приложения."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

# WORKSPACE_DIR_NAME — каталог внутри домашней директории с настройками и логами
WORKSPACE_DIR_NAME = ".dockdash"


def resolve_workspace_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Возвращает рабочую директорию с учётом переменной DOCKDASH_HOME."""

    env = os.environ if environ is None else environ
    home_dir = Path(env.get("DOCKDASH_HOME") or Path.home())
    return home_dir / WORKSPACE_DIR_NAME
