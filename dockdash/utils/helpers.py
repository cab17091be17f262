"""Различные вспомогательные функции."""

from __future__ import annotations


_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает путь сокета с корректным префиксом unix://."""

    value = raw_value.strip()
    if not value:
        return value
    lowered = value.lower()
    if lowered.startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value


def strip_leading_separator(name: str) -> str:
    """Убирает один ведущий '/' из имени контейнера (docker хранит имена как /name)."""

    if name.startswith("/"):
        return name[1:]
    return name


def tail_lines(text: str, limit: int) -> str:
    """Оставляет не более ``limit`` последних строк текста.

    Строкой считается только то, что завершается ``\\n``: символы ``\\r``
    (прогресс-бары) и прочие разделители Unicode остаются внутри строки.
    """

    if limit <= 0:
        return ""
    terminated = text.endswith("\n")
    lines = text.split("\n")
    if terminated:
        lines.pop()
    if len(lines) <= limit:
        return text
    tail = "\n".join(lines[-limit:])
    return f"{tail}\n" if terminated else tail
