"""Тесты вспомогательных утилит."""

from __future__ import annotations

from pathlib import Path

from dockdash.utils.helpers import normalize_socket_path, strip_leading_separator, tail_lines
from dockdash.utils.paths import resolve_workspace_dir


def test_normalize_socket_path_adds_unix_prefix() -> None:
    assert normalize_socket_path("/var/run/docker.sock") == "unix:///var/run/docker.sock"


def test_normalize_socket_path_keeps_existing_scheme() -> None:
    assert normalize_socket_path("unix:///var/run/docker.sock") == "unix:///var/run/docker.sock"
    assert normalize_socket_path("tcp://127.0.0.1:2375") == "tcp://127.0.0.1:2375"


def test_strip_leading_separator() -> None:
    assert strip_leading_separator("/web") == "web"
    assert strip_leading_separator("web") == "web"
    assert strip_leading_separator("") == ""


def test_tail_lines_keeps_last_lines() -> None:
    text = "".join(f"{index}\n" for index in range(12))
    assert tail_lines(text, 10) == "".join(f"{index}\n" for index in range(2, 12))


def test_tail_lines_without_trailing_newline() -> None:
    assert tail_lines("a\nb\nc", 2) == "b\nc"
    assert tail_lines("a\nb", 5) == "a\nb"


def test_resolve_workspace_dir_uses_env(tmp_path: Path) -> None:
    assert resolve_workspace_dir({"DOCKDASH_HOME": str(tmp_path)}) == tmp_path / ".dockdash"


def test_tail_lines_counts_only_newlines() -> None:
    text = "start\nprogress 10%\rprogress 100%\ndone\n"
    assert tail_lines(text, 3) == text
    assert tail_lines(text, 2) == "progress 10%\rprogress 100%\ndone\n"
    assert tail_lines("a\x0bb\x0cc d\n", 1) == "a\x0bb\x0cc d\n"
