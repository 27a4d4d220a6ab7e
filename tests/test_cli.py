"""Smoke tests for the demo CLI wiring of settings, logging, and display."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from status_tail import cli
from status_tail.ui.terminal_display import CLEAR_SCREEN, HIDE_CURSOR, SHOW_CURSOR


def _set_env(monkeypatch: Any, tmp_path: Path) -> None:
    monkeypatch.setattr(logging.getLogger("status_tail"), "handlers", [])
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STATUS_TAIL_REFRESH_INTERVAL_SECONDS", "0.01")
    monkeypatch.setenv("STATUS_TAIL_MAX_MESSAGES", "10")
    monkeypatch.setenv("STATUS_TAIL_SEPARATOR", "--")
    monkeypatch.delenv("STATUS_TAIL_LOG_LEVEL", raising=False)


def test_demo_cli_runs_and_restores_cursor(monkeypatch: Any, tmp_path: Path, capsys: Any) -> None:
    _set_env(monkeypatch, tmp_path)

    exit_code = cli.main(["--messages", "12", "--delay", "0"])
    assert exit_code == 0

    output = capsys.readouterr().out
    assert output.startswith(CLEAR_SCREEN + HIDE_CURSOR)
    assert output.count(SHOW_CURSOR) == 1
    assert "Emitted 12 messages | showing last 10" in output
    # The summary line is printed after teardown.
    assert output.index(SHOW_CURSOR) < output.index("Emitted 12 messages")


def test_demo_cli_rejects_non_positive_message_count(
    monkeypatch: Any, tmp_path: Path, capsys: Any
) -> None:
    _set_env(monkeypatch, tmp_path)
    assert cli.main(["--messages", "0"]) == 2
    assert SHOW_CURSOR not in capsys.readouterr().out


def test_demo_cli_config_failure_exits_before_display(
    monkeypatch: Any, tmp_path: Path, capsys: Any
) -> None:
    _set_env(monkeypatch, tmp_path)
    monkeypatch.setenv("STATUS_TAIL_MAX_MESSAGES", "0")
    assert cli.main(["--messages", "3"]) == 2
    assert CLEAR_SCREEN not in capsys.readouterr().out


def test_demo_cli_separator_override(monkeypatch: Any, tmp_path: Path) -> None:
    _set_env(monkeypatch, tmp_path)
    args = cli.parse_args(["--separator", "==", "--refresh-interval", "0.2"])
    assert args.separator == "=="
    assert args.refresh_interval == 0.2
    assert args.messages == 25
