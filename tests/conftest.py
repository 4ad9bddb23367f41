from __future__ import annotations

import io
import os
from pathlib import Path

import pytest
from rich.console import Console

import tradier_cli.display.tables as tables
import tradier_sdk.config as config


@pytest.fixture
def fake_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir(parents=True)
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(config, "DEFAULT_TRADIER_CONFIG_JSON", home / ".config" / "tradier" / "config.json")
    return home


@pytest.fixture(autouse=True)
def clear_tradier_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ.keys()):
        if key.startswith("TRADIER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Capture everything the printers write, without color and without wrapping."""
    buf = io.StringIO()
    monkeypatch.setattr(
        tables,
        "get_console",
        lambda: Console(file=buf, width=240, highlight=False, color_system=None),
    )
    return buf


def _table_cells(text: str) -> list[list[str]]:
    cells: list[list[str]] = []
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("│"):
            cells.append([cell.strip() for cell in stripped.strip("│").split("│")])
    return cells


@pytest.fixture
def table_cells():
    """Split rounded-box table output into rows of stripped cell text (header row included)."""
    return _table_cells


@pytest.fixture
def narrow_output(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Capture printer output at the 80-column width piped output gets."""
    buf = io.StringIO()
    monkeypatch.setattr(
        tables,
        "get_console",
        lambda: Console(file=buf, width=80, highlight=False, color_system=None),
    )
    return buf
