"""Pytest fixtures for tada tests."""

from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from tada.config import Config, clear_config_cache
from tada.core import TodoService


@pytest.fixture(autouse=True)
def clear_caches(monkeypatch: pytest.MonkeyPatch):
    """Clear the config cache and TADA_* env vars around each test."""
    for key in Config.DEFAULTS:
        monkeypatch.delenv(f"TADA_{key.upper()}", raising=False)
    monkeypatch.delenv("TADA_CONFIG_DIR", raising=False)
    clear_config_cache()

    yield

    clear_config_cache()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config.load(tmp_path / "config")


@pytest.fixture
def todo_file(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture
def svc(config: Config, todo_file: Path) -> TodoService:
    return TodoService(config, storage_path=todo_file)


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def plain_console(output: StringIO) -> Console:
    return Console(file=output, force_terminal=False, color_system=None, width=200)
