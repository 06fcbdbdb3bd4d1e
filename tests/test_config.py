"""Tests for config system."""

import json
from pathlib import Path

import pytest

from tada.config import Config, clear_config_cache, get_default_config_dir


class TestConfigDefaults:
    def test_defaults(self):
        config = Config(Path("/tmp/tada-test-nonexistent"))
        assert config.storage_file == "todos.json"
        assert config.storage_path == Path("todos.json")
        assert config.default_format == "text"
        assert config.atomic_save is False
        assert config.log_level == "WARNING"

    def test_unknown_attribute(self):
        config = Config(Path("/tmp/tada-test-nonexistent"))
        with pytest.raises(AttributeError):
            config.no_such_setting


class TestConfigDir:
    def test_env_config_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TADA_CONFIG_DIR", str(tmp_path))
        assert get_default_config_dir() == tmp_path

    def test_home_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_default_config_dir() == tmp_path / ".config" / "tada"


class TestConfigLoad:
    def test_load_from_file(self, tmp_path: Path):
        config_dir = tmp_path / "tada"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(
            json.dumps({"atomic_save": True, "default_format": "table"})
        )

        config = Config.load(config_dir)

        assert config.atomic_save is True
        assert config.default_format == "table"

    def test_load_nonexistent_uses_defaults(self, tmp_path: Path):
        config = Config.load(tmp_path / "nonexistent")
        assert config.default_format == "text"

    def test_corrupted_file_uses_defaults(self, tmp_path: Path):
        (tmp_path / "config.json").write_text("{ invalid json }")
        assert Config.load(tmp_path).storage_file == "todos.json"

    def test_empty_file_uses_defaults(self, tmp_path: Path):
        (tmp_path / "config.json").write_text("")
        assert Config.load(tmp_path).storage_file == "todos.json"

    def test_non_object_file_uses_defaults(self, tmp_path: Path):
        (tmp_path / "config.json").write_text("[1, 2]")
        assert Config.load(tmp_path).default_format == "text"

    def test_default_dir_is_cached(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TADA_CONFIG_DIR", str(tmp_path))
        first = Config.load()
        assert Config.load() is first

        clear_config_cache()

        assert Config.load() is not first


class TestConfigEnvOverrides:
    def test_env_overrides_bool(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TADA_ATOMIC_SAVE", "yes")
        assert Config.load(tmp_path).atomic_save is True

    def test_env_overrides_string(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("TADA_STORAGE_FILE", "work.json")
        assert Config.load(tmp_path).storage_path == Path("work.json")

    def test_env_beats_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "config.json").write_text(json.dumps({"default_format": "table"}))
        monkeypatch.setenv("TADA_DEFAULT_FORMAT", "jsonl")
        assert Config.load(tmp_path).default_format == "jsonl"
