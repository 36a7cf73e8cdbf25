"""Tests for dirpane.config module."""

from pathlib import Path

import pytest

from dirpane.config import Config, get_config_dir


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Point config loading at a temporary directory."""
    config_dir = tmp_path / ".config" / "dirpane"
    monkeypatch.setattr("dirpane.config.get_config_dir", lambda: config_dir)
    monkeypatch.setattr("dirpane.config.get_config_path", lambda: config_dir / "config.toml")
    return config_dir


class TestConfigDefaults:
    def test_default_start_directory(self):
        config = Config()
        assert config.start_directory == Path.home()

    def test_default_show_hidden(self):
        assert Config().show_hidden is False

    def test_default_finder_timeout(self):
        assert Config().finder_timeout == 1.0

    def test_default_watch(self):
        config = Config()
        assert config.watch is True
        assert config.watch_debounce == 0.5

    def test_default_logging(self):
        config = Config()
        assert config.log_file == ""
        assert config.log_level == "INFO"

    def test_config_dir_location(self):
        assert get_config_dir() == Path.home() / ".config" / "dirpane"


class TestConfigSaveLoad:
    def test_save_creates_file(self, tmp_path, config_dir):
        Config(start_directory=tmp_path).save()
        assert (config_dir / "config.toml").exists()

    def test_round_trip(self, tmp_path, config_dir):
        original = Config(
            start_directory=tmp_path / "work",
            show_hidden=True,
            finder_timeout=0.75,
            watch=False,
            watch_debounce=0.2,
            confirm_delete=False,
            log_file=str(tmp_path / "dirpane.log"),
            log_level="DEBUG",
        )
        original.save()

        loaded = Config.load()
        assert loaded.start_directory == original.start_directory
        assert loaded.show_hidden is True
        assert loaded.finder_timeout == 0.75
        assert loaded.watch is False
        assert loaded.watch_debounce == 0.2
        assert loaded.confirm_delete is False
        assert loaded.log_file == original.log_file
        assert loaded.log_level == "DEBUG"

    def test_load_creates_defaults_when_missing(self, config_dir):
        config = Config.load()
        assert (config_dir / "config.toml").exists()
        assert config.show_hidden is False
        assert config.start_directory == Path.home()

    def test_load_partial_config(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text('show_hidden = true\n')

        config = Config.load()
        assert config.show_hidden is True
        assert config.start_directory == Path.home()
        assert config.finder_timeout == 1.0
        assert config.confirm_delete is True

    def test_load_expands_user(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text('start_directory = "~/projects"\n')

        config = Config.load()
        assert config.start_directory == Path.home() / "projects"

    def test_log_level_normalised(self, config_dir):
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text('log_level = "debug"\n')

        assert Config.load().log_level == "DEBUG"
