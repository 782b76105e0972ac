"""Tests for configuration loading, overrides and saving."""

import pytest

from bookstore.core.config import (
    BookstoreConfig,
    ConfigManager,
    ConfigurationValidationError,
    InvalidConfigurationError,
    LogLevel,
    default_config_file,
)


class TestLoadConfig:

    def test_defaults_when_file_missing(self, config_file):
        config = ConfigManager(config_file).load_config()
        assert config.general.logging.level is LogLevel.WARNING
        assert config.general.logging.output == ["console"]
        assert config.general.shell.show_welcome is False

    def test_default_location_is_under_home(self, tmp_path):
        assert default_config_file() == tmp_path / "home" / ".config" / "bookstore" / "config.toml"
        assert ConfigManager().config_file == default_config_file()

    def test_reads_toml_file(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            '[general.logging]\nlevel = "debug"\nformat = "json"\n\n'
            "[general.shell]\nshow_welcome = true\n"
        )
        config = ConfigManager(config_file).load_config()
        assert config.general.logging.level is LogLevel.DEBUG
        assert config.general.logging.format == "json"
        assert config.general.shell.show_welcome is True

    def test_config_is_cached(self, config_file):
        manager = ConfigManager(config_file)
        assert manager.load_config() is manager.load_config()

    def test_environment_overrides(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKSTORE_LOGGING_LEVEL", "INFO")
        monkeypatch.setenv("BOOKSTORE_LOGGING_OUTPUT", "console, file")
        monkeypatch.setenv("BOOKSTORE_LOGGING_FILE_PATH", "/tmp/bookstore.log")
        monkeypatch.setenv("BOOKSTORE_SHOW_WELCOME", "1")
        config = ConfigManager(config_file).load_config()
        assert config.general.logging.level is LogLevel.INFO
        assert config.general.logging.output == ["console", "file"]
        assert str(config.general.logging.file_path) == "/tmp/bookstore.log"
        assert config.general.shell.show_welcome is True

    def test_malformed_environment_override(self, config_file, monkeypatch):
        monkeypatch.setenv("BOOKSTORE_SHOW_WELCOME", "maybe")
        with pytest.raises(ConfigurationValidationError):
            ConfigManager(config_file).load_config()

    def test_dotenv_file_is_not_read(self, config_file, tmp_path):
        (tmp_path / ".env").write_text("BOOKSTORE_SHOW_WELCOME=true\nBOOKSTORE_LOGGING_LEVEL=DEBUG\n")
        config = ConfigManager(config_file).load_config()
        assert config.general.shell.show_welcome is False
        assert config.general.logging.level is LogLevel.WARNING

    def test_invalid_value(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text('[general.logging]\nformat = "xml"\n')
        with pytest.raises(ConfigurationValidationError) as exc_info:
            ConfigManager(config_file).load_config()
        assert "format must be one of" in exc_info.value.message

    def test_unknown_section_rejected(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("[inventory]\nseed = true\n")
        with pytest.raises(ConfigurationValidationError):
            ConfigManager(config_file).load_config()

    def test_invalid_toml(self, config_file):
        config_file.parent.mkdir(parents=True)
        config_file.write_text("this is = = not toml")
        with pytest.raises(InvalidConfigurationError):
            ConfigManager(config_file).load_config()


class TestSaveConfig:

    def test_reset_writes_loadable_defaults(self, config_file):
        path = ConfigManager(config_file).reset_config()
        assert path == config_file
        reloaded = ConfigManager(config_file).load_config()
        assert reloaded == BookstoreConfig()

    def test_save_round_trips_changes(self, config_file):
        manager = ConfigManager(config_file)
        config = manager.load_config()
        config.general.logging.level = LogLevel.ERROR
        manager.save_config(config)
        assert ConfigManager(config_file).load_config().general.logging.level is LogLevel.ERROR
