"""Tests for configuration loading."""

from __future__ import annotations

import json

import pytest

from transchoice.config import TransChoiceConfig, load_config
from transchoice.exceptions import ConfigError, ConfigSourceError


# =============================================================================
# Defaults and Validation
# =============================================================================


class TestTransChoiceConfig:

    def test_defaults(self):
        config = TransChoiceConfig()
        assert config.default_locale == "en"
        assert config.apply_replacements is False
        assert config.log_level == "WARNING"

    def test_log_level_is_normalized(self):
        assert TransChoiceConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("value, expected", [("yes", True), ("0", False), (True, True)])
    def test_boolean_parsing(self, value, expected):
        assert TransChoiceConfig(apply_replacements=value).apply_replacements is expected

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"default_locale": ""},
            {"default_locale": "   "},
            {"default_locale": None},
            {"log_level": "LOUD"},
            {"log_level": 10},
            {"apply_replacements": "maybe"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigError):
            TransChoiceConfig(**kwargs)

    def test_from_dict_ignores_unknown_keys(self):
        config = TransChoiceConfig.from_dict({"default_locale": "fr", "colour": "blue"})
        assert config.default_locale == "fr"

    def test_to_dict(self):
        assert TransChoiceConfig().to_dict() == {
            "default_locale": "en",
            "apply_replacements": False,
            "log_level": "WARNING",
        }

    def test_is_frozen(self):
        config = TransChoiceConfig()
        with pytest.raises(AttributeError):
            config.default_locale = "ru"


# =============================================================================
# Sources
# =============================================================================


class TestFromEnv:

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TRANSCHOICE_DEFAULT_LOCALE", "pl")
        monkeypatch.setenv("TRANSCHOICE_APPLY_REPLACEMENTS", "true")
        config = TransChoiceConfig.from_env()
        assert config.default_locale == "pl"
        assert config.apply_replacements is True
        assert config.log_level == "WARNING"

    def test_empty_values_are_ignored(self, monkeypatch):
        monkeypatch.setenv("TRANSCHOICE_DEFAULT_LOCALE", "")
        assert TransChoiceConfig.from_env().default_locale == "en"


class TestFromFile:

    def test_yaml_with_section(self, tmp_path):
        path = tmp_path / "transchoice.yaml"
        path.write_text("transchoice:\n  default_locale: ru\n  apply_replacements: true\n")
        config = TransChoiceConfig.from_file(path)
        assert config.default_locale == "ru"
        assert config.apply_replacements is True

    def test_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"default_locale": "ar", "log_level": "info"}))
        config = TransChoiceConfig.from_file(path)
        assert config.default_locale == "ar"
        assert config.log_level == "INFO"

    def test_toml(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text('[transchoice]\ndefault_locale = "cy"\n')
        assert TransChoiceConfig.from_file(path).default_locale == "cy"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigSourceError, match="not found"):
            TransChoiceConfig.from_file(tmp_path / "missing.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "config.ini"
        path.write_text("[transchoice]\n")
        with pytest.raises(ConfigSourceError, match="Unsupported"):
            TransChoiceConfig.from_file(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_locale: [unclosed\n")
        with pytest.raises(ConfigSourceError):
            TransChoiceConfig.from_file(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- en\n- ru\n")
        with pytest.raises(ConfigSourceError, match="mapping"):
            TransChoiceConfig.from_file(path)

    def test_config_error_is_library_error(self, tmp_path):
        from transchoice.exceptions import TransChoiceError

        with pytest.raises(TransChoiceError):
            TransChoiceConfig.from_file(tmp_path / "missing.json")


class TestLoadConfig:

    def test_defaults_without_file(self):
        assert load_config() == TransChoiceConfig()

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "transchoice.yml"
        path.write_text("default_locale: ru\nlog_level: ERROR\n")
        monkeypatch.setenv("TRANSCHOICE_DEFAULT_LOCALE", "uk")

        config = load_config(path)
        assert config.default_locale == "uk"
        assert config.log_level == "ERROR"
