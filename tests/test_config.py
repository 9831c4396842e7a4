"""
設定読み込みのテスト
"""
import dataclasses
from unittest.mock import patch

import pytest

from src.config import AppConfig, load_config
from src.constants import GEMINI_MODEL_NAME


class TestLoadConfig:
    """load_config関数のテスト"""

    def test_defaults(self, monkeypatch):
        for name in ("GEMINI_API_KEY", "GEMINI_MODEL_NAME", "APP_LOCALE", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        config = load_config()

        assert config.gemini_api_key is None
        assert config.gemini_configured is False
        assert config.model_name == GEMINI_MODEL_NAME
        assert config.locale == "tr"
        assert config.series_length == 100
        assert config.analysis_window == 40
        assert config.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        monkeypatch.setenv("GEMINI_MODEL_NAME", "gemini-test")
        monkeypatch.setenv("APP_LOCALE", "EN")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = load_config()

        assert config.gemini_api_key == "env-key"
        assert config.model_name == "gemini-test"
        assert config.locale == "en"
        assert config.log_level == "DEBUG"

    def test_explicit_key_wins(self, monkeypatch):
        """引数のAPIキーが環境変数より優先される"""
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        assert load_config(api_key="typed-key").gemini_api_key == "typed-key"

    def test_secrets_before_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        with patch("src.config._read_secret", side_effect=lambda name: "secret-key" if name == "GEMINI_API_KEY" else None):
            assert load_config().gemini_api_key == "secret-key"

    def test_unsupported_locale_falls_back(self, monkeypatch):
        monkeypatch.setenv("APP_LOCALE", "de")
        assert load_config().locale == "tr"

    def test_config_is_immutable(self):
        config = AppConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.locale = "en"
