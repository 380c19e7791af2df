"""Unit tests for configuration loading."""

import logging

import logfire
import pytest
from pydantic import ValidationError

from flv_reader.domain import PreviousTagSizeCheck
from flv_reader.infrastructure.config import DecoderConfig, Settings, get_settings
from flv_reader.infrastructure.observability import configure_logfire, configure_logging
from flv_reader.infrastructure.streaming.flv_stream import FLVStreamProcessor


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.app.name == "flv-reader"
        assert settings.decoder.chunk_size == 65536
        assert settings.decoder.previous_tag_size_check is PreviousTagSizeCheck.OFF
        assert settings.decoder.skip_to_data_offset is False
        assert settings.logfire.enabled is False

    def test_nested_env_vars(self, monkeypatch):
        monkeypatch.setenv("FLV_READER_DECODER__CHUNK_SIZE", "4096")
        monkeypatch.setenv("FLV_READER_DECODER__PREVIOUS_TAG_SIZE_CHECK", "strict")
        monkeypatch.setenv("FLV_READER_LOGGING__LEVEL", "DEBUG")

        settings = Settings()

        assert settings.decoder.chunk_size == 4096
        assert settings.decoder.previous_tag_size_check is PreviousTagSizeCheck.STRICT
        assert settings.logging.level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_processor_falls_back_to_settings(self, monkeypatch):
        monkeypatch.setenv("FLV_READER_DECODER__PREVIOUS_TAG_SIZE_CHECK", "warn")

        processor = FLVStreamProcessor()

        assert processor.validator.mode is PreviousTagSizeCheck.WARN

    def test_chunk_size_must_be_positive(self):
        with pytest.raises(ValidationError):
            DecoderConfig(chunk_size=0)

    def test_invalid_check_mode(self):
        with pytest.raises(ValidationError):
            DecoderConfig(previous_tag_size_check="sometimes")

    def test_logfire_defaults_follow_app(self):
        settings = Settings()

        assert settings.logfire_env == "development"
        assert settings.logfire_version == "0.1.0"


class TestObservabilitySetup:
    def test_configure_logging_sets_level(self, monkeypatch):
        root = logging.getLogger()
        previous = root.level
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setenv("FLV_READER_LOGGING__LEVEL", "debug")

        try:
            configure_logging()
            assert root.level == logging.DEBUG
        finally:
            root.setLevel(previous)

    def test_configure_logfire_disabled(self, caplog):
        caplog.set_level(logging.INFO)

        configure_logfire(Settings())

        assert "Logfire is disabled in configuration" in caplog.text

    def test_configure_logfire_disabled_stays_local(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logfire, "configure", lambda **kwargs: calls.append(kwargs))

        configure_logfire(Settings())

        assert calls == [{"send_to_logfire": False, "console": False}]

    def test_configure_logfire_enabled(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logfire, "configure", lambda **kwargs: calls.append(kwargs))
        monkeypatch.setenv("FLV_READER_LOGFIRE__ENABLED", "true")
        monkeypatch.setenv("FLV_READER_LOGFIRE__API_KEY", "secret-token")
        monkeypatch.setenv("FLV_READER_LOGFIRE__CONSOLE_ENABLED", "false")

        configure_logfire(Settings())

        assert calls[0]["send_to_logfire"] == "if-token-present"
        assert calls[0]["token"] == "secret-token"
        assert calls[0]["console"] is False
