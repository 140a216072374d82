# tests/test_config.py
"""Tests for engine settings."""

import pytest
from pydantic import ValidationError

from banglaphonetic.config import EngineSettings


def test_defaults():
    settings = EngineSettings(_env_file=None)

    assert settings.MAX_BUFFER_LENGTH == 64
    assert settings.STANDALONE_VOWELS is False
    assert settings.LOG_LEVEL == "WARNING"


def test_from_environment(monkeypatch):
    monkeypatch.setenv("BANGLAPHONETIC_MAX_BUFFER_LENGTH", "16")
    monkeypatch.setenv("BANGLAPHONETIC_STANDALONE_VOWELS", "true")

    settings = EngineSettings(_env_file=None)

    assert settings.MAX_BUFFER_LENGTH == 16
    assert settings.STANDALONE_VOWELS is True


def test_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("BANGLAPHONETIC_LOG_LEVEL=DEBUG\n")

    settings = EngineSettings(_env_file=str(env_file))

    assert settings.LOG_LEVEL == "DEBUG"


def test_buffer_length_lower_bound():
    with pytest.raises(ValidationError):
        EngineSettings(_env_file=None, MAX_BUFFER_LENGTH=3)


def test_log_level_is_upper_cased():
    assert EngineSettings(_env_file=None, LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        EngineSettings(_env_file=None, LOG_LEVEL="LOUD")


def test_unknown_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("BANGLAPHONETIC_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError):
        EngineSettings(_env_file=None)
