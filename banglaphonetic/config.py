"""
Engine configuration.

Settings are read from ``BANGLAPHONETIC_*`` environment variables or a
``.env`` file in the working directory.
"""
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from banglaphonetic.log import configure_logging


class EngineSettings(BaseSettings):
    """
    Settings for a phonetic engine.

    MAX_BUFFER_LENGTH bounds the per-session keystroke history. It must be
    at least as long as the longest lexicon token (4 characters allowed).
    """

    model_config = SettingsConfigDict(
        env_prefix="BANGLAPHONETIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    MAX_BUFFER_LENGTH: int = Field(default=64, ge=4)

    # Map a vowel typed at the start of the buffer to its independent letter
    STANDALONE_VOWELS: bool = False

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


@lru_cache()
def get_settings():
    settings = EngineSettings()
    configure_logging(settings.LOG_LEVEL)
    return settings
