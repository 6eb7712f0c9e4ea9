# text_analyzer/config.py
"""
Service settings, read from the environment (and a local .env file if present).

All variables are optional and prefixed with TEXT_ANALYZER_, e.g.
TEXT_ANALYZER_PORT=8082 or TEXT_ANALYZER_LOCALE=en.
"""
import logging
import os
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from text_analyzer.services.analyzer import AnalyzerConfig
from text_analyzer.services.reading_time import LOCALES, READING_MODELS

load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "TEXT_ANALYZER_"
FREQUENT_WORDS_SHAPES = ("pairs", "mapping")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8082
    log_level: str = "INFO"
    log_dir: str = "logs"
    reading_model: str = "adaptive"
    locale: str = "ru"
    top_n: int = Field(default=2, ge=0)
    frequent_words_shape: str = "pairs"
    max_text_length: int = Field(default=1_000_000, gt=0)
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("reading_model")
    @classmethod
    def _check_reading_model(cls, value: str) -> str:
        if value not in READING_MODELS:
            raise ValueError(f"must be one of: {', '.join(READING_MODELS)}")
        return value

    @field_validator("locale")
    @classmethod
    def _check_locale(cls, value: str) -> str:
        if value not in LOCALES:
            raise ValueError(f"must be one of: {', '.join(sorted(LOCALES))}")
        return value

    @field_validator("frequent_words_shape")
    @classmethod
    def _check_shape(cls, value: str) -> str:
        if value not in FREQUENT_WORDS_SHAPES:
            raise ValueError(f"must be one of: {', '.join(FREQUENT_WORDS_SHAPES)}")
        return value

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    def analyzer_config(self) -> AnalyzerConfig:
        return AnalyzerConfig(
            top_n=self.top_n,
            reading_model=self.reading_model,
            locale=self.locale,
        )


def _read_env() -> dict:
    values = {}
    for name in Settings.model_fields:
        raw = os.environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw.strip() != "":
            values[name] = raw.strip()
    return values


def get_settings() -> Settings:
    """Build settings from the current environment. Invalid values raise ValueError."""
    try:
        return Settings(**_read_env())
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        logger.error("Invalid configuration: %s", e)
        raise
