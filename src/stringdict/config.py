"""Runtime settings for the stringdict package."""

import os

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    KEY_PREFIX: str = Field(
        "string-dict_",
        min_length=1,
        description="Prefix prepended to every key before it reaches storage.",
    )
    LOG_LEVEL: str = Field("INFO", description="Level of the package logger.")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got '{value}'")
        return value

    @classmethod
    def load(cls) -> "Settings":
        overrides = {}

        key_prefix = os.getenv("STRINGDICT_KEY_PREFIX")
        if key_prefix is not None:
            overrides["KEY_PREFIX"] = key_prefix

        log_level = os.getenv("LOG_LEVEL")
        if log_level is not None:
            overrides["LOG_LEVEL"] = log_level

        return cls(**overrides)


settings = Settings.load()
