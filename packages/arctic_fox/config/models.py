"""Typed configuration models for Arctic Fox runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "arctic_fox" / "arctic_fox.yaml"

DEFAULT_SYMBOLS = "!@#$%^&*()_-+="
DEFAULT_SUCCESS_MESSAGE = "The Request is Successful"
DEFAULT_FALLBACK_BODY = "Something went wrong..."


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "arctic_fox"
    environment: str = "dev"


class HasherSettings(BaseModel):
    """Argon2id work factor for the credential hasher."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    time_cost: int = Field(default=3, ge=1)
    memory_cost: int = Field(default=65536, ge=8)
    parallelism: int = Field(default=4, ge=1)
    hash_len: int = Field(default=32, ge=4)
    salt_len: int = Field(default=16, ge=8)

    @model_validator(mode="after")
    def _enforce_memory_floor(self) -> "HasherSettings":
        """Argon2 requires at least 8 KiB of memory per lane."""
        if self.memory_cost < 8 * self.parallelism:
            raise ValueError("memory_cost must be at least 8 * parallelism")
        return self


class PasswordPolicySettings(BaseModel):
    """Password strength rules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_length: int = Field(default=8, ge=1)
    max_length: int = Field(default=32, ge=1)
    max_repeat: int = Field(default=2, ge=1)
    symbols: str = DEFAULT_SYMBOLS

    @field_validator("symbols")
    @classmethod
    def _validate_symbols(cls, value: str) -> str:
        """Reject blank symbol sets and symbols that are letters, digits or whitespace."""
        if value == "":
            raise ValueError("symbols must be non-empty")
        for char in value:
            if char.isalnum() or char.isspace():
                raise ValueError(f"symbols must not contain {char!r}")
        return value

    @model_validator(mode="after")
    def _enforce_length_bounds(self) -> "PasswordPolicySettings":
        """Reject inverted length bounds."""
        if self.min_length > self.max_length:
            raise ValueError("min_length must not exceed max_length")
        return self


class ResponseSettings(BaseModel):
    """Rendering messages for the serialization adapter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    success_message: str = Field(default=DEFAULT_SUCCESS_MESSAGE, min_length=1)
    fallback_body: str = Field(default=DEFAULT_FALLBACK_BODY, min_length=1)


class ArcticFoxSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/default sources."""

    model_config = SettingsConfigDict(
        env_prefix="ARCTIC_FOX_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
        yaml_file=DEFAULT_CONFIG_PATH,
        yaml_file_encoding="utf-8",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    hasher: HasherSettings = Field(default_factory=HasherSettings)
    password: PasswordPolicySettings = Field(default_factory=PasswordPolicySettings)
    response: ResponseSettings = Field(default_factory=ResponseSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )
