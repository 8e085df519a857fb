# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_DEFAULT_METHODS = ["GET", "HEAD", "POST", "PUT", "OPTIONS"]
_DEFAULT_HEADERS = ["X-Requested-With", "Content-Type", "Authorization"]


def _split_csv(value: str | list[str]) -> list[str]:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


class CorsConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        ["*"], alias="CORS_ALLOWED_ORIGINS"
    )
    allowed_methods: Annotated[list[str], NoDecode] = Field(
        _DEFAULT_METHODS, alias="CORS_ALLOWED_METHODS"
    )
    allowed_headers: Annotated[list[str], NoDecode] = Field(
        _DEFAULT_HEADERS, alias="CORS_ALLOWED_HEADERS"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )

    @field_validator("allowed_origins", "allowed_headers", mode="before")
    @classmethod
    def _parse_list(cls, value: str | list[str]) -> list[str]:
        return _split_csv(value)

    @field_validator("allowed_methods", mode="before")
    @classmethod
    def _parse_methods(cls, value: str | list[str]) -> list[str]:
        return [method.upper() for method in _split_csv(value)]


def _cors_config_factory() -> CorsConfig:
    return CorsConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(8080, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Path | None = Field(None, alias="LOG_FILE")

    cors: CorsConfig = Field(default_factory=_cors_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("log_level", mode="after")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("log_file", mode="before")
    @classmethod
    def _empty_log_file(cls, value: str | Path | None) -> str | Path | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def _warn_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if "*" in self.cors.allowed_origins:
            print(
                "\n⚠️  PRODUCTION SECURITY WARNING: CORS allows wildcard (*) origins\n",
                file=sys.stderr,
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "CorsConfig", "load_config"]
