# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_MIN_SECRET_LENGTH = 32
_DEV_SECRET = "dev-secret-change-me-dev-secret-change-me"


def _env_config() -> SettingsConfigDict:
    return SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
    )


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///blog.db", alias="DATABASE_URL")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")
    echo: bool = Field(False, alias="DATABASE_ECHO")

    model_config = _env_config()

    @field_validator("echo", mode="before")
    @classmethod
    def _parse_echo(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class ServerConfig(BaseSettings):
    http_host: str = Field("0.0.0.0", alias="HTTP_HOST")
    http_port: int = Field(3000, ge=0, le=65535, alias="HTTP_PORT")
    grpc_host: str = Field("0.0.0.0", alias="GRPC_HOST")
    grpc_port: int = Field(50051, ge=0, le=65535, alias="GRPC_PORT")
    grpc_max_workers: int = Field(10, ge=1, alias="GRPC_MAX_WORKERS")

    model_config = _env_config()


class SecurityConfig(BaseSettings):
    jwt_secret: str = Field(_DEV_SECRET, alias="JWT_SECRET")
    token_ttl_hours: int = Field(24, ge=1, alias="TOKEN_TTL_HOURS")

    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        ["http://localhost:8000", "http://127.0.0.1:8000"],
        alias="CORS_ALLOWED_ORIGINS",
    )

    model_config = _env_config()

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value


class ClientConfig(BaseSettings):
    server: str | None = Field(None, alias="BLOG_SERVER")
    token_file: Path = Field(Path.home() / ".blog_token", alias="BLOG_TOKEN_FILE")
    timeout: float = Field(10.0, gt=0, alias="BLOG_CLIENT_TIMEOUT")

    model_config = _env_config()


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _server_config_factory() -> ServerConfig:
    return ServerConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    server: ServerConfig = Field(default_factory=_server_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        secret = self.security.jwt_secret
        if secret == _DEV_SECRET or len(secret) < _MIN_SECRET_LENGTH:
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                f"   JWT_SECRET must be a random value of at least {_MIN_SECRET_LENGTH} characters.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(48))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        if "*" in self.security.allowed_origins:
            print(
                "\n⚠️  PRODUCTION SECURITY WARNING: CORS allows wildcard (*) origins\n",
                file=sys.stderr,
            )

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def secret_is_weak(self) -> bool:
        return len(self.security.jwt_secret) < _MIN_SECRET_LENGTH


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "ClientConfig", "DatabaseConfig", "SecurityConfig", "ServerConfig", "load_config"]
