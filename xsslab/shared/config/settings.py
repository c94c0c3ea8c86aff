# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

TOKEN_LIFETIME_SECONDS = 7 * 24 * 60 * 60
_INSECURE_SECRETS = ("dev", "development", "test", "secret", "")


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///xsslab.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(env_file=".env", validate_by_name=True, extra="ignore")


class SecurityConfig(BaseSettings):
    # Cookie transport for the session token
    cookie_secure: bool = Field(False, alias="COOKIE_SECURE")
    cookie_samesite: str = Field("Lax", alias="COOKIE_SAMESITE")
    token_lifetime: int = Field(TOKEN_LIFETIME_SECONDS, ge=1, alias="TOKEN_LIFETIME_SECONDS")

    model_config = SettingsConfigDict(env_file=".env", validate_by_name=True, extra="ignore")

    @field_validator("cookie_secure", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("cookie_samesite", mode="before")
    @classmethod
    def _normalize_samesite(cls, value: str) -> str:
        normalized = str(value).strip().capitalize()
        if normalized not in ("Lax", "Strict", "None"):
            raise ValueError("COOKIE_SAMESITE must be one of Lax, Strict, None")
        return normalized

    @model_validator(mode="after")
    def _none_requires_secure(self) -> "SecurityConfig":
        # Browsers drop SameSite=None cookies that are not Secure.
        if self.cookie_samesite == "None" and not self.cookie_secure:
            self.cookie_secure = True
        return self


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    secret_key: str = Field("xsslab-development-secret-change-me-0001", alias="JWT_SECRET")
    cors_origin: str = Field("*", alias="CORS_ORIGIN")
    api_version: str = Field("1.0.0", alias="API_VERSION")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    password_hasher: str = Field("werkzeug", alias="PASSWORD_HASHER")
    lab_delete_all_enabled: bool = Field(False, alias="LAB_DELETE_ALL_ENABLED")
    metrics_enabled: bool = Field(False, alias="METRICS_ENABLED")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        validate_by_name=True,
        extra="ignore",
    )

    @field_validator("debug_logging", "lab_delete_all_enabled", "metrics_enabled", mode="before")
    @classmethod
    def _parse_bool(cls, value: str | bool) -> bool:
        if isinstance(value, str):
            return value.lower() in ("1", "true", "yes")
        return bool(value)

    @field_validator("password_hasher", mode="after")
    @classmethod
    def _check_hasher(cls, value: str) -> str:
        value = value.lower()
        if value not in ("werkzeug", "sha256"):
            raise ValueError("PASSWORD_HASHER must be 'werkzeug' or 'sha256'")
        return value

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.secret_key in _INSECURE_SECRETS or self.secret_key.startswith("xsslab-development"):
            print(
                "\n❌ CRITICAL SECURITY ERROR: Insecure JWT_SECRET detected in production!\n"
                "   JWT_SECRET must be a strong random value in production.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
            sys.exit(1)

        warnings = []
        if not self.security.cookie_secure:
            warnings.append("⚠️  Cookie Secure flag is DISABLED (use HTTPS!)")
        if "*" in self.allowed_origins:
            warnings.append("⚠️  CORS allows wildcard (*) origins")
        if self.password_hasher == "sha256":
            warnings.append("⚠️  Passwords are stored as unsalted SHA-256 digests")
        if self.lab_delete_all_enabled:
            warnings.append("⚠️  Unauthenticated DELETE /api/posts is ENABLED")

        if warnings:
            print("\n⚠️  PRODUCTION SECURITY WARNINGS:", file=sys.stderr)
            for warning in warnings:
                print(f"   {warning}", file=sys.stderr)
            print(
                "   This service is an intentionally vulnerable training target.\n",
                file=sys.stderr,
            )

        return self

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "TOKEN_LIFETIME_SECONDS", "load_config"]
