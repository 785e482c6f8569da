"""Promptbank settings, read from the environment and an optional ``.env``.

Names are case-insensitive: ``DATABASE_URL`` and ``database_url`` both set
``Settings.database_url``.
"""

from enum import Enum
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "dev-insecure-key-change-me"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class ConfigurationError(Exception):
    """Settings that must not reach a production deployment."""


class Settings(BaseSettings):
    environment: Environment = Environment.DEVELOPMENT

    # Comma-separated list; a wildcard is refused by get_cors_origins().
    cors_allowed_origins: str = "http://localhost:3000"

    # SQLite by default, any SQLAlchemy URL otherwise. Pool knobs only
    # apply to server databases.
    database_url: str = "sqlite:///./promptbank.db"
    db_pool_size: int = Field(5, ge=1)
    db_max_overflow: int = Field(10, ge=0)
    db_pool_timeout: int = Field(30, ge=1, description="Seconds to wait for a pooled connection")
    db_pool_recycle: int = Field(1800, description="Seconds before a pooled connection is replaced")

    # Session tokens
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    session_expiry_hours: int = Field(168, ge=1)
    min_password_length: int = Field(6, ge=1)

    default_folder_color: str = "#6366f1"

    # Token bucket per signed-in user (or per IP); 0 turns it off.
    rate_limit_per_minute: int = Field(120, ge=0)

    log_level: str = "INFO"
    log_format: str = Field("json", description="'json' or 'text'")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator("jwt_algorithm")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if v != "HS256":
            raise ValueError("Only HS256 is supported for JWT_ALGORITHM")
        return v

    def get_cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]
        if "*" in origins:
            raise ValueError("CORS_ALLOWED_ORIGINS may not contain '*'; list the origins explicitly")
        return origins

    def insecure_settings(self) -> List[str]:
        """Human-readable list of settings unfit for production."""
        problems = []
        if self.jwt_secret_key == DEFAULT_JWT_SECRET:
            problems.append("JWT_SECRET_KEY is the built-in default (generate one: openssl rand -hex 32)")
        local = [o for o in self.get_cors_origins() if "localhost" in o or "127.0.0.1" in o]
        if local:
            problems.append(f"CORS_ALLOWED_ORIGINS includes local origins: {', '.join(local)}")
        return problems

    def validate_production_config(self) -> None:
        """Raise ConfigurationError in production when insecure_settings() is non-empty."""
        if self.environment != Environment.PRODUCTION:
            return
        problems = self.insecure_settings()
        if problems:
            raise ConfigurationError("Refusing to start in production:\n  - " + "\n  - ".join(problems))

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


settings = Settings()
