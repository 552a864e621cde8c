import json
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator, model_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: str = Field(default="local", alias="ENV")
    database_url: str = Field(alias="DATABASE_URL")
    db_pool_pre_ping: bool = Field(default=True, alias="DB_POOL_PRE_PING")

    cors_origins: str = Field(default="http://localhost:5173", alias="CORS_ORIGINS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # ─────────────────────────────────────────────
    # Listing endpoints
    # ─────────────────────────────────────────────
    pagination_default_limit: int = Field(default=10, alias="PAGINATION_DEFAULT_LIMIT", ge=1)
    pagination_max_limit: int = Field(default=100, alias="PAGINATION_MAX_LIMIT", ge=1)

    @field_validator("database_url", mode="before")
    @classmethod
    def normalize_database_url(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        cleaned = value.strip()
        if cleaned.startswith("postgres://"):
            cleaned = f"postgresql://{cleaned[len('postgres://'):]}"
        if cleaned.startswith("postgresql://") and not cleaned.startswith("postgresql+"):
            cleaned = cleaned.replace("postgresql://", "postgresql+asyncpg://", 1)
        return cleaned

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if not isinstance(value, str):
            return value
        return value.strip().upper()

    @model_validator(mode="after")
    def validate_limits(self) -> "Settings":
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {self.log_level!r}")
        if self.pagination_default_limit > self.pagination_max_limit:
            raise ValueError("PAGINATION_DEFAULT_LIMIT must not exceed PAGINATION_MAX_LIMIT")
        return self

    def cors_origin_list(self) -> list[str]:
        raw = (self.cors_origins or "").strip()
        if not raw:
            return []

        values: list[str]
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                parsed = None
            if isinstance(parsed, list):
                values = [str(v) for v in parsed if isinstance(v, str)]
            else:
                values = [raw]
        else:
            values = raw.split(",")

        normalized: list[str] = []
        seen: set[str] = set()
        for value in values:
            cleaned = value.strip().strip("\"'")
            if not cleaned:
                continue
            # CORS origins are scheme + host (+ optional port) with no path slash.
            if cleaned != "*" and cleaned.endswith("/"):
                cleaned = cleaned.rstrip("/")
            if cleaned in seen:
                continue
            seen.add(cleaned)
            normalized.append(cleaned)

        return normalized

settings = Settings()
