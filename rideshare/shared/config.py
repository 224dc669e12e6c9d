from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    postgres_dsn: str
    access_token_secret: str
    access_token_ttl_hours: int
    google_client_id: str
    cors_allow_origins: tuple[str, ...]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        postgres_dsn=_env("POSTGRES_DSN", ""),
        access_token_secret=_env("ACCESS_TOKEN_SECRET", ""),
        access_token_ttl_hours=int(_env("ACCESS_TOKEN_TTL_HOURS", "24")),
        google_client_id=_env("GOOGLE_CLIENT_ID", ""),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
