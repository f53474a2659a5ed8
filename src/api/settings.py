"""Runtime settings read from environment variables (.env is loaded by api.main)."""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CORS_ORIGINS = ("http://localhost:4200", "https://localhost:5173")
DEVELOPMENT = "development"


def _split_csv(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    """
    environment: APP_ENV; seed data and /swagger are enabled only in development.
    cors_origins: CORS_ORIGINS, comma-separated.
    log_level: LOG_LEVEL.
    seed_path: overrides the seed file; None falls back to SEED_PATH or seeds/contacts.yaml.
    """

    environment: str = DEVELOPMENT
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"
    seed_path: Path | None = None

    @property
    def is_development(self) -> bool:
        return self.environment == DEVELOPMENT

    @classmethod
    def from_env(cls) -> "Settings":
        environment = os.environ.get("APP_ENV", DEVELOPMENT).strip().lower() or DEVELOPMENT
        origins = _split_csv(os.environ.get("CORS_ORIGINS", ""))
        log_level = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        return cls(
            environment=environment,
            cors_origins=origins or DEFAULT_CORS_ORIGINS,
            log_level=log_level,
        )
