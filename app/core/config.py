# app/core/config.py
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List

DEFAULT_DATABASE_URL = "sqlite:///./inspection.db"
DEFAULT_PORT = 3000


def _parse_csv_env(s: str) -> list[str]:
    parts = [p.strip() for p in (s or "").split(",")]
    return [p for p in parts if p]


def _parse_bool(s: str) -> bool:
    return s.strip().lower() in ("1", "true", "yes", "on")


def normalize_database_url(url: str) -> str:
    # Hosted Postgres providers still hand out the legacy scheme
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    require_encrypted_transport: bool = False
    listen_port: int = DEFAULT_PORT
    environment_name: str = "development"
    allowed_origins: List[str] = field(default_factory=lambda: ["*"])

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read the process environment once at startup.

        DATABASE_URL          connection string (default: local SQLite file)
        ENVIRONMENT           environment name (default: development)
        DATABASE_REQUIRE_SSL  force/disable encrypted transport; defaults to
                              true only when ENVIRONMENT is "production"
        PORT                  listen port (default: 3000)
        ALLOWED_ORIGINS       comma separated CORS origins (default: *)
        """
        environment_name = os.getenv("ENVIRONMENT", "development").strip() or "development"

        ssl_env = os.getenv("DATABASE_REQUIRE_SSL")
        if ssl_env is None or not ssl_env.strip():
            require_ssl = environment_name == "production"
        else:
            require_ssl = _parse_bool(ssl_env)

        port_env = os.getenv("PORT", str(DEFAULT_PORT))
        try:
            listen_port = int(port_env)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port_env!r}")

        origins_env = os.getenv("ALLOWED_ORIGINS", "*")
        allowed_origins = ["*"] if origins_env.strip() == "*" else _parse_csv_env(origins_env)

        return cls(
            database_url=normalize_database_url(os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)),
            require_encrypted_transport=require_ssl,
            listen_port=listen_port,
            environment_name=environment_name,
            allowed_origins=allowed_origins,
        )
