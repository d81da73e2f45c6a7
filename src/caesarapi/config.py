from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

ENVIRONMENTS = ("development", "production", "test")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    database_url: str
    port: int = 3000
    host: str = "127.0.0.1"
    environment: str = "development"
    log_level: str = "INFO"

    @property
    def public_url(self) -> str:
        return f"http://localhost:{self.port}"


def _parse_port(raw: Optional[str], problems: list[str]) -> int:
    if raw is None or raw == "":
        return 3000
    try:
        port = int(raw)
    except ValueError:
        problems.append(f"  - PORT: expected an integer, got {raw!r}")
        return 0
    if port <= 0:
        problems.append(f"  - PORT: must be positive, got {port}")
    return port


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    When environ is None, a local .env file is loaded first (without overriding
    variables already set) and os.environ is read.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    problems: list[str] = []

    port = _parse_port(environ.get("PORT"), problems)

    database_url = environ.get("DATABASE_URL", "").strip()
    if not database_url:
        problems.append("  - DATABASE_URL: required")
    else:
        try:
            make_url(database_url)
        except ArgumentError:
            problems.append("  - DATABASE_URL: not a valid database URL")

    environment = (environ.get("APP_ENV") or environ.get("NODE_ENV") or "development").strip().lower()
    if environment not in ENVIRONMENTS:
        problems.append(f"  - APP_ENV: expected one of {', '.join(ENVIRONMENTS)}, got {environment!r}")

    log_level = (environ.get("LOG_LEVEL") or "INFO").strip().upper()
    if log_level not in LOG_LEVELS:
        problems.append(f"  - LOG_LEVEL: expected one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    if problems:
        raise ConfigError(
            "Configuration validation failed. Please check your environment variables:\n"
            + "\n".join(problems)
            + "\n\nSee .env.example for required variables and their defaults."
        )

    return Settings(
        database_url=database_url,
        port=port,
        host=(environ.get("HOST") or "127.0.0.1").strip(),
        environment=environment,
        log_level=log_level,
    )
