"""Runtime settings, read once from environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """An environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    catalog_file: Path | None = None
    reserve_delay: float = 0.0
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8080

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ

        catalog_file = env.get("STOREFRONT_CATALOG_FILE") or None

        raw_delay = env.get("STOREFRONT_RESERVE_DELAY", "0")
        try:
            reserve_delay = float(raw_delay)
        except ValueError:
            raise ConfigurationError(
                f"STOREFRONT_RESERVE_DELAY must be a number of seconds, got {raw_delay!r}"
            ) from None
        if reserve_delay < 0:
            raise ConfigurationError("STOREFRONT_RESERVE_DELAY cannot be negative")

        log_level = env.get("STOREFRONT_LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"STOREFRONT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        raw_port = env.get("STOREFRONT_PORT", "8080")
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(f"STOREFRONT_PORT must be an integer, got {raw_port!r}") from None

        return Settings(
            catalog_file=Path(catalog_file) if catalog_file else None,
            reserve_delay=reserve_delay,
            log_level=log_level,
            host=env.get("STOREFRONT_HOST", "127.0.0.1"),
            port=port,
        )
