"""Runtime configuration.

Settings come from environment variables, optionally loaded from a
``.env`` file in the working directory:

    PIZZERIA_DATA_DIR          where orders.json / products.json live
    PIZZERIA_LOG_LEVEL         DEBUG, INFO, WARNING (default), ERROR
    PIZZERIA_REFRESH_SECONDS   kitchen board refresh interval (default 5)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_REFRESH_SECONDS = 5.0

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    refresh_seconds: float = DEFAULT_REFRESH_SECONDS

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"


def load_settings() -> Settings:
    """Read settings from the environment (and ``.env`` if present).

    Variables already set in the environment win over ``.env``.
    """
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path, override=False)
        logger.debug("Loaded environment from %s", env_path.resolve())

    data_dir = os.getenv("PIZZERIA_DATA_DIR")
    log_level = os.getenv("PIZZERIA_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(
            f"PIZZERIA_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}"
        )

    raw_refresh = os.getenv("PIZZERIA_REFRESH_SECONDS")
    refresh = DEFAULT_REFRESH_SECONDS
    if raw_refresh:
        try:
            refresh = float(raw_refresh)
        except ValueError as exc:
            raise ConfigurationError(
                f"PIZZERIA_REFRESH_SECONDS must be a number, got {raw_refresh!r}"
            ) from exc
        if refresh <= 0:
            raise ConfigurationError("PIZZERIA_REFRESH_SECONDS must be positive")

    return Settings(
        data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
        log_level=log_level,
        refresh_seconds=refresh,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Using data directory %s", settings.data_dir)
