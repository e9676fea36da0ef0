from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env if present
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = os.getenv("BIRTH_NUMBER_LOG_LEVEL", "INFO")
    api_prefix: str = os.getenv("BIRTH_NUMBER_API_PREFIX", "/v1/birth-numbers")
    max_batch: int = int(os.getenv("BIRTH_NUMBER_MAX_BATCH", "1000"))


settings = Settings()


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configures the package logger once and returns it."""
    logger = logging.getLogger("birth_number")
    logger.setLevel((level or settings.log_level).upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def mask(value: object) -> str:
    """Hides the personal part of a candidate before it goes to a log line."""
    text = str(value)
    return text[:6] + "*" * max(len(text) - 6, 0)
