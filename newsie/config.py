from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

FEED_URL = "https://www.archlinux.org/feeds/news/"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    feed_url: str = FEED_URL
    cache_dir: Optional[Path] = None  # None -> ~/.cache/newsie of the invoking user
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    A .env file in the working directory is loaded first (python-dotenv); values
    already present in the environment win over the file.
    Recognized variables: NEWSIE_CACHE_DIR, NEWSIE_LOG_LEVEL.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    cache_dir = environ.get("NEWSIE_CACHE_DIR")
    log_level = (environ.get("NEWSIE_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        log_level = DEFAULT_LOG_LEVEL

    return Settings(
        cache_dir=Path(cache_dir).expanduser() if cache_dir else None,
        log_level=log_level,
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s: %(message)s")
