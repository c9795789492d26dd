"""Logging setup for the vectors app."""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def level_from_settings(settings_path: Path) -> int:
    if not settings_path.exists():
        return logging.INFO
    try:
        data = json.loads(settings_path.read_text())
    except (OSError, json.JSONDecodeError):
        return logging.INFO
    level_name = str(data.get("logLevel", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def init_logging(settings_path: Optional[Path] = None) -> logging.Logger:
    """Configure the root logger from settings.json (key ``logLevel``)."""

    settings_path = settings_path or Path("settings.json")
    logging.basicConfig(
        level=level_from_settings(settings_path),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    return logging.getLogger("vectors")


__all__ = ["init_logging", "level_from_settings", "LOG_FORMAT"]
