from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .lib.transfer import DEFAULT_CHMOD_PROGRAM, DEFAULT_FETCH_PROGRAM

logger = logging.getLogger(__name__)

SECTIONS = ("log", "fetch", "chmod")


@dataclass(frozen=True)
class Settings:
    """Tool settings (settings.yaml). The source list is not configured here."""

    raw: Dict[str, Any]

    @property
    def log_path(self) -> Optional[str]:
        value = (self.raw.get("log") or {}).get("path")
        return str(value) if value else None

    @property
    def log_level(self) -> str:
        return str(((self.raw.get("log") or {}).get("level")) or "INFO").upper()

    @property
    def fetch_program(self) -> str:
        return str(((self.raw.get("fetch") or {}).get("program")) or DEFAULT_FETCH_PROGRAM)

    @property
    def chmod_program(self) -> str:
        return str(((self.raw.get("chmod") or {}).get("program")) or DEFAULT_CHMOD_PROGRAM)


def load_settings(path: str | Path) -> Settings:
    p = Path(path)
    if not p.exists():
        return Settings(raw={})

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Unable to read settings file {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")
    for section in SECTIONS:
        if raw.get(section) is not None and not isinstance(raw[section], dict):
            raise ConfigError(f"{p}: '{section}' must be a mapping/object")

    logger.debug("Loaded settings from %s", p)
    return Settings(raw=raw)
