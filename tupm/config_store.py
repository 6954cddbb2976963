from __future__ import annotations

import logging
from pathlib import Path

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "80.51.80.42:9763/sources.json"
DEFAULT_CONFIG = f'src "{DEFAULT_SOURCE}";'


def load_or_init(config_path: Path) -> str:
    """Return the source list text, writing the default on first run.

    The default is written verbatim (no trailing newline) so a second run
    reads back exactly what the first one produced.
    """

    if config_path.exists():
        try:
            # Undecodable bytes only ever spoil the line they sit on.
            return config_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ConfigError(f"Unable to read {config_path}: {e}") from e

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(DEFAULT_CONFIG, encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Unable to create default config at {config_path}: {e}") from e

    logger.info("Created default config at: %s", config_path)
    return DEFAULT_CONFIG
