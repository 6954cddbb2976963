from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from ..config_store import load_or_init


class LoadConfigStep:
    step_id = "20_load_config"

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        state["raw_config"] = load_or_init(self.config_path)
        return state
