from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from ..lib.paths import PlatformPaths
from ..lib.transfer import mark_executable


class MarkExecutableStep:
    """Best-effort: a failure is logged and the installed file is kept."""

    step_id = "60_mark_executable"

    def __init__(self, paths: PlatformPaths, *, program: str) -> None:
        self.paths = paths
        self.program = program

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        if self.paths.is_windows:
            state["executable"] = None
            return state
        state["executable"] = mark_executable(Path(state["target_path"]), program=self.program)
        return state
