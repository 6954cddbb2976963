from __future__ import annotations

from typing import Any, Dict

from ..lib.paths import PlatformPaths
from ..lib.transfer import download


class FetchToTargetStep:
    step_id = "50_fetch_to_target"

    def __init__(self, paths: PlatformPaths, *, program: str) -> None:
        self.paths = paths
        self.program = program

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        target = self.paths.target_path(state["package"])
        # An interrupted or failed transfer may leave a partial file; it is not removed.
        download(state["package_url"], target, program=self.program)
        state["target_path"] = str(target)
        return state
