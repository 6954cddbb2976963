from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import RemovalError
from ..lib.paths import PlatformPaths

logger = logging.getLogger(__name__)


class RemoveTargetStep:
    step_id = "70_remove_target"

    def __init__(self, paths: PlatformPaths) -> None:
        self.paths = paths

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        target = self.paths.target_path(state["package"])
        try:
            target.unlink()
        except OSError as e:
            raise RemovalError(str(e)) from e
        logger.debug("Removed %s", target)
        state["target_path"] = str(target)
        return state
