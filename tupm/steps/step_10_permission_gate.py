from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import PermissionDeniedError
from ..permissions import Operation, PermissionChecker

logger = logging.getLogger(__name__)


class PermissionGateStep:
    step_id = "10_permission_gate"

    def __init__(self, checker: PermissionChecker, operation: Operation) -> None:
        self.checker = checker
        self.operation = operation

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        # Evaluated on every invocation; never cached.
        if not self.checker.check(self.operation):
            raise PermissionDeniedError(
                f"Cannot {self.operation.value} packages: {self.checker.bin_dir} is not writable"
            )
        state["permission_ok"] = True
        return state
