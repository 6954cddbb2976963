from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Sequence

from .errors import TupmError

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single state of the install/uninstall machine."""

    step_id: str

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def run_pipeline(*, state: Dict[str, Any], steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order. A step raising TupmError aborts the rest.

    Nothing already done is undone; the failing step and error are recorded
    under state["execution"] before the error is re-raised.
    """

    ran: List[str] = []
    exe = state.setdefault("execution", {})
    exe.setdefault("completed_steps", [])
    exe.setdefault("errors", [])

    for step in steps:
        exe["current_step"] = step.step_id
        logger.debug("Running step %s", step.step_id)
        try:
            state = step.run(state)
        except TupmError as e:
            exe["errors"].append({"step": step.step_id, "error": str(e)})
            logger.debug("Step %s aborted: %s", step.step_id, e)
            raise
        exe["completed_steps"].append(step.step_id)
        ran.append(step.step_id)

    exe["current_step"] = None
    return PipelineResult(state=state, ran_steps=ran)
