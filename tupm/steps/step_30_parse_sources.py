from __future__ import annotations

import logging
from typing import Any, Dict

from ..sources import parse_sources

logger = logging.getLogger(__name__)


class ParseSourcesStep:
    step_id = "30_parse_sources"

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        sources = parse_sources(state.get("raw_config") or "")
        logger.debug("Configured sources: %s", ", ".join(sources))
        state["sources"] = sources
        return state
