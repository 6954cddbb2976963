from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import PackageNotFoundError
from ..resolver import ManifestFetcher, resolve_detailed

logger = logging.getLogger(__name__)


class ResolveUrlStep:
    step_id = "40_resolve_url"

    def __init__(self, fetch: ManifestFetcher) -> None:
        self.fetch = fetch

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        package = state["package"]
        resolution = resolve_detailed(state["sources"], package, fetch=self.fetch)
        if not resolution.found:
            raise PackageNotFoundError(package)

        logger.info("Found package at: %s", resolution.url)
        state["package_url"] = resolution.url
        state["resolved_from"] = resolution.source
        return state
