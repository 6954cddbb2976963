from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .errors import NoSourcesError

logger = logging.getLogger(__name__)

SourceList = Tuple[str, ...]

_SCHEMES = ("http://", "https://")


def normalize_url(url: str) -> str:
    if url.startswith(_SCHEMES):
        return url
    return f"http://{url}"


def parse_line(line: str) -> Optional[str]:
    """Return the normalized URL declared on a `src "...";` line, else None."""

    line = line.strip()
    if not (line.startswith("src ") and line.endswith(";")):
        return None

    start = line.find('"')
    end = line.rfind('"')
    if start == -1 or start >= end:
        return None
    return normalize_url(line[start + 1 : end])


def parse_sources(text: str) -> SourceList:
    """Parse source list text into priority-ordered manifest URLs.

    Malformed lines are skipped; only an empty result is an error.
    """

    sources: List[str] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        url = parse_line(line)
        if url is None:
            if line.strip():
                logger.debug("Ignoring config line %d: %r", lineno, line)
            continue
        sources.append(url)

    if not sources:
        raise NoSourcesError()
    return tuple(sources)
