from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .errors import DecodeError, FetchError
from .lib.transfer import fetch_text
from .sources import SourceList

logger = logging.getLogger(__name__)

ManifestFetcher = Callable[[str], str]


@dataclass(frozen=True)
class Resolution:
    url: Optional[str]
    tried: int
    reachable: int
    source: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.url is not None


def decode_manifest(body: str, source_url: str) -> Dict[str, Any]:
    try:
        data = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Failed to parse JSON from source: {source_url}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Source manifest is not a JSON object: {source_url}")
    return data


def resolve_detailed(
    sources: SourceList,
    package: str,
    *,
    fetch: ManifestFetcher = fetch_text,
) -> Resolution:
    """Try each source in order; the first manifest naming `package` wins."""

    tried = 0
    reachable = 0
    for source_url in sources:
        tried += 1
        logger.info("Checking source: %s", source_url)
        try:
            manifest = decode_manifest(fetch(source_url), source_url)
        except FetchError as e:
            logger.warning("%s", e)
            continue
        except DecodeError as e:
            reachable += 1
            logger.warning("%s", e)
            continue

        reachable += 1
        url = manifest.get(package)
        if isinstance(url, str):
            return Resolution(url=url, tried=tried, reachable=reachable, source=source_url)
        if url is not None:
            logger.warning("Ignoring non-string entry for %r in %s", package, source_url)

    if reachable == 0:
        logger.warning("None of the %d configured sources could be reached", tried)
    else:
        logger.info("%r is not listed in any of the %d reachable sources", package, reachable)
    return Resolution(url=None, tried=tried, reachable=reachable)


def resolve(
    sources: SourceList,
    package: str,
    *,
    fetch: ManifestFetcher = fetch_text,
) -> Optional[str]:
    return resolve_detailed(sources, package, fetch=fetch).url
