from __future__ import annotations

import logging
from pathlib import Path

from ..errors import FetchError, TransferError
from .command import run_cmd

logger = logging.getLogger(__name__)

DEFAULT_FETCH_PROGRAM = "curl"
DEFAULT_CHMOD_PROGRAM = "chmod"


def fetch_text(url: str, *, program: str = DEFAULT_FETCH_PROGRAM) -> str:
    """Fetch a document silently, following redirects."""

    try:
        r = run_cmd([program, "-s", "-L", url])
    except OSError as e:
        raise FetchError(f"Error fetching from source {url}: {e}") from e
    if not r.ok:
        raise FetchError(f"Failed to fetch from source: {url} (exit {r.returncode})")
    return r.stdout


def download(url: str, target: Path, *, program: str = DEFAULT_FETCH_PROGRAM) -> None:
    try:
        r = run_cmd([program, "-L", "-o", str(target), url])
    except OSError as e:
        raise TransferError(f"Failed to execute {program}: {e}") from e
    if not r.ok:
        raise TransferError(f"{program} failed with status: {r.returncode}")
    logger.info("Downloaded %s -> %s", url, target)


def mark_executable(target: Path, *, program: str = DEFAULT_CHMOD_PROGRAM) -> bool:
    """Best-effort `chmod +x`; logs and returns False instead of raising."""

    try:
        r = run_cmd([program, "+x", str(target)])
    except OSError as e:
        logger.warning("Could not run %s on %s: %s", program, target, e)
        return False
    if not r.ok:
        logger.warning("Could not mark %s executable: %s", target, r.stderr.strip() or f"exit {r.returncode}")
        return False
    return True
