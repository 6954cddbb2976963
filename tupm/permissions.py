from __future__ import annotations

import enum
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Protocol, TextIO

from .lib.paths import HostPlatform, PlatformPaths

logger = logging.getLogger(__name__)

POSIX_PROBE_NAME = ".tupm_permission_test"
WINDOWS_PROBE_NAME = "test_permissions"


class Operation(enum.Enum):
    INSTALL = "install"
    UNINSTALL = "uninstall"


class PermissionChecker(Protocol):
    """Non-destructive preflight: can this process write to the bin directory?"""

    bin_dir: Path

    def check(self, operation: Operation) -> bool:
        ...


def _current_user() -> Optional[str]:
    return os.environ.get("USER")


def _probe(path: Path) -> Optional[OSError]:
    """Create and remove a probe file. Returns the error instead of raising."""

    existed = path.exists()
    try:
        path.write_text("test", encoding="utf-8")
    except OSError as e:
        # A failed write can still leave an empty file behind; only remove it if it is ours.
        if not existed:
            _discard(path)
        return e
    _discard(path)
    return None


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug("Could not remove probe %s: %s", path, e)


def _report(out: TextIO, lines: list[str]) -> None:
    for line in lines:
        print(line, file=out)


class PosixWritableChecker:
    def __init__(
        self,
        bin_dir: Path,
        *,
        user: Callable[[], Optional[str]] = _current_user,
        out: Optional[TextIO] = None,
    ) -> None:
        self.bin_dir = bin_dir
        self._user = user
        self._out = out

    def check(self, operation: Operation) -> bool:
        probe = self.bin_dir / POSIX_PROBE_NAME
        err = _probe(probe)
        if err is None:
            return True

        logger.debug("Permission probe %s failed: %s", probe, err)
        out = self._out or sys.stderr
        if self._user() == "root":
            _report(
                out,
                [
                    f"Error: Unable to write to {self.bin_dir} directory even as root.",
                    "Please check filesystem permissions.",
                ],
            )
        else:
            where = "to" if operation is Operation.INSTALL else "from"
            _report(
                out,
                [
                    f"Error: Insufficient permissions to {operation.value} packages {where} {self.bin_dir}.",
                    "Please run this program with sudo:",
                    f"  sudo tupm {operation.value} <package>",
                ],
            )
        return False


_RUN_AS_ADMIN = [
    "Please run this program as Administrator.",
    "Right-click on Command Prompt or PowerShell and select 'Run as Administrator'.",
]


class WindowsAdminChecker:
    def __init__(self, bin_dir: Path, *, out: Optional[TextIO] = None) -> None:
        self.bin_dir = bin_dir
        self._out = out

    def check(self, operation: Operation) -> bool:
        out = self._out or sys.stderr
        try:
            self.bin_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.debug("Could not create %s: %s", self.bin_dir, e)
            verb = "create" if operation is Operation.INSTALL else "access"
            _report(out, [f"Error: Insufficient permissions to {verb} installation directory.", *_RUN_AS_ADMIN])
            return False

        err = _probe(self.bin_dir / WINDOWS_PROBE_NAME)
        if err is None:
            return True

        logger.debug("Permission probe in %s failed: %s", self.bin_dir, err)
        _report(out, [f"Error: Insufficient permissions to {operation.value} packages.", *_RUN_AS_ADMIN])
        return False


def checker_for(paths: PlatformPaths) -> PermissionChecker:
    if paths.host is HostPlatform.WINDOWS:
        return WindowsAdminChecker(paths.bin_dir)
    return PosixWritableChecker(paths.bin_dir)
