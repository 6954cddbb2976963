from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(argv: Sequence[str]) -> CmdResult:
    """Run an external utility with consistent logging.

    - Always logs the command line.
    - Captures stdout/stderr; the caller decides what a non-zero exit means.
    - A missing executable surfaces as FileNotFoundError from subprocess.
    """

    argv_list = [str(a) for a in argv]
    logger.debug("CMD %s", fmt_argv(argv_list))

    p = subprocess.run(
        argv_list,
        encoding="utf-8",
        errors="replace",
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )

    if p.stderr:
        logger.debug("STDERR %s", p.stderr.strip())
    if p.returncode != 0:
        logger.debug("CMD exited %s: %s", p.returncode, fmt_argv(argv_list))

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=p.stdout, stderr=p.stderr)
