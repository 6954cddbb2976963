from __future__ import annotations

import argparse
import functools
import logging
import sys
from typing import Any, Dict, List, Optional

from .errors import ConfigError, ParseError, PermissionDeniedError, RemovalError, TupmError
from .lib.paths import PlatformPaths, detect_platform, paths_for, validate_package_name
from .lib.transfer import fetch_text
from .logging_utils import configure_logging
from .permissions import Operation, PermissionChecker, checker_for
from .pipeline import Step, run_pipeline
from .resolver import ManifestFetcher
from .settings import Settings, load_settings
from .steps import (
    FetchToTargetStep,
    LoadConfigStep,
    MarkExecutableStep,
    ParseSourcesStep,
    PermissionGateStep,
    RemoveTargetStep,
    ResolveUrlStep,
)

logger = logging.getLogger(__name__)


def build_install_steps(
    paths: PlatformPaths,
    checker: PermissionChecker,
    settings: Settings,
    fetch: ManifestFetcher,
) -> List[Step]:
    return [
        PermissionGateStep(checker, Operation.INSTALL),
        LoadConfigStep(paths.config_path),
        ParseSourcesStep(),
        ResolveUrlStep(fetch),
        FetchToTargetStep(paths, program=settings.fetch_program),
        MarkExecutableStep(paths, program=settings.chmod_program),
    ]


def build_uninstall_steps(paths: PlatformPaths, checker: PermissionChecker) -> List[Step]:
    return [
        PermissionGateStep(checker, Operation.UNINSTALL),
        RemoveTargetStep(paths),
    ]


def _new_state(package: str, operation: Operation) -> Dict[str, Any]:
    return {"package": package, "operation": operation.value, "execution": {}}


def install_package(
    package: str,
    *,
    paths: Optional[PlatformPaths] = None,
    checker: Optional[PermissionChecker] = None,
    settings: Optional[Settings] = None,
    fetch: Optional[ManifestFetcher] = None,
) -> bool:
    """Gate, resolve, download and mark executable. Returns True on success."""

    paths = paths or paths_for(detect_platform())
    settings = settings or Settings(raw={})
    checker = checker or checker_for(paths)
    fetch = fetch or functools.partial(fetch_text, program=settings.fetch_program)

    try:
        validate_package_name(package)
        print(f"Installing {package}...")
        run_pipeline(
            state=_new_state(package, Operation.INSTALL),
            steps=build_install_steps(paths, checker, settings, fetch),
        )
    except PermissionDeniedError as e:
        # The checker has already printed actionable guidance.
        logger.debug("%s", e)
        return False
    except (ConfigError, ParseError) as e:
        print(f"Error reading sources: {e}", file=sys.stderr)
        return False
    except TupmError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False

    print(f"Installation of {package} successful.")
    return True


def uninstall_package(
    package: str,
    *,
    paths: Optional[PlatformPaths] = None,
    checker: Optional[PermissionChecker] = None,
) -> bool:
    """Gate, then remove the installed file. Returns True on success."""

    paths = paths or paths_for(detect_platform())
    checker = checker or checker_for(paths)

    try:
        validate_package_name(package)
        print(f"Uninstalling {package}...")
        run_pipeline(
            state=_new_state(package, Operation.UNINSTALL),
            steps=build_uninstall_steps(paths, checker),
        )
    except PermissionDeniedError as e:
        logger.debug("%s", e)
        return False
    except RemovalError as e:
        print(f"Failed to uninstall {package}: {e}", file=sys.stderr)
        return False
    except TupmError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False

    print(f"Successfully uninstalled {package}")
    return True


def _log_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def build_parser() -> argparse.ArgumentParser:
    # Only tool options are declared; the command, its package and anything
    # after them are taken positionally from the leftovers.
    p = argparse.ArgumentParser(
        prog="tupm",
        usage="%(prog)s [options] <command> [args...]",
        allow_abbrev=False,
    )
    p.add_argument("--settings", default=None, help="Path to tool settings (yaml)")
    p.add_argument("--log", default=None, help="Also write the log to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    p = build_parser()
    args, rest = p.parse_known_args(argv)
    command = rest[0] if rest else None
    package = rest[1] if len(rest) > 1 else None

    paths = paths_for(detect_platform())
    try:
        settings = load_settings(args.settings or paths.settings_path)
    except ConfigError as e:
        configure_logging()
        print(f"Error: {e}", file=sys.stderr)
        return 0

    configure_logging(
        log_path=args.log or settings.log_path,
        level=logging.DEBUG if args.verbose else _log_level(settings.log_level),
    )

    if command is None:
        print(f"Usage: {p.prog} <command> [args...]")
        return 0

    if command == "install":
        if not package:
            print("Please provide a package to install.")
            return 0
        install_package(package, paths=paths, settings=settings)
    elif command == "uninstall":
        if not package:
            print("Please provide a package to uninstall.")
            return 0
        uninstall_package(package, paths=paths)
    else:
        print(f"Unknown command: {command}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
