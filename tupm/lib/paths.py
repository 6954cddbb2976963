from __future__ import annotations

import enum
import platform
from dataclasses import dataclass
from pathlib import Path

from ..errors import InvalidPackageNameError

WINDOWS_ROOT = r"C:\Program Files\TUPM-Apps"
POSIX_BIN_DIR = "/bin"
POSIX_CONFIG_DIR = "/etc/tupm"

SOURCELIST_NAME = "sourcelist.conf"
SETTINGS_NAME = "settings.yaml"


class HostPlatform(enum.Enum):
    WINDOWS = "windows"
    POSIX = "posix"


def validate_package_name(package: str) -> None:
    """Package names map to a single file directly inside the bin directory."""
    if not package or package in {".", ".."} or "/" in package or "\\" in package:
        raise InvalidPackageNameError(f"Invalid package name: {package!r}")


def detect_platform() -> HostPlatform:
    if platform.system().lower() == "windows":
        return HostPlatform.WINDOWS
    return HostPlatform.POSIX


@dataclass(frozen=True)
class PlatformPaths:
    """Fixed filesystem layout for one host platform."""

    host: HostPlatform
    bin_dir: Path
    config_path: Path
    settings_path: Path

    @property
    def is_windows(self) -> bool:
        return self.host is HostPlatform.WINDOWS

    def target_path(self, package: str) -> Path:
        return self.bin_dir / package

    @classmethod
    def sandbox(cls, root: str | Path, host: HostPlatform = HostPlatform.POSIX) -> "PlatformPaths":
        """Same layout shape rooted at an arbitrary directory (tests, chroots)."""
        r = Path(root)
        return cls(
            host=host,
            bin_dir=r / "bin",
            config_path=r / "config" / SOURCELIST_NAME,
            settings_path=r / "config" / SETTINGS_NAME,
        )


def paths_for(host: HostPlatform) -> PlatformPaths:
    if host is HostPlatform.WINDOWS:
        root = Path(WINDOWS_ROOT)
        return PlatformPaths(
            host=host,
            bin_dir=root / "bin",
            config_path=root / "config" / SOURCELIST_NAME,
            settings_path=root / "config" / SETTINGS_NAME,
        )
    return PlatformPaths(
        host=host,
        bin_dir=Path(POSIX_BIN_DIR),
        config_path=Path(POSIX_CONFIG_DIR) / SOURCELIST_NAME,
        settings_path=Path(POSIX_CONFIG_DIR) / SETTINGS_NAME,
    )
