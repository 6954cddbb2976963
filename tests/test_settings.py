from __future__ import annotations

from pathlib import Path

import pytest

from tupm.errors import ConfigError
from tupm.settings import load_settings


def test_missing_settings_file_gives_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "settings.yaml")

    assert settings.log_path is None
    assert settings.log_level == "INFO"
    assert settings.fetch_program == "curl"
    assert settings.chmod_program == "chmod"


def test_settings_are_read_from_yaml(tmp_path: Path) -> None:
    p = tmp_path / "settings.yaml"
    p.write_text(
        "log:\n  path: /tmp/tupm.log\n  level: debug\nfetch:\n  program: /usr/local/bin/curl\n",
        encoding="utf-8",
    )

    settings = load_settings(p)

    assert settings.log_path == "/tmp/tupm.log"
    assert settings.log_level == "DEBUG"
    assert settings.fetch_program == "/usr/local/bin/curl"
    assert settings.chmod_program == "chmod"


def test_non_mapping_settings_are_rejected(tmp_path: Path) -> None:
    p = tmp_path / "settings.yaml"
    p.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(p)


def test_invalid_yaml_is_rejected(tmp_path: Path) -> None:
    p = tmp_path / "settings.yaml"
    p.write_text("log: [unterminated\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(p)


@pytest.mark.parametrize("section", ["log", "fetch", "chmod"])
def test_scalar_section_is_rejected(tmp_path: Path, section: str) -> None:
    p = tmp_path / "settings.yaml"
    p.write_text(f"{section}: /var/log/tupm.log\n", encoding="utf-8")

    with pytest.raises(ConfigError, match=f"'{section}' must be a mapping"):
        load_settings(p)


def test_undecodable_settings_are_rejected(tmp_path: Path) -> None:
    p = tmp_path / "settings.yaml"
    p.write_bytes(b"log:\n  path: /tmp/caf\xe9.log\n")

    with pytest.raises(ConfigError):
        load_settings(p)
