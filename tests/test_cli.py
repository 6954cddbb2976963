from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

import tupm.main as main_mod
from tupm.main import main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch) -> None:
    monkeypatch.setattr(main_mod, "configure_logging", lambda **kw: None)


@pytest.fixture
def no_settings(tmp_path: Path) -> List[str]:
    return ["--settings", str(tmp_path / "settings.yaml")]


@pytest.fixture
def recorded(monkeypatch) -> List[Tuple[str, str]]:
    calls: List[Tuple[str, str]] = []
    monkeypatch.setattr(main_mod, "install_package", lambda package, **kw: calls.append(("install", package)) or True)
    monkeypatch.setattr(main_mod, "uninstall_package", lambda package, **kw: calls.append(("uninstall", package)) or True)
    return calls


def test_no_command_prints_usage(no_settings, recorded, capsys) -> None:
    assert main(no_settings) == 0
    assert "Usage: tupm <command> [args...]" in capsys.readouterr().out
    assert recorded == []


def test_unknown_command(no_settings, recorded, capsys) -> None:
    assert main([*no_settings, "upgrade", "foo"]) == 0
    assert "Unknown command: upgrade" in capsys.readouterr().out
    assert recorded == []


@pytest.mark.parametrize("command", ["install", "uninstall"])
def test_missing_package(command: str, no_settings, recorded, capsys) -> None:
    assert main([*no_settings, command]) == 0
    assert f"Please provide a package to {command}." in capsys.readouterr().out
    assert recorded == []


def test_dispatch(no_settings, recorded) -> None:
    assert main([*no_settings, "install", "foo"]) == 0
    assert main([*no_settings, "uninstall", "bar"]) == 0
    assert recorded == [("install", "foo"), ("uninstall", "bar")]


def test_bad_settings_file_exits_cleanly(tmp_path: Path, recorded, capsys) -> None:
    p = tmp_path / "settings.yaml"
    p.write_text("[1, 2]\n", encoding="utf-8")

    assert main(["--settings", str(p), "install", "foo"]) == 0
    assert "must contain a mapping" in capsys.readouterr().err
    assert recorded == []


def test_extra_arguments_are_ignored(no_settings, recorded) -> None:
    assert main([*no_settings, "install", "foo", "extra"]) == 0
    assert recorded == [("install", "foo")]


def test_dash_command_is_unknown(no_settings, recorded, capsys) -> None:
    assert main([*no_settings, "-x"]) == 0
    assert "Unknown command: -x" in capsys.readouterr().out
    assert recorded == []


def test_dash_package_name_is_passed_through(no_settings, recorded) -> None:
    assert main([*no_settings, "install", "-pkg"]) == 0
    assert recorded == [("install", "-pkg")]


def test_scalar_settings_section_exits_cleanly(tmp_path: Path, recorded, capsys) -> None:
    p = tmp_path / "settings.yaml"
    p.write_text("log: /tmp/tupm.log\n", encoding="utf-8")

    assert main(["--settings", str(p), "bogus"]) == 0
    assert "'log' must be a mapping" in capsys.readouterr().err
    assert recorded == []
