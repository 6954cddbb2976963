from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tupm.logging_utils import FALLBACK_LOG_NAME, configure_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
    for attr in ("_tupm_configured", "_tupm_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_file_logging_is_opt_in(root_logger, tmp_path: Path) -> None:
    log_path = tmp_path / "logs" / "tupm.log"

    assert configure_logging(str(log_path), also_console=False) == str(log_path)
    logging.getLogger("tupm.test").info("hello")

    assert "hello" in log_path.read_text(encoding="utf-8")


def test_repeated_calls_do_not_add_handlers(root_logger) -> None:
    configure_logging(also_console=True)
    count = len(root_logger.handlers)
    configure_logging(also_console=True)

    assert len(root_logger.handlers) == count


def test_unwritable_log_falls_back_to_cwd(root_logger, tmp_path: Path, monkeypatch) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    actual = configure_logging(str(blocker / "tupm.log"), also_console=False)

    assert actual == str(Path.cwd() / FALLBACK_LOG_NAME)
