# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from studyzen.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in saved_handlers:
        root.addHandler(h)
    root.setLevel(saved_level)
    logging.captureWarnings(False)


def test_console_shows_app_records_and_only_foreign_errors(
    tmp_path: Path, capsys, restore_root_logging
) -> None:
    log_file = setup_logging(log_dir=tmp_path / "logs")

    logging.getLogger("studyzen.tasks").info("task saved")
    logging.getLogger("urllib3").info("connection pool chatter")
    logging.getLogger("urllib3").error("connection refused")
    logging.getLogger("studyzen").debug("debug detail")

    err = capsys.readouterr().err
    assert "task saved" in err
    assert "connection refused" in err
    assert "connection pool chatter" not in err
    assert "debug detail" not in err

    assert log_file == tmp_path / "logs" / "studyzen.log"
    for h in restore_root_logging.handlers:
        h.flush()
    text = log_file.read_text("utf-8")
    assert "connection pool chatter" in text
    assert "debug detail" in text


def test_setup_twice_does_not_duplicate_handlers(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(restore_root_logging.handlers) == 2
