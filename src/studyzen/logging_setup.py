# src/studyzen/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "studyzen"
LOG_FILE_NAME = "studyzen.log"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _StudyConsoleFilter(logging.Filter):
    """
    The console is shared with the study prompt, so only our own records
    reach it below ERROR. Everything else (captured warnings included) shows
    up there only when it is an error; the log file still gets it all.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/studyzen",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send records to stderr (filtered) and to <log_dir>/studyzen.log (full).

    Replaces whatever handlers the root logger had, so calling it twice does
    not duplicate output. Returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(fmt)
    console.addFilter(_StudyConsoleFilter())

    session_log = logging.FileHandler(str(log_file), encoding="utf-8")
    session_log.setLevel(file_level)
    session_log.setFormatter(fmt)

    root.addHandler(console)
    root.addHandler(session_log)

    # warnings.warn(...) -> "py.warnings" logger
    logging.captureWarnings(True)
    return log_file
