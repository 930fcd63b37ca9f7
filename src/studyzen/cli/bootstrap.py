# src/studyzen/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- loads the saved session exactly once, before any UI is shown,
- wires the TaskStore and the session file into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.state_file import SessionStateFile
from ..tasks.task_api import persist_state
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.state_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    session_file = SessionStateFile(settings.state_path)
    session = session_file.load()

    return AppState(
        settings=settings,
        task_store=TaskStore(session),
        session_file=session_file,
    )


def save_state(state: AppState) -> bool:
    """Final save on shutdown."""
    ok = persist_state(state)
    if ok:
        logger.info("Session saved to %s", getattr(state.settings, "state_path", "?"))
    return ok
