# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from studyzen.cli.bootstrap import create_initial_state
from studyzen.core.state import AppState
from studyzen.tasks.state_file import SessionStateFile
from studyzen.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="StudyZen",
        log_level="INFO",
        console_color=False,
        data_dir=tmp_path,
        state_path=tmp_path / "studyzen_data.json",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired exactly as in production, on a tmp session file."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def session_file(settings: SimpleNamespace) -> SessionStateFile:
    return SessionStateFile(settings.state_path)


class FakeClock:
    """Frozen clock; tests advance it by hand."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def store(clock: FakeClock) -> TaskStore:
    return TaskStore(clock=clock)
