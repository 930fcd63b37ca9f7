# src/studyzen/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import SessionRepo, TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    task_store: TaskRepo
    session_file: SessionRepo
