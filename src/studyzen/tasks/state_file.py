# src/studyzen/tasks/state_file.py

"""
Whole-session persistence as a single JSON document.

Every save overwrites the file with a full snapshot (last write wins):
the document is written to a temporary sibling and moved into place with
os.replace, so readers see either the old or the new state, never a mix.

Loading never blocks startup: a missing file is a fresh start and a broken
one degrades to an empty session (logged, not raised).
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

from ..core.errors import LoadError, PersistError
from .task_models import SessionState, Task

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

_STR_FIELDS = ("id", "title", "subject", "type", "priority", "difficulty")


def _task_to_dict(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "title": task.title,
        "subject": task.subject,
        "type": task.type,
        "deadline": task.deadline,
        "priority": task.priority,
        "difficulty": task.difficulty,
        "completed": task.completed,
        "time_spent": task.time_spent,
    }


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _dict_to_task(raw: Any, index: int) -> Task:
    if not isinstance(raw, dict):
        raise LoadError(f"tasks[{index}] is not an object")

    for name in _STR_FIELDS:
        if not isinstance(raw.get(name), str):
            raise LoadError(f"tasks[{index}].{name} must be a string")

    deadline = raw.get("deadline")
    if not isinstance(deadline, (int, float)) or isinstance(deadline, bool):
        raise LoadError(f"tasks[{index}].deadline must be a number")

    completed = raw.get("completed")
    if not isinstance(completed, bool):
        raise LoadError(f"tasks[{index}].completed must be a boolean")

    time_spent = raw.get("time_spent", 0)
    if not _is_int(time_spent):
        raise LoadError(f"tasks[{index}].time_spent must be an integer")

    try:
        deadline = float(deadline)
    except OverflowError as e:
        raise LoadError(f"tasks[{index}].deadline is out of range") from e

    return Task(
        id=raw["id"],
        title=raw["title"],
        subject=raw["subject"],
        type=raw["type"],
        deadline=deadline,
        priority=raw["priority"],
        difficulty=raw["difficulty"],
        completed=completed,
        time_spent=time_spent,
    )


def state_to_dict(state: SessionState) -> dict[str, Any]:
    return {
        "version": FORMAT_VERSION,
        "points": state.points,
        "streak": state.streak,
        "tasks": [_task_to_dict(t) for t in state.tasks],
    }


def state_from_dict(data: Any) -> SessionState:
    """Structural decoding only; invariants are not re-checked."""
    if not isinstance(data, dict):
        raise LoadError("session document is not an object")

    points = data.get("points")
    streak = data.get("streak")
    if not _is_int(points):
        raise LoadError("points must be an integer")
    if not _is_int(streak):
        raise LoadError("streak must be an integer")

    raw_tasks = data.get("tasks")
    if not isinstance(raw_tasks, list):
        raise LoadError("tasks must be a list")

    tasks = [_dict_to_task(raw, i) for i, raw in enumerate(raw_tasks)]
    return SessionState(tasks=tasks, points=points, streak=streak)


class SessionStateFile:
    """Load/save the full SessionState to one private JSON file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def save(self, state: SessionState) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(state_to_dict(state), ensure_ascii=False, indent=2)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise PersistError(f"Failed to save session to {self._path}: {e}") from e

        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)
        logger.debug(
            "Saved session: %d tasks points=%d streak=%d to %s",
            len(state.tasks),
            state.points,
            state.streak,
            self._path,
        )

    def load_strict(self) -> SessionState:
        try:
            raw = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Cannot read {self._path}: {e}") from e

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError) as e:
            raise LoadError(f"{self._path} is not valid JSON: {e}") from e

        return state_from_dict(data)

    def load(self) -> SessionState:
        if not self._path.exists():
            logger.info("No saved session at %s. Starting fresh.", self._path)
            return SessionState()

        try:
            state = self.load_strict()
        except LoadError as e:
            logger.warning("Error loading session, starting fresh: %s", e)
            return SessionState()
        except Exception:
            logger.exception("Unexpected error loading session from %s, starting fresh", self._path)
            return SessionState()

        logger.info(
            "Loaded session: %d tasks points=%d streak=%d from %s",
            len(state.tasks),
            state.points,
            state.streak,
            self._path,
        )
        return state
