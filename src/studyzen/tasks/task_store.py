# src/studyzen/tasks/task_store.py

from __future__ import annotations

import copy
import logging
import time
from collections.abc import Callable
from dataclasses import replace

from ..core.errors import NotFoundError
from .task_models import (
    SessionState,
    Stats,
    Task,
    ToggleDirection,
    ToggleResult,
    points_for_priority,
)

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store: the single owner of the session state.

    Rules:
    - tasks keep insertion order; the store never sorts or filters
    - points and streak only grow, once per false -> true completion
    - un-completing or deleting a task never takes anything back

    The store performs no input validation (see tasks.task_api) and never
    touches the disk; callers persist `snapshot()` after each mutation.
    Every value handed out is a copy.
    """

    def __init__(
        self,
        state: SessionState | None = None,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._state = state if state is not None else SessionState()
        self._clock = clock
        self._last_id = self._max_numeric_id()
        logger.info(
            "TaskStore ready tasks=%d points=%d streak=%d",
            len(self._state.tasks),
            self._state.points,
            self._state.streak,
        )

    # ---- low-level helpers ----

    def _max_numeric_id(self) -> int:
        best = 0
        for t in self._state.tasks:
            try:
                best = max(best, int(t.id))
            except (TypeError, ValueError):
                continue
        return best

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped when the clock has not moved on.
        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def _find(self, task_id: str) -> Task:
        for t in self._state.tasks:
            if t.id == task_id:
                return t
        raise NotFoundError(task_id)

    # ---- public API ----

    def create_task(
        self,
        title: str,
        subject: str,
        type: str,
        priority: str,
        difficulty: str,
        deadline: float | None = None,
    ) -> Task:
        task = Task(
            id=self._next_id(),
            title=title,
            subject=subject,
            type=str(type),
            deadline=float(deadline) if deadline is not None else self._clock(),
            priority=str(priority),
            difficulty=str(difficulty),
        )
        self._state.tasks.append(task)
        logger.debug("Task created id=%s priority=%s type=%s", task.id, task.priority, task.type)
        return replace(task)

    def toggle_completion(self, task_id: str) -> ToggleResult:
        task = self._find(task_id)
        task.completed = not task.completed

        awarded = 0
        if task.completed:
            awarded = points_for_priority(task.priority)
            self._state.points += awarded
            self._state.streak += 1
            direction = ToggleDirection.COMPLETED
        else:
            direction = ToggleDirection.REOPENED

        logger.debug(
            "Task toggled id=%s direction=%s awarded=%d points=%d streak=%d",
            task.id,
            direction,
            awarded,
            self._state.points,
            self._state.streak,
        )
        return ToggleResult(
            task_id=task.id,
            title=task.title,
            completed=task.completed,
            direction=direction,
            points_awarded=awarded,
            points=self._state.points,
            streak=self._state.streak,
        )

    def delete_task(self, task_id: str) -> None:
        task = self._find(task_id)
        self._state.tasks.remove(task)
        logger.debug("Task deleted id=%s completed=%s", task.id, task.completed)

    def get_task(self, task_id: str) -> Task:
        return replace(self._find(task_id))

    def get_stats(self) -> Stats:
        return Stats(points=self._state.points, streak=self._state.streak)

    def list_tasks(self) -> list[Task]:
        return [replace(t) for t in self._state.tasks]

    def count_tasks(self) -> int:
        return len(self._state.tasks)

    def snapshot(self) -> SessionState:
        """Deep copy of the whole session, ready to be saved."""
        return copy.deepcopy(self._state)
