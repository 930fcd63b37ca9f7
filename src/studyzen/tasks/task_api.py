# src/studyzen/tasks/task_api.py

"""
Shell-facing helpers: validate, mutate the store, then persist.

Connectors call these instead of touching state.task_store directly so that
every mutation is followed by a full-session save.
"""

from __future__ import annotations

import logging

from ..core.errors import PersistError, ValidationError
from ..core.state import AppState
from .task_models import (
    DEFAULT_DIFFICULTY,
    DEFAULT_PRIORITY,
    DEFAULT_TYPE,
    Task,
    ToggleResult,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Title and Subject are required."


def validate_new_task(title: str | None, subject: str | None) -> tuple[str, str]:
    """Return (title, subject) stripped; raise ValidationError if either is blank."""
    clean_title = (title or "").strip()
    clean_subject = (subject or "").strip()
    if not clean_title or not clean_subject:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    return clean_title, clean_subject


def persist_state(state: AppState) -> bool:
    """Save the whole session. Failures are logged, never raised."""
    try:
        state.session_file.save(state.task_store.snapshot())
    except PersistError:
        logger.exception("Failed to persist session.")
        return False
    return True


def add_task(
    state: AppState,
    *,
    title: str,
    subject: str,
    type: str = DEFAULT_TYPE,
    priority: str = DEFAULT_PRIORITY,
    difficulty: str = DEFAULT_DIFFICULTY,
    deadline: float | None = None,
) -> Task:
    clean_title, clean_subject = validate_new_task(title, subject)
    task = state.task_store.create_task(
        clean_title,
        clean_subject,
        type,
        priority,
        difficulty,
        deadline,
    )
    logger.info("Task added id=%s title=%r", task.id, task.title)
    persist_state(state)
    return task


def toggle_task(state: AppState, task_id: str) -> ToggleResult:
    result = state.task_store.toggle_completion(task_id)
    logger.info(
        "Task %s id=%s (+%d points, streak=%d)",
        result.direction,
        result.task_id,
        result.points_awarded,
        result.streak,
    )
    persist_state(state)
    return result


def remove_task(state: AppState, task_id: str) -> Task:
    """Delete a task and return the removed copy (for the notification)."""
    task = state.task_store.get_task(task_id)
    state.task_store.delete_task(task_id)
    logger.info("Task removed id=%s title=%r", task.id, task.title)
    persist_state(state)
    return task
