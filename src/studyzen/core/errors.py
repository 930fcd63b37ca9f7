# src/studyzen/core/errors.py

"""
Error taxonomy.

- ValidationError: user input rejected before the store is touched.
- NotFoundError: an operation referenced a task id that does not exist.
- LoadError / PersistError: the session file could not be read / written.

Load and persist failures are logged and swallowed at the shell seam;
none of these errors is fatal to the process.
"""

from __future__ import annotations


class StudyZenError(Exception):
    """Base class for all application errors."""


class ValidationError(StudyZenError, ValueError):
    pass


class NotFoundError(StudyZenError, LookupError):
    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class LoadError(StudyZenError):
    pass


class PersistError(StudyZenError):
    pass
