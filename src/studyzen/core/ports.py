# src/studyzen/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the session file and the console shell swappable and makes
testing easier.
"""

from typing import Protocol

from ..tasks.task_models import SessionState, Stats, Task, ToggleResult


class SessionRepo(Protocol):
    """Durable whole-session storage."""

    def save(self, state: SessionState) -> None: ...
    def load(self) -> SessionState: ...


class TaskRepo(Protocol):
    def create_task(
            self,
            title: str,
            subject: str,
            type: str,
            priority: str,
            difficulty: str,
            deadline: float | None = None,
    ) -> Task: ...

    def toggle_completion(self, task_id: str) -> ToggleResult: ...
    def delete_task(self, task_id: str) -> None: ...
    def get_task(self, task_id: str) -> Task: ...
    def get_stats(self) -> Stats: ...
    def list_tasks(self) -> list[Task]: ...
    def count_tasks(self) -> int: ...
    def snapshot(self) -> SessionState: ...


class ShellPrompt(Protocol):
    """
    Connector-side port: how command handlers talk back to the user.

    - emit: immediate informational line
    - confirm: yes/no question (destructive actions)
    - ask: free-text question with a default answer
    """

    def emit(self, text: str) -> None: ...
    def confirm(self, question: str) -> bool: ...
    def ask(self, question: str, default: str = "") -> str: ...
