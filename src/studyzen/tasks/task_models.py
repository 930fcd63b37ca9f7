# src/studyzen/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class TaskType(StrEnum):
    STUDY = "study"
    ASSIGNMENT = "assignment"
    EXAM = "exam"


class Priority(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Difficulty(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class ToggleDirection(StrEnum):
    COMPLETED = "completed"
    REOPENED = "reopened"


# Reward per completion, by priority tier.
PRIORITY_POINTS: dict[str, int] = {
    Priority.HIGH: 30,
    Priority.MEDIUM: 20,
    Priority.LOW: 10,
}
FALLBACK_POINTS = PRIORITY_POINTS[Priority.LOW]

# Defaults of the task creation form.
DEFAULT_TYPE = TaskType.STUDY
DEFAULT_PRIORITY = Priority.HIGH
DEFAULT_DIFFICULTY = Difficulty.MEDIUM


def points_for_priority(priority: str | None) -> int:
    """Points for completing a task; unknown priorities fall back to the low tier."""
    if not priority:
        return FALLBACK_POINTS
    return PRIORITY_POINTS.get(str(priority).strip().lower(), FALLBACK_POINTS)


@dataclass(slots=True)
class Task:
    """
    A single trackable study item.

    Enumerated fields hold plain string values so that a session file
    carrying an unknown value still loads verbatim. `deadline` is epoch
    seconds and is informational only. `time_spent` (minutes) is reserved.
    """

    id: str
    title: str
    subject: str
    type: str
    deadline: float
    priority: str
    difficulty: str
    completed: bool = False
    time_spent: int = 0


@dataclass(slots=True)
class SessionState:
    tasks: list[Task] = field(default_factory=list)
    points: int = 0
    streak: int = 0


@dataclass(frozen=True, slots=True)
class Stats:
    points: int
    streak: int


@dataclass(frozen=True, slots=True)
class ToggleResult:
    task_id: str
    title: str
    completed: bool
    direction: ToggleDirection
    points_awarded: int
    points: int
    streak: int

    @property
    def is_completion(self) -> bool:
        return self.direction is ToggleDirection.COMPLETED
