# src/studyzen/connectors/theme.py

"""Color & style helpers for the console shell.

- Truecolor when COLORTERM advertises it, 256-color cube otherwise.
- Disabled when stdout is not a TTY unless FORCE_COLOR=1.
- NO_COLOR disables everything.
"""

from __future__ import annotations

import os
import sys

from ..tasks.task_models import Priority, Stats, Task

PRIORITY_HEX: dict[str, str] = {
    Priority.HIGH: "#D9534F",
    Priority.MEDIUM: "#F0AD4E",
    Priority.LOW: "#5CB85C",
}

RESET = "0"
BOLD = "1"
DIM = "2"
ITALIC = "3"


def color_enabled(allowed: bool = True) -> bool:
    if not allowed or os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}:
        return True
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def _fg_from_hex(hex_code: str) -> str:
    h = hex_code.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    if any(tok in os.environ.get("COLORTERM", "").lower() for tok in ("truecolor", "24bit")):
        return f"38;2;{r};{g};{b}"

    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    return f"38;5;{16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)}"


def style(text: str, *codes: str, enabled: bool = True) -> str:
    codes = tuple(c for c in codes if c)
    if not enabled or not codes:
        return text
    return f"\033[{';'.join(codes)}m{text}\033[{RESET}m"


def priority_code(priority: str) -> str:
    hex_code = PRIORITY_HEX.get(priority.strip().lower())
    return _fg_from_hex(hex_code) if hex_code else ""


def format_task_line(number: int, task: Task, *, enabled: bool = True) -> str:
    """
    One list row:  `3. [x] HIGH: Algebra HW (Sub: Math, Type: study)`

    Completed tasks are dimmed and italic; the priority tag keeps its color
    only while the task is open.
    """
    check = "[x]" if task.completed else "[ ]"
    tag = task.priority.upper()
    details = f"(Sub: {task.subject}, Type: {task.type})"

    if task.completed:
        return style(
            f"{number}. {check} {tag}: {task.title} {details}", DIM, ITALIC, enabled=enabled
        )

    tag_s = style(tag, priority_code(task.priority), enabled=enabled)
    title_s = style(task.title, BOLD, enabled=enabled)
    return f"{number}. {check} {tag_s}: {title_s} {details}"


def format_stats(stats: Stats, *, enabled: bool = True) -> str:
    points = style(str(stats.points), BOLD, enabled=enabled)
    streak = style(f"{stats.streak} days", BOLD, enabled=enabled)
    return f"Points: {points} | Streak: {streak}"
