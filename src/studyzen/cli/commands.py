# src/studyzen/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from enum import StrEnum
from typing import cast

from ..connectors.theme import color_enabled, format_stats, format_task_line
from ..core.errors import NotFoundError, ValidationError
from ..core.ports import ShellPrompt
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_models import (
    DEFAULT_DIFFICULTY,
    DEFAULT_PRIORITY,
    DEFAULT_TYPE,
    Difficulty,
    Priority,
    Task,
    TaskType,
    ToggleResult,
)

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], ShellPrompt | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

NO_SELECTION = "No task selected. Pass the task number from /list, e.g. /done 1."
CONFIRM_ANSWERS = ("y", "yes")


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._raw: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        raw_args: bool = False,
    ) -> None:
        """
        raw_args=True hands the handler the rest of the line untouched as a
        single argument (free text such as titles keeps its spacing).
        """
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        names = [key, *(a.lower() for a in aliases)]
        for alias in names[1:]:
            self._handlers[alias] = handler
        if raw_args:
            self._raw.update(names)

    def handle(
        self,
        state: AppState,
        line: str,
        prompt: ShellPrompt | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if name in self._raw:
            rest = line[1:].lstrip()[len(parts[0]):].strip()
            args = [rest] if rest else []

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, prompt)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Save and quit.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- shared helpers ----


def _use_color(state: AppState) -> bool:
    return color_enabled(bool(getattr(state.settings, "console_color", True)))


def _select(state: AppState, args: list[str]) -> Task | str:
    """
    Resolve the 1-based list number in args[0] to a task.
    Returns a user-facing message instead when nothing valid is selected.

    The row is picked by number, but /done and /delete then act by task id.
    A hand-edited file can carry the same id twice; the store resolves such
    an id to the first task holding it, whichever row was picked.
    """
    if not args:
        return NO_SELECTION
    try:
        number = int(args[0])
    except ValueError:
        return f"Not a task number: {args[0]}"

    tasks = state.task_store.list_tasks()
    if number < 1 or number > len(tasks):
        return f"No task #{number}. Use /list to see task numbers."
    selected = tasks[number - 1]
    if sum(1 for t in tasks if t.id == selected.id) > 1:
        logger.warning(
            "Task #%d shares id=%s with another task; acting on the first one",
            number,
            selected.id,
        )
    return selected


def _parse_choice(raw: str, choices: type[StrEnum], default: StrEnum, label: str) -> str:
    value = raw.strip().lower()
    if not value:
        return default.value
    allowed = [c.value for c in choices]
    if value not in allowed:
        raise ValueError(f"Invalid {label} '{raw.strip()}'. Choose one of: {', '.join(allowed)}.")
    return value


def format_toggle_message(result: ToggleResult) -> str:
    if result.is_completion:
        return (
            "Task Completed! "
            f"+{result.points_awarded} points earned! Current streak: {result.streak}"
        )
    return "Task marked incomplete."


# ---- commands ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    use_color = _use_color(state)
    lines = [format_stats(state.task_store.get_stats(), enabled=use_color)]
    tasks = state.task_store.list_tasks()
    if not tasks:
        lines.append("No tasks yet. Use /add to create one.")
    for i, task in enumerate(tasks, start=1):
        lines.append(format_task_line(i, task, enabled=use_color))
    return "\n".join(lines)


def cmd_stats(state: AppState, args: list[str]) -> str:
    return format_stats(state.task_store.get_stats(), enabled=_use_color(state))


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    return (
        "Status:\n"
        f"  App: {getattr(settings, 'app_name', 'StudyZen')}\n"
        f"  Data file: {getattr(settings, 'state_path', '?')}\n"
        f"  Tasks: {state.task_store.count_tasks()}"
    )


def cmd_add(state: AppState, args: list[str], prompt: ShellPrompt | None = None) -> str:
    """
    /add <title> | <subject> [| type | priority | difficulty]
    /add                       -> interactive form (console only)
    """
    if args:
        fields = [f.strip() for f in args[0].split("|")]
    elif prompt is not None:
        fields = [
            prompt.ask("Title"),
            prompt.ask("Subject"),
            prompt.ask("Type (study/assignment/exam)", DEFAULT_TYPE.value),
            prompt.ask("Priority (low/medium/high)", DEFAULT_PRIORITY.value),
            prompt.ask("Difficulty (easy/medium/hard)", DEFAULT_DIFFICULTY.value),
        ]
    else:
        return "Usage: /add <title> | <subject> [| type | priority | difficulty]"

    fields += [""] * (5 - len(fields))
    title, subject, raw_type, raw_priority, raw_difficulty = fields[:5]

    try:
        task_type = _parse_choice(raw_type, TaskType, DEFAULT_TYPE, "type")
        priority = _parse_choice(raw_priority, Priority, DEFAULT_PRIORITY, "priority")
        difficulty = _parse_choice(raw_difficulty, Difficulty, DEFAULT_DIFFICULTY, "difficulty")
        task = task_api.add_task(
            state,
            title=title,
            subject=subject,
            type=task_type,
            priority=priority,
            difficulty=difficulty,
        )
    except ValidationError as e:
        return f"Input Error: {e}"
    except ValueError as e:
        return str(e)

    return f"Task Added! {task.title} has been added to your planner."


def cmd_done(state: AppState, args: list[str]) -> str:
    selected = _select(state, args)
    if isinstance(selected, str):
        return selected
    try:
        result = task_api.toggle_task(state, selected.id)
    except NotFoundError:
        logger.warning("Toggle on vanished task id=%s", selected.id)
        return NO_SELECTION
    return format_toggle_message(result)


def cmd_delete(state: AppState, args: list[str], prompt: ShellPrompt | None = None) -> str:
    """
    /delete <n>       -> asks for confirmation
    /delete <n> yes   -> no question asked
    """
    selected = _select(state, args)
    if isinstance(selected, str):
        return selected

    question = f"Are you sure you want to delete '{selected.title}'?"
    if len(args) > 1 and args[1].lower() in CONFIRM_ANSWERS:
        confirmed = True
    elif prompt is not None:
        confirmed = prompt.confirm(question)
    else:
        return f"{question} Repeat with: /delete {args[0]} yes"

    if not confirmed:
        return "Deletion cancelled."

    try:
        task_api.remove_task(state, selected.id)
    except NotFoundError:
        logger.warning("Delete on vanished task id=%s", selected.id)
        return NO_SELECTION
    return "Task Removed. Task has been deleted from your planner."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show points, streak and all tasks.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task: /add title | subject [| type | priority | difficulty].",
    aliases=["new"],
    raw_args=True,
)
registry.register(
    "done", cmd_done, help_text="Toggle completion of task <n>: /done 2.", aliases=["toggle", "t"]
)
registry.register(
    "delete", cmd_delete, help_text="Delete task <n> (asks first): /delete 2.", aliases=["del", "rm"]
)
registry.register("stats", cmd_stats, help_text="Show points and streak.")
registry.register("status", cmd_status, help_text="Show app name, data file and task count.")
