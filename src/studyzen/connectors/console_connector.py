# src/studyzen/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], str]
WriteLine = Callable[[str], None]


class ConsolePrompt:
    """ShellPrompt over plain input()/print()."""

    def __init__(self, read_line: ReadLine = input, write: WriteLine = print) -> None:
        self._read = read_line
        self._write = write

    def emit(self, text: str) -> None:
        self._write(text)

    def confirm(self, question: str) -> bool:
        answer = self._read(f"{question} [y/N]: ").strip().lower()
        return answer in ("y", "yes")

    def ask(self, question: str, default: str = "") -> str:
        suffix = f" [{default}]" if default else ""
        answer = self._read(f"{question}{suffix}: ").strip()
        return answer or default


def run_console_loop(
    state: AppState,
    *,
    read_line: ReadLine = input,
    write: WriteLine = print,
) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "StudyZen"))
    prompt = ConsolePrompt(read_line, write)

    write(f"{app_name} - Smart Study Planner")
    write(command_registry.handle(state, "/list") or "")
    write("Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = read_line("> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, user_input, prompt)
        except (EOFError, KeyboardInterrupt):
            write("Cancelled.")
            continue
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            reply = "Commands start with '/'. Use /help to list available commands."
        write(reply)

    logger.info("Console connector finished.")
