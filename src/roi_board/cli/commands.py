# src/roi_board/cli/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
import shlex
from collections.abc import Callable
from typing import Any, cast

from ..core.state import AppState
from ..tasks.task_api import ranked_tasks, submit_task
from ..tasks.task_models import Task
from ..tasks.task_view import SHORT_ID_LEN, render_details, render_table

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

# key=value names accepted by /add and /edit -> task field
FIELD_ALIASES: dict[str, str] = {
    "title": "title",
    "revenue": "revenue",
    "time": "time_taken",
    "hours": "time_taken",
    "time_taken": "time_taken",
    "priority": "priority",
    "status": "status",
    "notes": "notes",
}


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Could not parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except ValueError as e:
            # Rejected input (bad priority, duplicate title, ...) is a user error.
            logger.debug("Command /%s rejected: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_fields(args: list[str]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for arg in args:
        key, sep, value = arg.partition("=")
        if not sep:
            raise ValueError(f"Expected key=value, got {arg!r}")
        field_name = FIELD_ALIASES.get(key.strip().lower())
        if field_name is None:
            raise ValueError(
                f"Unknown field {key!r}. Known: {', '.join(sorted(FIELD_ALIASES))}"
            )
        fields[field_name] = value
    return fields


def resolve_task(state: AppState, token: str) -> Task:
    """Find a task by full id or unique id prefix."""
    token = token.strip()
    if not token:
        raise ValueError("Task id is required")
    matches = [t for t in state.task_store.list_tasks() if t.id.startswith(token)]
    if not matches:
        raise ValueError(f"No task with id {token!r}")
    if len(matches) > 1:
        raise ValueError(f"Id prefix {token!r} is ambiguous ({len(matches)} tasks)")
    return matches[0]


def _table(state: AppState) -> str:
    settings = state.settings
    return render_table(
        ranked_tasks(state.task_store),
        currency_symbol=getattr(settings, "currency_symbol", "$"),
        notes_preview_chars=getattr(settings, "notes_preview_chars", 48),
    )


def _notify(emit: CommandEmitter | None, text: str) -> None:
    if emit:
        with contextlib.suppress(Exception):
            emit(text)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return _table(state)


def cmd_add(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /add title="Write report" revenue=1200 time=4 priority=High [status=..] [notes=..]
    """
    fields = parse_fields(args)
    missing = [f for f in ("title", "revenue", "time_taken", "priority") if f not in fields]
    if missing:
        return (
            f"Missing fields: {', '.join(missing)}.\n"
            'Usage: /add title="..." revenue=N time=H priority=High|Medium|Low '
            '[status=..] [notes=..]'
        )
    task_id = submit_task(state.task_store, fields)
    _notify(emit, f"Added task {task_id[:SHORT_ID_LEN]}.")
    return _table(state)


def cmd_edit(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /edit <id> key=value ...
    """
    if len(args) < 2:
        return "Usage: /edit <id> key=value ... (fields: title, revenue, time, priority, status, notes)"
    task = resolve_task(state, args[0])
    fields = parse_fields(args[1:])
    submit_task(state.task_store, {"id": task.id, **fields})
    _notify(emit, f"Updated task {task.id[:SHORT_ID_LEN]}.")
    return _table(state)


def cmd_delete(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if not args:
        return "Usage: /delete <id>"
    task = resolve_task(state, args[0])
    state.task_store.delete_task(task.id)
    _notify(emit, f"Deleted task {task.id[:SHORT_ID_LEN]} ({task.title}).")
    return _table(state)


def cmd_show(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /show <id>"
    task = resolve_task(state, args[0])
    return render_details(task, currency_symbol=getattr(state.settings, "currency_symbol", "$"))


def cmd_status(state: AppState, args: list[str]) -> str:
    return (
        "Status:\n"
        f"  App: {getattr(state.settings, 'app_name', 'roi-board')}\n"
        f"  Tasks: {state.task_store.count_tasks()}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks ranked by ROI.", aliases=["ls"])
registry.register(
    "add",
    cmd_add,
    help_text='Add a task: /add title="..." revenue=N time=H priority=High|Medium|Low.',
)
registry.register("edit", cmd_edit, help_text="Update fields: /edit <id> key=value ...")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("show", cmd_show, help_text="Show task details: /show <id>.")
registry.register("status", cmd_status, help_text="Show app name and task count.")
