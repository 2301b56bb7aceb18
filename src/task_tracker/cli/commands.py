# src/task_tracker/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import replace
from typing import cast

from ..core.errors import NotFoundError, ValidationError
from ..core.state import AppState
from ..tasks.filters import apply_filters, count_tasks
from ..tasks.task_models import FilterSpec, Priority, PriorityFilter, StatusFilter
from .render import DEFAULT_DATE_FORMAT, render_counts, render_filters, render_view

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

_PRIORITIES = {p.value for p in Priority}


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

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

        Store errors (validation / unknown id) become the reply text.
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
        except ValidationError as e:
            return f"Invalid input: {e.message}"
        except NotFoundError as e:
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def _parse_id(raw: str) -> int:
    try:
        return int(raw.lstrip("#"))
    except ValueError:
        raise ValidationError(f"Task id must be a number, got {raw!r}.", field="id") from None


def _split_task_args(args: list[str]) -> tuple[str, str, str]:
    """
    "<YYYY-MM-DD> [low|medium|high] <text...>" -> (due, priority, text).

    Priority defaults to medium when the second word is not a priority.
    """
    if not args:
        raise ValidationError("Due date must be filled.", field="due_date")
    due = args[0]
    rest = args[1:]
    priority = Priority.MEDIUM.value
    if rest and rest[0].lower() in _PRIORITIES:
        priority = rest[0].lower()
        rest = rest[1:]
    return due, priority, " ".join(rest)


def current_view(state: AppState) -> str:
    tasks = state.store.list()
    fmt = getattr(state.settings, "date_display_format", DEFAULT_DATE_FORMAT)
    return render_view(
        apply_filters(tasks, state.filters),
        count_tasks(tasks),
        state.filters,
        state.today(),
        fmt,
    )


def _persist_note(state: AppState) -> str:
    err = state.store.last_save_error
    if err is None:
        return ""
    return f"\n[warning] Changes are kept for this session but were not saved: {err.message}"


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return current_view(state)


def cmd_add(state: AppState, args: list[str]) -> str:
    """/add 2024-06-12 high Buy milk"""
    due, priority, text = _split_task_args(args)
    task = state.store.create(text, due, priority)
    return f"Added task #{task.id}." + _persist_note(state)


def cmd_edit(state: AppState, args: list[str]) -> str:
    """/edit <id> 2024-06-12 low New text"""
    if not args:
        return "Usage: /edit <id> <YYYY-MM-DD> [low|medium|high] <text>"
    task_id = _parse_id(args[0])
    state.store.get(task_id)
    due, priority, text = _split_task_args(args[1:])
    task = state.store.update(task_id, text, due, priority)
    return f"Updated task #{task.id}." + _persist_note(state)


def _set_completed(state: AppState, args: list[str], completed: bool) -> str:
    if not args:
        return "Usage: /done <id> or /undo <id>"
    task = state.store.toggle_complete(_parse_id(args[0]), completed)
    status = "completed" if task.completed else "pending"
    return f"Task #{task.id} marked {status}." + _persist_note(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, True)


def cmd_undo(state: AppState, args: list[str]) -> str:
    return _set_completed(state, args, False)


def cmd_rm(
    state: AppState,
    args: list[str],
    emit: CommandEmitter | None = None,
) -> str:
    if not args:
        return "Usage: /rm <id>"
    task_id = _parse_id(args[0])
    task = state.store.get(task_id)
    if emit:
        emit(f'Deleting "{task.text}"...')
    state.store.delete(task_id)
    return f"Deleted task #{task_id}." + _persist_note(state)


def cmd_clear(state: AppState, args: list[str]) -> str:
    """
    /clear      -> ask for confirmation
    /clear yes  -> delete every task
    /clear no   -> cancel
    """
    if len(state.store) == 0:
        state.clear_pending = False
        return "There are no tasks to clear."

    arg = args[0].lower() if args else ""

    if arg in ("yes", "y") and state.clear_pending:
        state.clear_pending = False
        total = len(state.store)
        state.store.clear_all()
        return f"Cleared {total} task(s)." + _persist_note(state)

    if arg in ("no", "n"):
        state.clear_pending = False
        return "Clear cancelled."

    state.clear_pending = True
    return f"This deletes all {len(state.store)} task(s). Type /clear yes to confirm or /clear no to cancel."


def cmd_search(state: AppState, args: list[str]) -> str:
    state.filters = replace(state.filters, search_text=" ".join(args))
    return current_view(state)


def cmd_status(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Status filter is {state.filters.status.value}. Use /status all|completed|pending."
    try:
        status = StatusFilter(args[0].lower())
    except ValueError:
        return "Usage: /status all|completed|pending"
    state.filters = replace(state.filters, status=status)
    return current_view(state)


def cmd_priority(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Priority filter is {state.filters.priority.value}. Use /priority all|low|medium|high."
    try:
        priority = PriorityFilter(args[0].lower())
    except ValueError:
        return "Usage: /priority all|low|medium|high"
    state.filters = replace(state.filters, priority=priority)
    return current_view(state)


def cmd_reset(state: AppState, args: list[str]) -> str:
    state.filters = FilterSpec()
    return current_view(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    counts = count_tasks(state.store.list())
    return f"{render_counts(counts)}\n{render_filters(state.filters)}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show tasks matching the current filters.", aliases=["ls"])
registry.register(
    "add", cmd_add, help_text="Add a task: /add YYYY-MM-DD [low|medium|high] <text>."
)
registry.register(
    "edit", cmd_edit, help_text="Edit a task: /edit <id> YYYY-MM-DD [low|medium|high] <text>."
)
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.")
registry.register("undo", cmd_undo, help_text="Mark a task pending again: /undo <id>.")
registry.register("rm", cmd_rm, help_text="Delete a task: /rm <id>.", aliases=["del"])
registry.register("clear", cmd_clear, help_text="Delete all tasks (asks for confirmation).")
registry.register("search", cmd_search, help_text="Filter by text: /search <text> (empty resets).")
registry.register("status", cmd_status, help_text="Filter by status: /status all|completed|pending.")
registry.register(
    "priority", cmd_priority, help_text="Filter by priority: /priority all|low|medium|high."
)
registry.register("reset", cmd_reset, help_text="Reset all filters.")
registry.register("stats", cmd_stats, help_text="Show total/completed/pending counters.")
