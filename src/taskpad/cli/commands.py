# src/taskpad/cli/commands.py

from __future__ import annotations

from collections.abc import Callable

from ..connectors.render import render_board, render_stats
from ..core.state import AppState
from ..tasks.task_api import request_delete, submit_form
from ..tasks.task_models import FilterMode, Priority, SortMode, TaskInput

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[AppState, str, CommandEmitter | None], str]

FORM_USAGE = "Usage: /add <title> | <description> | <due YYYY-MM-DD> | <low|medium|high>"


class CommandRegistry:
    """Slash-command registry: one user gesture -> one handler."""

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

    def handle(self, state: AppState, line: str, emit: CommandEmitter | None = None) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].strip().split(maxsplit=1)
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1] if len(parts) > 1 else ""

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, emit)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_form(text: str) -> TaskInput:
    """
    "title | description | due | priority" -> TaskInput.
    Missing trailing fields take defaults (no description, no due date, medium).
    """
    fields = text.split("|")
    fields += [""] * (4 - len(fields))
    title, description, due, priority = fields[:4]
    priority = priority.strip().lower() or Priority.MEDIUM
    return TaskInput(
        title=title,
        description=description,
        due_date=due.strip() or None,
        priority=priority,
    )


def _format_form(data: TaskInput) -> str:
    return f"{data.title} | {data.description} | {data.due_date or ''} | {data.priority}"


def _board(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "Task Manager Pro"))
    return render_board(state.store, state.theme, app_name=app_name)


def cmd_help(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    data = parse_form(args)
    if not data.title.strip():
        return "Title required.\n" + FORM_USAGE

    was_editing = state.store.editing_task_id
    task = submit_form(state.store, data)
    if task is None:
        return f"Task {was_editing} no longer exists; nothing updated."
    if was_editing is not None:
        return f"Updated task {task.id}."
    return f"Added task {task.id}."


def cmd_edit(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    task_id = args.strip()
    if not task_id:
        return "Usage: /edit <id>"
    snapshot = state.store.begin_edit(task_id)
    if snapshot is None:
        return f"No task with id {task_id}."
    return (
        f"Editing task {task_id}. Current values:\n"
        f"  {_format_form(snapshot)}\n"
        "Send /add with the new values, or /cancel."
    )


def cmd_cancel(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    state.store.end_edit()
    return "Back to add mode."


def cmd_toggle(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    task_id = args.strip()
    if not task_id:
        return "Usage: /done <id>"
    if not state.store.toggle_completion(task_id):
        return f"No task with id {task_id}."
    task = state.store.get(task_id)
    return f"Task {task_id} marked {'completed' if task and task.completed else 'pending'}."


def cmd_delete(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    task_id = args.strip()
    if not task_id:
        return "Usage: /rm <id>"
    if state.store.get(task_id) is None:
        return f"No task with id {task_id}."
    if not request_delete(state.store, task_id, state.confirm):
        return "Delete cancelled."
    return f"Task {task_id} deleted."


def cmd_filter(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    modes = [m.value for m in FilterMode]
    mode = args.strip().lower()
    if mode not in modes:
        return f"Usage: /filter {'|'.join(modes)}"
    state.store.set_filter(mode)
    return f"Filter: {mode}."


def cmd_sort(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    modes = [m.value for m in SortMode]
    mode = args.strip().lower()
    if mode not in modes:
        return f"Usage: /sort {'|'.join(modes)}"
    state.store.set_sort(mode)
    return f"Sort: {mode}."


def cmd_list(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    return _board(state)


def cmd_stats(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    return render_stats(state.store.statistics())


def cmd_theme(state: AppState, args: str, emit: CommandEmitter | None = None) -> str:
    theme = state.theme.toggle()
    return f"Theme: {theme.value} {state.theme.icon}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "add",
    cmd_add,
    help_text="Add a task (or save the one being edited): /add title | description | due | priority.",
    aliases=["submit", "save"],
)
registry.register("edit", cmd_edit, help_text="Load a task into the form: /edit <id>.")
registry.register("cancel", cmd_cancel, help_text="Leave edit mode without saving.")
registry.register(
    "done", cmd_toggle, help_text="Toggle completion: /done <id>.", aliases=["toggle"]
)
registry.register(
    "rm", cmd_delete, help_text="Delete a task (asks first): /rm <id>.", aliases=["delete"]
)
registry.register("filter", cmd_filter, help_text="Show all | completed | pending tasks.")
registry.register(
    "sort", cmd_sort, help_text="date-asc | date-desc | priority-high | priority-low | none."
)
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show task counts.")
registry.register("theme", cmd_theme, help_text="Toggle light/dark theme.")
