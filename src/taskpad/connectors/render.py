# src/taskpad/connectors/render.py

"""
Plain-text rendering of the task list for the console connector.

Card layout (one task):
  [ ] 1735732800000  Buy milk
        2 liters
        📅 Tomorrow   🔴 High
"""

from __future__ import annotations

from datetime import date, timedelta

from ..core.theme import ThemePreference
from ..tasks.task_models import Task, TaskStats
from ..tasks.task_store import TaskStore
from ..tasks.task_views import parse_due_date

PRIORITY_ICONS = {
    "high": "🔴",
    "medium": "🟡",
    "low": "🟢",
}
UNKNOWN_PRIORITY_ICON = "⚪"

EMPTY_STATE = "No tasks here yet. Add one with /add <title> | <description> | <due> | <priority>"

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def priority_icon(priority: str) -> str:
    return PRIORITY_ICONS.get(priority, UNKNOWN_PRIORITY_ICON)


def priority_label(priority: str) -> str:
    return priority[:1].upper() + priority[1:]


def format_date(raw: str, today: date | None = None) -> str:
    """Today / Tomorrow / "Jan 5, 2025"; unparseable input is returned verbatim."""
    d = parse_due_date(raw)
    if d is None:
        return raw
    today = today or date.today()
    if d == today:
        return "Today"
    if d == today + timedelta(days=1):
        return "Tomorrow"
    return f"{_MONTHS[d.month - 1]} {d.day}, {d.year}"


def is_overdue(task: Task, today: date | None = None) -> bool:
    if task.completed:
        return False
    d = parse_due_date(task.due_date)
    if d is None:
        return False
    return d < (today or date.today())


def render_task(task: Task, today: date | None = None) -> list[str]:
    check = "[x]" if task.completed else "[ ]"
    lines = [f"{check} {task.id}  {task.title}"]
    if task.description:
        lines.append(f"      {task.description}")

    meta: list[str] = []
    if task.due_date:
        when = f"📅 {format_date(task.due_date, today)}"
        if is_overdue(task, today):
            when += " (Overdue)"
        meta.append(when)
    meta.append(f"{priority_icon(task.priority)} {priority_label(task.priority)}")
    lines.append("      " + "   ".join(meta))
    return lines


def render_stats(stats: TaskStats) -> str:
    return f"Total: {stats.total}   Pending: {stats.pending}   Completed: {stats.completed}"


def render_header(app_name: str, store: TaskStore, theme: ThemePreference) -> str:
    return (
        f"{app_name} {theme.icon}   "
        f"filter={store.filter_mode} sort={store.sort_mode}   [{store.submit_label}]"
    )


def render_board(
    store: TaskStore,
    theme: ThemePreference,
    *,
    app_name: str = "Task Manager Pro",
    today: date | None = None,
) -> str:
    lines = [render_header(app_name, store, theme), render_stats(store.statistics()), ""]
    visible = store.visible_tasks()
    if not visible:
        lines.append(EMPTY_STATE)
    for task in visible:
        lines.extend(render_task(task, today))
    return "\n".join(lines)
