"""Todoリストページの派生値とHTMLレンダリング"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from markupsafe import Markup

from .models import StaticItem, Task


class TaskFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"


@dataclass(frozen=True, slots=True)
class TaskCounts:
    total: int
    completed: int
    pending: int


def count_tasks(tasks: Sequence[Task]) -> TaskCounts:
    completed = sum(1 for task in tasks if task.completed)
    return TaskCounts(total=len(tasks), completed=completed, pending=len(tasks) - completed)


def filter_tasks(tasks: Iterable[Task], task_filter: TaskFilter = TaskFilter.ALL) -> list[Task]:
    if task_filter is TaskFilter.COMPLETED:
        return [task for task in tasks if task.completed]
    if task_filter is TaskFilter.PENDING:
        return [task for task in tasks if not task.completed]
    return list(tasks)


def _button(action: str, label: str, css: str = "") -> Markup:
    return Markup(
        '<form method="post" action="{action}" class="inline">'
        '<button type="submit" class="{css}">{label}</button></form>'
    ).format(action=action, css=css, label=label)


def _checkbox(action: str, checked: bool) -> Markup:
    return Markup(
        '<form method="post" action="{action}" class="inline">'
        '<input type="checkbox" onchange="this.form.submit()"{checked} /></form>'
    ).format(action=action, checked=Markup(" checked") if checked else "")


def _row(
    item: StaticItem | Task,
    prefix: str,
    editing_id: Optional[int],
    pending_text: str,
) -> Markup:
    parts = [_checkbox(f"/{prefix}/{item.id}/toggle", item.done)]
    if editing_id == item.id:
        parts.append(
            Markup(
                '<form method="post" action="/{prefix}/save" class="inline">'
                '<input type="text" name="text" value="{value}" autofocus />'
                '<button type="submit">Save</button></form>'
            ).format(prefix=prefix, value=pending_text)
        )
    else:
        css = "done" if item.done else ""
        parts.append(Markup('<span class="{css}">{label}</span>').format(css=css, label=item.label))
        parts.append(_button(f"/{prefix}/{item.id}/edit", "Edit"))
    parts.append(_button(f"/{prefix}/{item.id}/delete", "Delete", css="delete"))
    return Markup('<li data-id="{id}">{body}</li>').format(id=item.id, body=Markup("").join(parts))


def render_todo_list(
    *,
    static_items: Sequence[StaticItem],
    static_editing_id: Optional[int],
    static_pending_text: str,
    tasks: Sequence[Task],
    task_filter: TaskFilter,
    task_editing_id: Optional[int],
    task_pending_text: str,
    new_task_text: str,
) -> Markup:
    """コンポーネント全体を描画する（与えられた状態の純粋関数）"""
    counts = count_tasks(tasks)
    static_rows = Markup("").join(
        _row(item, "static", static_editing_id, static_pending_text) for item in static_items
    )
    task_rows = Markup("").join(
        _row(task, "tasks", task_editing_id, task_pending_text)
        for task in filter_tasks(tasks, task_filter)
    )
    return Markup(
        '<div class="todo-list">'
        "<h1>Todo List</h1>"
        '<p class="summary">Total: {total}, Completed: {completed}, Pending: {pending}</p>'
        '<section class="static-todos"><h2>Static Todos</h2><ul>{static_rows}</ul>'
        "{clear_static}</section>"
        '<section class="add-task">'
        '<form method="post" action="/tasks">'
        '<input type="text" name="text" placeholder="Add a new task" value="{new_task_text}" />'
        '<button type="submit">Add</button></form></section>'
        '<section class="tasks"><ul>{task_rows}</ul>{clear_tasks}</section>'
        "</div>"
    ).format(
        total=counts.total,
        completed=counts.completed,
        pending=counts.pending,
        static_rows=static_rows,
        clear_static=_button("/static/clear", "Clear All Static Todos"),
        new_task_text=new_task_text,
        task_rows=task_rows,
        clear_tasks=_button("/tasks/clear", "Clear All Tasks"),
    )


PAGE_STYLE = """
body { font-family: sans-serif; background: #f3f4f6; }
.todo-list { max-width: 28rem; margin: 2rem auto; padding: 1.5rem; background: #fff; border-radius: 0.5rem; }
.todo-list h1 { text-align: center; }
.summary { text-align: center; color: #374151; }
.todo-list ul { list-style: none; padding: 0; }
.todo-list li { display: flex; align-items: center; gap: 0.5rem; margin-bottom: 0.5rem; }
.inline { display: inline; }
.done { text-decoration: line-through; color: #6b7280; }
"""


def render_page(body: Markup, title: str = "Todo List") -> str:
    return str(
        Markup(
            "<!DOCTYPE html><html><head><meta charset=\"utf-8\" />"
            "<title>{title}</title><style>{style}</style></head>"
            "<body>{body}</body></html>"
        ).format(title=title, style=Markup(PAGE_STYLE), body=body)
    )
