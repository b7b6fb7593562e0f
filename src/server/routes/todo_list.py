"""Todo list page and its form handlers.

Every POST invokes one component handler and redirects back to the page.
Handlers are plain `async def` so they run on the event loop one at a time.
Task ids in the URL are matched as strings because stored rows are not
checked against the Task shape.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse

from src.todo.view import render_page
from src.todo_board.exceptions import StorageError

from ..dependencies import get_component

logger = logging.getLogger(__name__)


def _back_to_page() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


def _apply(action: str, handler: Callable[..., Any], *args: Any) -> RedirectResponse:
    try:
        handler(*args)
    except StorageError as exc:
        logger.exception("Failed to %s: %s", action, exc)
        raise HTTPException(status_code=500, detail=f"Failed to {action}") from exc
    return _back_to_page()


def register_todo_list_routes(app: FastAPI) -> None:
    """Register the page and the static/task list form endpoints."""

    @app.get("/", response_class=HTMLResponse)
    async def todo_list_page() -> HTMLResponse:
        """Render the component from current state."""
        component = get_component()
        return HTMLResponse(render_page(component.render()))

    # Static list

    @app.post("/static/{item_id}/toggle")
    async def toggle_static(item_id: int) -> RedirectResponse:
        return _apply("toggle static todo", get_component().toggle_static, item_id)

    @app.post("/static/{item_id}/edit")
    async def start_edit_static(item_id: int) -> RedirectResponse:
        component = get_component()
        item = component.find_static(item_id)
        if item is not None:
            component.start_edit_static(item.id, item.name)
        return _back_to_page()

    @app.post("/static/save")
    async def save_static(text: str = Form("")) -> RedirectResponse:
        component = get_component()
        component.set_static_edit_text(text)
        return _apply("save static todo", component.commit_static_edit)

    @app.post("/static/{item_id}/delete")
    async def delete_static(item_id: int) -> RedirectResponse:
        return _apply("delete static todo", get_component().delete_static, item_id)

    @app.post("/static/clear")
    async def clear_static() -> RedirectResponse:
        return _apply("clear static todos", get_component().clear_static)

    # Task list

    @app.post("/tasks")
    async def add_task(text: str = Form("")) -> RedirectResponse:
        return _apply("add task", get_component().add_task, text)

    @app.post("/tasks/{task_id}/toggle")
    async def toggle_task(task_id: str) -> RedirectResponse:
        component = get_component()
        task = component.find_task_by_key(task_id)
        if task is None:
            return _back_to_page()
        return _apply("toggle task", component.toggle_task, task.id)

    @app.post("/tasks/{task_id}/edit")
    async def start_edit_task(task_id: str) -> RedirectResponse:
        component = get_component()
        task = component.find_task_by_key(task_id)
        if task is not None:
            component.start_edit_task(task.id, task.text)
        return _back_to_page()

    @app.post("/tasks/save")
    async def save_task(text: str = Form("")) -> RedirectResponse:
        component = get_component()
        component.set_task_edit_text(text)
        return _apply("save task", component.commit_task_edit)

    @app.post("/tasks/{task_id}/delete")
    async def delete_task(task_id: str) -> RedirectResponse:
        component = get_component()
        task = component.find_task_by_key(task_id)
        if task is None:
            return _back_to_page()
        return _apply("delete task", component.delete_task, task.id)

    @app.post("/tasks/clear")
    async def clear_tasks() -> RedirectResponse:
        return _apply("clear tasks", get_component().clear_tasks)
