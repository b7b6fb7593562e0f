"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from src.todo import JsonFileKeyValueStore, Task, TaskCounts, TaskStorage, TodoListComponent
from src.todo_board.config import Config
from src.todo_board.logger import setup_logger

from .schemas import TaskCountsResponse, TaskResponse, TodoListStateResponse

config = Config.from_yaml()
setup_logger(log_level=config.log_level, log_file=config.log_path())


def resolve_storage_path() -> Path:
    """Storage file path, overridable with TODO_BOARD_STORAGE_PATH."""
    env_path = os.getenv("TODO_BOARD_STORAGE_PATH")
    if env_path:
        return Path(env_path)
    return config.storage_path()


@lru_cache(maxsize=1)
def get_task_storage() -> TaskStorage:
    """Singleton TaskStorage over the JSON file store."""
    store = JsonFileKeyValueStore(resolve_storage_path())
    return TaskStorage(store, key=config.storage.key)


@lru_cache(maxsize=1)
def get_component() -> TodoListComponent:
    """Lazily mount the single component instance."""
    return TodoListComponent.mount(get_task_storage())


def reset_component() -> None:
    """Drop the mounted component so the next request mounts a fresh one."""
    get_component.cache_clear()
    get_task_storage.cache_clear()


def serialize_counts(counts: TaskCounts) -> TaskCountsResponse:
    return TaskCountsResponse(
        total=counts.total,
        completed=counts.completed,
        pending=counts.pending,
    )


def serialize_task(task: Task) -> TaskResponse:
    return TaskResponse(id=task.id, text=task.text, completed=task.completed)


def serialize_state(component: TodoListComponent) -> TodoListStateResponse:
    return TodoListStateResponse(
        filter=component.task_filter.value,
        counts=serialize_counts(component.counts),
        tasks=[serialize_task(task) for task in component.filtered_tasks],
    )
