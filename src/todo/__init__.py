"""Todoリストコンポーネント（モデル・コントローラ・ストレージ・描画）"""

from .component import TodoListComponent
from .controllers import StaticListController, TaskListController
from .models import NOT_EDITING, Editing, EditState, NotEditing, StaticItem, Task
from .storage import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore, TaskStorage
from .view import TaskCounts, TaskFilter

__all__ = [
    "TodoListComponent",
    "StaticListController",
    "TaskListController",
    "NOT_EDITING",
    "Editing",
    "EditState",
    "NotEditing",
    "StaticItem",
    "Task",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "TaskStorage",
    "TaskCounts",
    "TaskFilter",
]
