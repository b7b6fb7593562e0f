from __future__ import annotations

import logging
from typing import Callable, Optional

from markupsafe import Markup

from .controllers import StaticListController, TaskListController, wall_clock_ms
from .models import StaticItem, Task
from .storage import TaskStorage
from .view import TaskCounts, TaskFilter, count_tasks, filter_tasks, render_todo_list

logger = logging.getLogger(__name__)


class TodoListComponent:
    """TodoリストUIコンポーネント（2つの独立したリストとタスク追加入力）

    公開メソッドはすべてイベントハンドラ。各ハンドラはどちらか一方の
    リストだけを操作し、静的リストとタスクリストが互いを参照することはない。
    """

    def __init__(
        self,
        static_list: StaticListController,
        task_list: TaskListController,
        task_filter: TaskFilter = TaskFilter.ALL,
    ):
        self.static_list = static_list
        self.task_list = task_list
        self._task_filter = task_filter
        self.new_task_text = ""

    @classmethod
    def mount(
        cls,
        storage: TaskStorage,
        clock: Callable[[], int] = wall_clock_ms,
    ) -> "TodoListComponent":
        component = cls(
            static_list=StaticListController(),
            task_list=TaskListController.mount(storage, clock=clock),
        )
        logger.info(
            "Todo list mounted with %d static items and %d tasks",
            len(component.static_list.items),
            len(component.task_list.items),
        )
        return component

    # 静的リストのハンドラ

    def toggle_static(self, item_id: int) -> None:
        self.static_list.toggle_done(item_id)

    def start_edit_static(self, item_id: int, current_name: str) -> None:
        self.static_list.start_edit(item_id, current_name)

    def set_static_edit_text(self, text: str) -> None:
        self.static_list.set_pending_text(text)

    def commit_static_edit(self) -> None:
        self.static_list.commit_edit()

    def delete_static(self, item_id: int) -> None:
        self.static_list.delete(item_id)

    def clear_static(self) -> None:
        self.static_list.clear_all()

    # タスクリストのハンドラ

    def set_new_task_text(self, text: str) -> None:
        self.new_task_text = text

    def add_task(self, text: Optional[str] = None) -> Optional[Task]:
        if text is not None:
            self.new_task_text = text
        task = self.task_list.add(self.new_task_text)
        if task is not None:
            self.new_task_text = ""
        return task

    def toggle_task(self, task_id: int) -> None:
        self.task_list.toggle(task_id)

    def start_edit_task(self, task_id: int, current_text: str) -> None:
        self.task_list.start_edit(task_id, current_text)

    def set_task_edit_text(self, text: str) -> None:
        self.task_list.set_pending_text(text)

    def commit_task_edit(self) -> None:
        self.task_list.commit_edit()

    def delete_task(self, task_id: int) -> None:
        self.task_list.delete(task_id)

    def clear_tasks(self) -> None:
        self.task_list.clear_all()

    # ホスト側が行の現在テキストやIDを引くための検索

    def find_static(self, item_id: int) -> Optional[StaticItem]:
        return next((item for item in self.static_list.items if item.id == item_id), None)

    def find_task(self, task_id: int) -> Optional[Task]:
        return next((task for task in self.task_list.items if task.id == task_id), None)

    def find_task_by_key(self, key: str) -> Optional[Task]:
        """URL上のID文字列から保存済みタスクを引く

        保存データは形式チェックしないため、IDが数値とは限らない。
        """
        return next((task for task in self.task_list.items if str(task.id) == key), None)

    # 派生状態

    @property
    def task_filter(self) -> TaskFilter:
        return self._task_filter

    @property
    def counts(self) -> TaskCounts:
        return count_tasks(self.task_list.items)

    @property
    def filtered_tasks(self) -> list[Task]:
        return filter_tasks(self.task_list.items, self._task_filter)

    def render(self) -> Markup:
        return render_todo_list(
            static_items=self.static_list.items,
            static_editing_id=self.static_list.editing_id(),
            static_pending_text=self.static_list.pending_text(),
            tasks=self.task_list.items,
            task_filter=self._task_filter,
            task_editing_id=self.task_list.editing_id(),
            task_pending_text=self.task_list.pending_text(),
            new_task_text=self.new_task_text,
        )
