"""静的Todoリストと永続化タスクリストのコントローラ

どちらのリストも値として扱う。各操作は新しいリストを組み立てて
`_replace` に渡すため、呼び出し側が途中状態を見ることはない。
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Generic, Iterable, Optional, TypeVar

from .models import (
    NOT_EDITING,
    SEED_ITEMS,
    EditState,
    Editing,
    StaticItem,
    Task,
)
from .storage import TaskStorage

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", StaticItem, Task)


def wall_clock_ms() -> int:
    """エポックからのミリ秒（新規タスクのIDとして使用）"""
    return int(time.time() * 1000)


class _ListController(Generic[ItemT]):
    def __init__(self, items: Iterable[ItemT] = ()):
        self._items: list[ItemT] = list(items)
        self._edit: EditState = NOT_EDITING

    @property
    def items(self) -> list[ItemT]:
        return list(self._items)

    @property
    def edit_state(self) -> EditState:
        return self._edit

    def editing_id(self) -> Optional[int]:
        return self._edit.id if isinstance(self._edit, Editing) else None

    def pending_text(self) -> str:
        return self._edit.pending_text if isinstance(self._edit, Editing) else ""

    def _replace(self, items: list[ItemT]) -> None:
        self._items = items

    def toggle(self, item_id: int) -> None:
        self._replace(
            [item.toggled() if item.id == item_id else item for item in self._items]
        )

    def start_edit(self, item_id: int, current_text: str) -> None:
        # 別の行で未保存の編集は破棄される
        self._edit = Editing(id=item_id, pending_text=current_text)

    def set_pending_text(self, text: str) -> None:
        if isinstance(self._edit, Editing):
            self._edit = Editing(id=self._edit.id, pending_text=text)

    def commit_edit(self) -> None:
        edit = self._edit
        self._edit = NOT_EDITING
        if not isinstance(edit, Editing) or not edit.pending_text.strip():
            return
        self._replace(
            [
                item.renamed(edit.pending_text) if item.id == edit.id else item
                for item in self._items
            ]
        )

    def delete(self, item_id: int) -> None:
        self._replace([item for item in self._items if item.id != item_id])

    def clear_all(self) -> None:
        self._replace([])


class StaticListController(_ListController[StaticItem]):
    """初期3件のTodoに対するメモリ内CRUD"""

    def __init__(self, items: Iterable[StaticItem] = SEED_ITEMS):
        super().__init__(items)

    def toggle_done(self, item_id: int) -> None:
        self.toggle(item_id)


class TaskListController(_ListController[Task]):
    """リストを置き換えるたびにストレージへ保存するタスクリスト"""

    def __init__(
        self,
        storage: TaskStorage,
        items: Iterable[Task] = (),
        clock: Callable[[], int] = wall_clock_ms,
    ):
        super().__init__(items)
        self.storage = storage
        self.clock = clock

    @classmethod
    def mount(
        cls,
        storage: TaskStorage,
        clock: Callable[[], int] = wall_clock_ms,
    ) -> "TaskListController":
        """ストレージを一度だけ読み込む。データが無ければ空リストで開始"""
        loaded = storage.load()
        if loaded is None:
            logger.info("No stored tasks under %r; starting empty", storage.key)
            loaded = []
        return cls(storage, loaded, clock=clock)

    def _replace(self, items: list[Task]) -> None:
        super()._replace(items)
        self.storage.save(items)

    def add(self, text: str) -> Optional[Task]:
        """タスクを追加して返す。空文字の場合はNone"""
        if not text.strip():
            return None
        task = Task(id=self.clock(), text=text, completed=False)
        self._replace([*self._items, task])
        logger.debug("Added task id=%s", task.id)
        return task
