from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class StaticItem:
    """初期データのTodo行。メモリ上にのみ存在する。"""

    id: int
    name: str
    is_done: bool = False

    @property
    def label(self) -> str:
        return self.name

    @property
    def done(self) -> bool:
        return self.is_done

    def toggled(self) -> "StaticItem":
        return replace(self, is_done=not self.is_done)

    def renamed(self, text: str) -> "StaticItem":
        return replace(self, name=text)


@dataclass(frozen=True, slots=True)
class Task:
    """キーバリューストアに永続化されるユーザータスク"""

    id: int
    text: str
    completed: bool = False

    @property
    def label(self) -> str:
        return self.text

    @property
    def done(self) -> bool:
        return self.completed

    def toggled(self) -> "Task":
        return replace(self, completed=not self.completed)

    def renamed(self, text: str) -> "Task":
        return replace(self, text=text)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "text": self.text, "completed": self.completed}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Task":
        # 保存済みの行は検証しない。欠けたキーはNoneになる
        return cls(
            id=data.get("id"),
            text=data.get("text"),
            completed=data.get("completed"),
        )


@dataclass(frozen=True, slots=True)
class NotEditing:
    """編集中の行なし"""


@dataclass(frozen=True, slots=True)
class Editing:
    """1行だけが編集中。入力途中のテキストを保持する。"""

    id: int
    pending_text: str


EditState = Union[NotEditing, Editing]

NOT_EDITING = NotEditing()

SEED_ITEMS: tuple[StaticItem, ...] = (
    StaticItem(id=1, name="Todo 1"),
    StaticItem(id=2, name="Todo 2"),
    StaticItem(id=3, name="Todo 3"),
)
