"""タスクリストのキーバリュー永続化

`KeyValueStore` はブラウザのlocalStorageと同じ形（文字列キー・文字列値）。
タスクリストのシリアライズ形式を知っているのは `TaskStorage` のみ。
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Protocol

from src.todo_board.exceptions import StorageError

from .models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_KEY = "tasks"


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryKeyValueStore:
    """プロセス内ストア（テスト・使い捨て用）"""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileKeyValueStore:
    """全キーをディスク上の1つのJSONオブジェクトに保持するストア"""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return data

    def get_item(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError:
            logger.warning("Discarding unreadable store file %s", self.path)
            data = {}
        data[key] = value

        # 一時ファイルに書いてから置き換える
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        os.replace(tmp_path, self.path)


class TaskStorage:
    """1つのキーでタスクリストを読み書きする"""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_TASKS_KEY):
        self.store = store
        self.key = key

    def load(self) -> Optional[list[Task]]:
        """保存済みタスクを返す。使えるデータが無ければNone"""
        try:
            raw = self.store.get_item(self.key)
        except (OSError, ValueError) as exc:
            logger.warning("Failed to read %r from store: %s", self.key, exc)
            return None
        if raw is None:
            return None

        try:
            rows = json.loads(raw)
        except ValueError as exc:
            logger.warning("Stored %r is not valid JSON: %s", self.key, exc)
            return None
        if not isinstance(rows, list) or not all(isinstance(row, dict) for row in rows):
            logger.warning("Stored %r is not a JSON array of objects", self.key)
            return None

        tasks = [Task.from_dict(row) for row in rows]
        logger.debug("Loaded %d tasks from %r", len(tasks), self.key)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """リスト全体を保存する。ストアの書き込み失敗時はStorageError"""
        payload = json.dumps([task.to_dict() for task in tasks], ensure_ascii=False)
        try:
            self.store.set_item(self.key, payload)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Failed to save {self.key!r}: {exc}") from exc
        logger.debug("Saved tasks to %r", self.key)
