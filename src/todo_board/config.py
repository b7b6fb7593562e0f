"""
設定管理モジュール

関連クラス:
  - server.dependencies: この設定からストレージとロガーを初期化する
  - todo.storage.JsonFileKeyValueStore: storage.path を使用
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

PROJECT_ROOT = Path(__file__).parent.parent.parent


@dataclass
class StorageConfig:
    """キーバリューストア設定"""

    path: str = "data/local_storage.json"
    key: str = "tasks"


@dataclass
class ServerConfig:
    """uvicorn起動設定"""

    host: str = "127.0.0.1"
    port: int = 8000


@dataclass
class Config:
    """アプリケーション設定クラス"""

    # ストレージ設定
    storage: StorageConfig = None  # type: ignore

    # サーバー設定
    server: ServerConfig = None  # type: ignore

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/todo_board.log"

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.storage is None:
            self.storage = StorageConfig()
        if self.server is None:
            self.server = ServerConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス
        """
        if config_path is None:
            config_path = PROJECT_ROOT / "config" / "app_config.yaml"

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"設定ファイルを読み込めません: {config_path}: {exc}") from exc

        storage_data = yaml_data.get("storage", {})
        server_data = yaml_data.get("server", {})
        log_data = yaml_data.get("log", {})

        return cls(
            storage=StorageConfig(
                path=storage_data.get("path", "data/local_storage.json"),
                key=storage_data.get("key", "tasks"),
            ),
            server=ServerConfig(
                host=server_data.get("host", "127.0.0.1"),
                port=int(server_data.get("port", 8000)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/todo_board.log"),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """環境変数から設定を読み込む"""
        return cls(
            storage=StorageConfig(
                path=os.getenv("TODO_BOARD_STORAGE_PATH", "data/local_storage.json"),
                key=os.getenv("TODO_BOARD_STORAGE_KEY", "tasks"),
            ),
            server=ServerConfig(
                host=os.getenv("TODO_BOARD_HOST", "127.0.0.1"),
                port=int(os.getenv("TODO_BOARD_PORT", "8000")),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/todo_board.log"),
        )

    def storage_path(self) -> Path:
        """ストレージファイルの絶対パス（相対パスはプロジェクトルート基準）"""
        return _from_project_root(self.storage.path)

    def log_path(self) -> Path:
        """ログファイルの絶対パス（相対パスはプロジェクトルート基準）"""
        return _from_project_root(self.log_file)


def _from_project_root(value: str) -> Path:
    path = Path(value)
    return path if path.is_absolute() else PROJECT_ROOT / path
