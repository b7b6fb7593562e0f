"""
ロギング設定モジュール

ファイル出力とコンソール出力の両方をルートロガーに設定する。
ログファイルのパス解決は Config.log_path() 側で行う。
"""

import logging
from pathlib import Path
from typing import Union

from .exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_log_level(log_level: str) -> int:
    """ログレベル名を数値に変換する

    Raises:
        ConfigurationError: 未知のレベル名が指定された場合
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"不正なログレベル: {log_level}")
    return level


def setup_logger(log_level: str = "INFO", log_file: Union[str, Path] = "logs/todo_board.log") -> Path:
    """
    ロガーのセットアップ

    Args:
        log_level: ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: ログファイルのパス

    Returns:
        Path: 実際に書き込むログファイルのパス
    """
    level = parse_log_level(log_level)
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # basicConfig はルートにハンドラがあると何もしないため二重登録にならない
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8", delay=True),
            logging.StreamHandler(),
        ],
    )
    return log_path
