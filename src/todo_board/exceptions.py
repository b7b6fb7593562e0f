"""todo-boardのカスタム例外定義

空文字の入力や壊れた保存データはエラーとして扱わない。
ここで定義するのはホスト側まで伝播させる障害のみ。
"""


class TodoBoardError(Exception):
    """todo-board基底例外"""

    pass


class StorageError(TodoBoardError):
    """キーバリューストアへの書き込みエラー"""

    pass


class ConfigurationError(TodoBoardError):
    """設定エラー"""

    pass
