"""todo-board application settings, logging and errors."""

from .config import Config, ServerConfig, StorageConfig
from .exceptions import ConfigurationError, StorageError, TodoBoardError
from .logger import setup_logger

__all__ = [
    "Config",
    "ServerConfig",
    "StorageConfig",
    "ConfigurationError",
    "StorageError",
    "TodoBoardError",
    "setup_logger",
]
