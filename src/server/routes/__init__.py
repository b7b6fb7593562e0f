"""Route registration helpers."""

from .summary import register_summary_routes
from .todo_list import register_todo_list_routes

__all__ = [
    "register_summary_routes",
    "register_todo_list_routes",
]
