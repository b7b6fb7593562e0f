"""FastAPI application bootstrap."""

from __future__ import annotations

from fastapi import FastAPI

from .dependencies import get_component, reset_component
from .routes import register_summary_routes, register_todo_list_routes

__all__ = ["app", "create_app", "get_component", "reset_component"]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Todo Board", version="1.0.0")

    register_todo_list_routes(app)
    register_summary_routes(app)

    return app


app = create_app()
