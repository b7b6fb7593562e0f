"""Read-only JSON endpoints."""

from __future__ import annotations

from fastapi import FastAPI

from ..dependencies import get_component, serialize_counts, serialize_state
from ..schemas import HealthResponse, TaskCountsResponse, TodoListStateResponse


def register_summary_routes(app: FastAPI) -> None:
    """Register health and summary endpoints on the provided app."""

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Simple health check endpoint."""
        return HealthResponse(status="ok")

    @app.get("/api/summary", response_model=TaskCountsResponse)
    async def summary() -> TaskCountsResponse:
        """Total/completed/pending counts of the task list."""
        return serialize_counts(get_component().counts)

    @app.get("/api/state", response_model=TodoListStateResponse)
    async def state() -> TodoListStateResponse:
        """Tasks as currently shown, with the active filter and counts."""
        return serialize_state(get_component())
