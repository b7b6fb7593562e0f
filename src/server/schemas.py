"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class TaskCountsResponse(BaseModel):
    """Summary line of the task list."""

    total: int = Field(..., ge=0)
    completed: int = Field(..., ge=0)
    pending: int = Field(..., ge=0)


class TaskResponse(BaseModel):
    """Serialized task as kept in storage. Values pass through unchecked."""

    id: Any = None
    text: Any = None
    completed: Any = None


class TodoListStateResponse(BaseModel):
    """Read-only snapshot of the task list and its summary."""

    filter: str
    counts: TaskCountsResponse
    tasks: List[TaskResponse]
