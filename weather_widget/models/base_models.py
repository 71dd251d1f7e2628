"""Pydantic models for request/response validation."""

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class ErrorBody(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = {}


class ErrorResponse(BaseModel):
    """Structured error envelope returned by the exception handlers."""

    error: ErrorBody
