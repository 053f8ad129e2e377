"""
Todo API — Pydantic Request/Response Schemas
==============================================

What:  Pydantic models defining the JSON contract of the /todos endpoints.
How:   FastAPI uses these models to parse request bodies, serialize responses,
       and generate the OpenAPI documentation.

Field names are camelCase on the wire (`isComplete`) and snake_case in Python
(`is_complete`). Requests accept either spelling.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class TodoItemPayload(BaseModel):
    """
    Body of POST /todos and PUT /todos/{id}.

    An `id` sent by the client is ignored: identifiers are assigned by storage
    on create and taken from the path on update.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"example": {"title": "Buy milk", "isComplete": False}},
    )

    title: Optional[str] = Field(default=None, description="Text of the todo item")
    is_complete: bool = Field(default=False, description="Completion flag")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class TodoItemResponse(BaseModel):
    """Representation of a stored todo item."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={"example": {"id": 1, "title": "Buy milk", "isComplete": False}},
    )

    id: int = Field(description="Identifier assigned by storage")
    title: Optional[str] = Field(default=None, description="Text of the todo item")
    is_complete: bool = Field(description="Completion flag")


class ErrorResponse(BaseModel):
    """
    Standardized error body for application errors.

    Example:
        {
            "error": "not_found",
            "message": "todo item with ID '42' was not found",
            "request_id": "1a2b3c4d"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
