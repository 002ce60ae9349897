"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=['Credit line "line-abc" not found.'],
    )
    code: str | None = Field(
        None,
        description="Machine-readable error code",
        examples=["CREDIT_LINE_NOT_FOUND"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )
