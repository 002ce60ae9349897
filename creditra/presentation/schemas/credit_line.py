"""Credit line Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from creditra.domain.entities import CreditLineAction, CreditLineStatus


class CreateCreditLineSchema(BaseModel):
    """Schema for POST /api/credit/lines request body."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={"examples": [{"id": "line-abc", "status": "active"}]},
    )

    id: Optional[str] = Field(
        None,
        min_length=1,
        max_length=255,
        description="Identifier for the line; generated when omitted",
        examples=["line-abc"],
    )
    status: CreditLineStatus = Field(
        CreditLineStatus.ACTIVE,
        description="Initial status",
    )

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: Optional[str]) -> Optional[str]:
        """Ensure id is not just whitespace."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("id cannot be empty or whitespace")
        return v.strip()


class CreditLineEventSchema(BaseModel):
    """One entry of a credit line's audit trail."""

    action: CreditLineAction = Field(..., examples=["created"])
    timestamp: str = Field(
        ...,
        description="ISO 8601 timestamp",
        examples=["2026-01-01T12:00:00Z"],
    )
    actor: Optional[str] = Field(None, description="Who triggered the transition")


class CreditLineSchema(BaseModel):
    """A credit line with its status and audit trail."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., examples=["line-abc"])
    status: CreditLineStatus = Field(..., examples=["active"])
    created_at: str = Field(..., alias="createdAt")
    updated_at: str = Field(..., alias="updatedAt")
    events: list[CreditLineEventSchema] = Field(
        ...,
        description="Transitions in chronological order, starting with created",
    )


class CreditLineResponseSchema(BaseModel):
    """Envelope for a single credit line."""

    data: CreditLineSchema
    message: Optional[str] = None


class CreditLineListResponseSchema(BaseModel):
    """Envelope for GET /api/credit/lines."""

    data: list[CreditLineSchema]
