"""Risk evaluation Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from creditra.domain.entities import RiskLevel


class RiskEvaluateRequestSchema(BaseModel):
    """Schema for POST /api/risk/evaluate request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"walletAddress": "GBRPYHIL2CI3FNQ4BXLFMNDLFJUNPU2HY3ZMFSHONUCEOASW7QC7OX2H"}
            ]
        }
    )

    # Optional so a missing field yields "walletAddress is required" rather than a validation error.
    wallet_address: Optional[str] = Field(None, alias="walletAddress")


class RiskEvaluationSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    wallet_address: str = Field(..., alias="walletAddress")
    score: Optional[int] = Field(None, ge=0, le=100)
    risk_level: Optional[RiskLevel] = Field(None, alias="riskLevel")
    message: str
    evaluated_at: str = Field(..., alias="evaluatedAt")


class RiskEvaluationResponseSchema(BaseModel):
    data: RiskEvaluationSchema
