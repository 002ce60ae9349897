"""Wallet risk evaluation endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from creditra.application.services import RiskService
from creditra.core.dependencies import get_risk_service
from creditra.presentation.middleware.request_context import get_request_id
from creditra.presentation.schemas import (
    ErrorResponseSchema,
    RiskEvaluateRequestSchema,
    RiskEvaluationResponseSchema,
    RiskEvaluationSchema,
)

risk_router = APIRouter(prefix="/risk")


@risk_router.post(
    "/evaluate",
    response_model=RiskEvaluationResponseSchema,
    summary="Evaluate Wallet Risk",
    description="""
    Evaluate the credit risk of a Stellar wallet.

    The scoring engine is not integrated yet: valid wallets return a
    placeholder evaluation with a null score and risk level.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing or invalid wallet"},
    },
)
async def evaluate_wallet(
    request: RiskEvaluateRequestSchema,
    risk_service: Annotated[RiskService, Depends(get_risk_service)],
):
    if not request.wallet_address:
        return JSONResponse(
            status_code=400,
            content={
                "error": "walletAddress is required",
                "code": "WALLET_ADDRESS_REQUIRED",
                "request_id": get_request_id(),
            },
        )

    result = await risk_service.evaluate_wallet(request.wallet_address)

    return RiskEvaluationResponseSchema(
        data=RiskEvaluationSchema(
            wallet_address=result.wallet_address,
            score=result.score,
            risk_level=result.risk_level,
            message=result.message,
            evaluated_at=result.evaluated_at,
        )
    )
