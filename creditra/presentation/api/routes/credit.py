"""Credit line API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from creditra.application.dto import CreateCreditLineRequest, CreditLineResponse
from creditra.application.services import CreditLineService
from creditra.core.dependencies import get_credit_line_service
from creditra.presentation.middleware import require_admin
from creditra.presentation.schemas import (
    CreateCreditLineSchema,
    CreditLineEventSchema,
    CreditLineListResponseSchema,
    CreditLineResponseSchema,
    CreditLineSchema,
    ErrorResponseSchema,
)

credit_router = APIRouter(prefix="/credit")

LineId = Annotated[str, Path(min_length=1, description="Credit line identifier")]

ADMIN_RESPONSES = {
    401: {"model": ErrorResponseSchema, "description": "Missing or invalid admin key"},
    503: {"model": ErrorResponseSchema, "description": "Admin auth not configured"},
}


def _to_schema(line: CreditLineResponse) -> CreditLineSchema:
    return CreditLineSchema(
        id=line.id,
        status=line.status,
        created_at=line.created_at,
        updated_at=line.updated_at,
        events=[
            CreditLineEventSchema(
                action=event.action,
                timestamp=event.timestamp,
                actor=event.actor,
            )
            for event in line.events
        ],
    )


@credit_router.get(
    "/lines",
    response_model=CreditLineListResponseSchema,
    response_model_exclude_none=True,
    summary="List Credit Lines",
    description="Return every credit line in creation order.",
)
async def list_lines(
    service: Annotated[CreditLineService, Depends(get_credit_line_service)],
) -> CreditLineListResponseSchema:
    lines = await service.list_lines()
    return CreditLineListResponseSchema(data=[_to_schema(line) for line in lines])


@credit_router.get(
    "/lines/{line_id}",
    response_model=CreditLineResponseSchema,
    response_model_exclude_none=True,
    summary="Get Credit Line",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Credit line not found"},
    },
)
async def get_line(
    line_id: LineId,
    service: Annotated[CreditLineService, Depends(get_credit_line_service)],
) -> CreditLineResponseSchema:
    line = await service.get_line(line_id)
    return CreditLineResponseSchema(data=_to_schema(line))


@credit_router.post(
    "/lines",
    response_model=CreditLineResponseSchema,
    response_model_exclude_none=True,
    status_code=201,
    summary="Create Credit Line",
    responses={
        409: {"model": ErrorResponseSchema, "description": "Id already taken"},
        **ADMIN_RESPONSES,
    },
)
async def create_line(
    request: CreateCreditLineSchema,
    actor: Annotated[str, Depends(require_admin)],
    service: Annotated[CreditLineService, Depends(get_credit_line_service)],
) -> CreditLineResponseSchema:
    """Create a credit line; the id is generated when the body omits it."""
    dto = CreateCreditLineRequest(line_id=request.id, status=request.status, actor=actor)
    line = await service.create_line(dto)
    return CreditLineResponseSchema(data=_to_schema(line), message="Credit line created.")


@credit_router.post(
    "/lines/{line_id}/suspend",
    response_model=CreditLineResponseSchema,
    response_model_exclude_none=True,
    summary="Suspend Credit Line",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Credit line not found"},
        409: {"model": ErrorResponseSchema, "description": "Line is not active"},
        **ADMIN_RESPONSES,
    },
)
async def suspend_line(
    line_id: LineId,
    actor: Annotated[str, Depends(require_admin)],
    service: Annotated[CreditLineService, Depends(get_credit_line_service)],
) -> CreditLineResponseSchema:
    line = await service.suspend_line(line_id, actor=actor)
    return CreditLineResponseSchema(data=_to_schema(line), message="Credit line suspended.")


@credit_router.post(
    "/lines/{line_id}/close",
    response_model=CreditLineResponseSchema,
    response_model_exclude_none=True,
    summary="Close Credit Line",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Credit line not found"},
        409: {"model": ErrorResponseSchema, "description": "Line is already closed"},
        **ADMIN_RESPONSES,
    },
)
async def close_line(
    line_id: LineId,
    actor: Annotated[str, Depends(require_admin)],
    service: Annotated[CreditLineService, Depends(get_credit_line_service)],
) -> CreditLineResponseSchema:
    line = await service.close_line(line_id, actor=actor)
    return CreditLineResponseSchema(data=_to_schema(line), message="Credit line closed.")
