from fastapi import APIRouter

from .credit import credit_router
from .risk import risk_router

router = APIRouter(prefix="/api")

router.include_router(credit_router, tags=["Credit Lines"])
router.include_router(risk_router, tags=["Risk"])
