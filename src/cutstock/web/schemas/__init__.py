"""Pydantic schemas for REST API requests and responses."""

from cutstock.web.schemas.requests import (
    DemandItemSchema,
    JobValidateRequest,
    OptimizeRequest,
)
from cutstock.web.schemas.responses import (
    CuttingPlanSchema,
    OptimizationResultSchema,
    PieceSchema,
    StatisticsSchema,
    ValidationResultSchema,
)

__all__ = [
    "CuttingPlanSchema",
    "DemandItemSchema",
    "JobValidateRequest",
    "OptimizationResultSchema",
    "OptimizeRequest",
    "PieceSchema",
    "StatisticsSchema",
    "ValidationResultSchema",
]
