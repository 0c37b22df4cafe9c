"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PieceSchema(BaseModel):
    """A piece placed on a bar."""

    name: str = Field(..., description="Name of the demand item")
    length: float = Field(..., description="Piece length")


class CuttingPlanSchema(BaseModel):
    """Cutting plan for one stock bar."""

    pieces: list[PieceSchema] = Field(default_factory=list, description="Pieces in cut order")
    remaining_length: float = Field(..., description="Unused length on the bar")
    utilization_percent: float = Field(..., description="Share of the bar used")


class StatisticsSchema(BaseModel):
    """Aggregate statistics for a run."""

    total_stocks: int = Field(default=0, description="Number of bars used")
    total_used_length: float = Field(default=0, description="Length used by pieces")
    total_waste: float = Field(default=0, description="Leftover length")
    overall_efficiency: float = Field(default=0, description="Used length percentage")


class OptimizationResultSchema(BaseModel):
    """Response for an optimization run."""

    is_valid: bool = Field(..., description="Whether optimization succeeded")
    error: str | None = Field(default=None, description="Diagnostic message on failure")
    stock_length: float = Field(..., description="Length of each stock bar")
    plans: list[CuttingPlanSchema] = Field(
        default_factory=list, description="Cutting plans, one per bar"
    )
    stats: StatisticsSchema = Field(
        default_factory=StatisticsSchema, description="Aggregate statistics"
    )


class ValidationResultSchema(BaseModel):
    """Response for job validation."""

    is_valid: bool = Field(..., description="Whether the job is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )
