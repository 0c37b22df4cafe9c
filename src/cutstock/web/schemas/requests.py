"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class DemandItemSchema(BaseModel):
    """One line of the cut list."""

    name: str = Field(default="", max_length=200, description="Piece label")
    length: float = Field(..., gt=0, description="Piece length")
    quantity: int = Field(default=1, ge=1, le=10000, description="Number of pieces")


class OptimizeRequest(BaseModel):
    """Request for computing cutting plans."""

    stock_length: float = Field(..., gt=0, description="Length of each stock bar")
    items: list[DemandItemSchema] = Field(
        default_factory=list, description="Pieces to cut"
    )
    improve: bool = Field(default=True, description="Run local improvement pass")


class JobValidateRequest(BaseModel):
    """Request for validating a job configuration."""

    config: dict[str, Any] = Field(..., description="Cutting job JSON")
