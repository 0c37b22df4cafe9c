"""Pydantic models for cutting job configuration files.

A job file describes the stock bar length and the pieces to cut:

    {
      "schema_version": "1.0",
      "stock_length": 600,
      "unit": "cm",
      "items": [{"name": "Rail", "length": 250, "quantity": 4}],
      "optimizer": {"improve": true}
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for job files
# Version 1.0: Stock length, items and unit
# Version 1.1: Added optimizer section
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class DemandItemConfig(BaseModel):
    """A single line of the cut list.

    Attributes:
        name: Optional label shown in reports.
        length: Piece length in stock units.
        quantity: Number of identical pieces.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="", max_length=200, description="Piece label")
    length: float = Field(..., gt=0, description="Piece length")
    quantity: int = Field(default=1, ge=1, description="Number of pieces")


class OptimizerConfigSchema(BaseModel):
    """Engine options.

    Attributes:
        improve: Run the local improvement pass after greedy packing.
    """

    model_config = ConfigDict(extra="forbid")

    improve: bool = Field(default=True, description="Run local improvement pass")


class CuttingJobConfig(BaseModel):
    """Root model for a cutting job file."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", description="Job file schema version")
    stock_length: float = Field(..., gt=0, description="Length of each stock bar")
    unit: str = Field(default="cm", min_length=1, max_length=10, description="Length unit")
    items: list[DemandItemConfig] = Field(
        default_factory=list, description="Pieces to cut"
    )
    optimizer: OptimizerConfigSchema = Field(
        default_factory=OptimizerConfigSchema, description="Engine options"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Reject unknown schema versions."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
