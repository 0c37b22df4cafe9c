"""Domain layer - core cutting-stock logic."""

from .entities import CuttingPlan
from .services import (
    FirstFitDecreasingPacker,
    LocalImprover,
    UnfittablePieceError,
    compute_statistics,
    expand_demand,
)
from .value_objects import DemandRecord, PieceInstance, Statistics

__all__ = [
    "CuttingPlan",
    "DemandRecord",
    "FirstFitDecreasingPacker",
    "LocalImprover",
    "PieceInstance",
    "Statistics",
    "UnfittablePieceError",
    "compute_statistics",
    "expand_demand",
]
