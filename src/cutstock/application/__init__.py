"""Application layer - use cases and orchestration."""

from .commands import OptimizeCuttingCommand, optimize_cutting
from .dtos import OptimizationResult

__all__ = [
    "OptimizationResult",
    "OptimizeCuttingCommand",
    "optimize_cutting",
]
