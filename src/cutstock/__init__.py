"""One-dimensional cutting-stock optimizer.

Assigns required piece lengths to fixed-length stock bars with a
first-fit decreasing heuristic followed by a local improvement pass.

Example:
    >>> from cutstock import DemandRecord, optimize_cutting
    >>> result = optimize_cutting(600, [DemandRecord("Rail", 400, 3)])
    >>> result.stats.total_stocks
    3
"""

from cutstock.application import OptimizationResult, OptimizeCuttingCommand, optimize_cutting
from cutstock.domain import CuttingPlan, DemandRecord, PieceInstance, Statistics

__version__ = "1.0.0"

__all__ = [
    "CuttingPlan",
    "DemandRecord",
    "OptimizationResult",
    "OptimizeCuttingCommand",
    "PieceInstance",
    "Statistics",
    "optimize_cutting",
]
