"""Domain services for the cutting-stock engine.

The engine runs in four stages:
- Expansion of demand records into individual pieces
- First-fit decreasing packing onto stock bars
- Local improvement by moving pieces between bars
- Aggregate statistics for the final plans
"""

from .expander import expand_demand
from .improver import LocalImprover
from .packer import FirstFitDecreasingPacker, UnfittablePieceError
from .statistics import compute_statistics

__all__ = [
    "FirstFitDecreasingPacker",
    "LocalImprover",
    "UnfittablePieceError",
    "compute_statistics",
    "expand_demand",
]
