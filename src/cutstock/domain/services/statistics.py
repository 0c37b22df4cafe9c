"""Aggregate statistics for a set of cutting plans."""

from __future__ import annotations

from typing import Sequence

from ..entities import CuttingPlan
from ..value_objects import Statistics


def compute_statistics(plans: Sequence[CuttingPlan], stock_length: float) -> Statistics:
    """Summarize bar usage across all plans.

    Args:
        plans: Final cutting plans.
        stock_length: Length of each stock bar.

    Returns:
        Statistics with bar count, used length, waste and overall
        efficiency. Efficiency is 0 when there are no plans.
    """
    total_stocks = len(plans)
    if total_stocks == 0:
        return Statistics.empty()

    total_used = sum(stock_length - plan.remaining_length for plan in plans)
    total_waste = sum(plan.remaining_length for plan in plans)
    efficiency = round(total_used / (total_stocks * stock_length) * 100, 2)

    return Statistics(
        total_stocks=total_stocks,
        total_used_length=total_used,
        total_waste=total_waste,
        overall_efficiency=efficiency,
    )
