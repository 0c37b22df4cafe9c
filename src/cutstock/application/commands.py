"""Application commands (use cases) for cutting optimization."""

from __future__ import annotations

import logging
from typing import Sequence

from cutstock.domain import (
    DemandRecord,
    FirstFitDecreasingPacker,
    LocalImprover,
    UnfittablePieceError,
    compute_statistics,
    expand_demand,
)

from .dtos import OptimizationResult

logger = logging.getLogger(__name__)


class OptimizeCuttingCommand:
    """Command to compute cutting plans for a list of demand records.

    Runs expansion, greedy packing, local improvement and statistics in
    sequence. Failures never escape ``execute``; they come back as a
    failure result.
    """

    def __init__(
        self,
        packer: FirstFitDecreasingPacker | None = None,
        improver: LocalImprover | None = None,
        improve: bool = True,
    ) -> None:
        self.packer = packer or FirstFitDecreasingPacker()
        self.improver = improver or LocalImprover()
        self.improve = improve

    def execute(
        self,
        stock_length: float | None,
        items: Sequence[DemandRecord] | None,
    ) -> OptimizationResult:
        """Execute the optimization.

        Args:
            stock_length: Length of each stock bar.
            items: Demand records to cut.

        Returns:
            Success result with plans and statistics, an empty result when
            there is nothing to cut, or a failure result when a piece is
            longer than the stock.
        """
        demand = tuple(items or ())
        pieces = expand_demand(stock_length, demand)
        if not pieces:
            return OptimizationResult.success(
                plans=[],
                stats=compute_statistics([], stock_length or 0),
                stock_length=stock_length or 0,
                demand=demand,
            )

        try:
            plans = self.packer.pack(pieces, stock_length)
        except UnfittablePieceError as e:
            return OptimizationResult.failure(
                str(e), stock_length=stock_length, demand=demand
            )

        if self.improve:
            plans = self.improver.improve(plans, stock_length)

        stats = compute_statistics(plans, stock_length)
        logger.info(
            "Cut %d pieces from %d bars of %s (%.2f%% efficiency)",
            len(pieces),
            stats.total_stocks,
            stock_length,
            stats.overall_efficiency,
        )

        return OptimizationResult.success(
            plans=plans,
            stats=stats,
            stock_length=stock_length,
            demand=demand,
        )


def optimize_cutting(
    stock_length: float | None,
    items: Sequence[DemandRecord] | None,
    improve: bool = True,
) -> OptimizationResult:
    """Compute cutting plans with the default packer and improver."""
    return OptimizeCuttingCommand(improve=improve).execute(stock_length, items)
