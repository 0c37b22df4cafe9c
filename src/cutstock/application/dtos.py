"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from cutstock.domain import CuttingPlan, DemandRecord, PieceInstance, Statistics

DEFAULT_PIECE_NAME = "Piece"


@dataclass(frozen=True)
class OptimizationResult:
    """Outcome of one optimization run.

    A result is either a success carrying plans and statistics, or a
    failure carrying a diagnostic message with no plans and zeroed
    statistics. Check ``is_valid`` before reading plans.

    Attributes:
        plans: Cutting plans, one per stock bar used.
        stats: Aggregate statistics for ``plans``.
        stock_length: Length of each stock bar.
        demand: Demand records the pieces were expanded from.
        error: Diagnostic message when optimization failed.
    """

    plans: tuple[CuttingPlan, ...] = ()
    stats: Statistics = field(default_factory=Statistics.empty)
    stock_length: float = 0.0
    demand: tuple[DemandRecord, ...] = ()
    error: str | None = None

    @classmethod
    def success(
        cls,
        plans: Sequence[CuttingPlan],
        stats: Statistics,
        stock_length: float,
        demand: Sequence[DemandRecord] = (),
    ) -> OptimizationResult:
        return cls(
            plans=tuple(plans),
            stats=stats,
            stock_length=stock_length,
            demand=tuple(demand),
        )

    @classmethod
    def failure(
        cls,
        message: str,
        stock_length: float = 0.0,
        demand: Sequence[DemandRecord] = (),
    ) -> OptimizationResult:
        return cls(
            stock_length=stock_length,
            demand=tuple(demand),
            error=message,
        )

    @property
    def is_valid(self) -> bool:
        """True when optimization succeeded."""
        return self.error is None

    @property
    def total_pieces(self) -> int:
        """Number of pieces placed across all plans."""
        return sum(plan.piece_count for plan in self.plans)

    def piece_name(self, piece: PieceInstance) -> str:
        """Display name of the demand record a piece came from."""
        if piece.record_index < len(self.demand):
            name = self.demand[piece.record_index].name.strip()
            if name:
                return name
        return DEFAULT_PIECE_NAME
