"""First-fit decreasing packing of pieces onto stock bars."""

from __future__ import annotations

import logging
from typing import Sequence

from ..entities import CuttingPlan
from ..value_objects import PieceInstance

logger = logging.getLogger(__name__)


class UnfittablePieceError(ValueError):
    """Raised when a piece is longer than the stock bar."""

    def __init__(self, length: float, stock_length: float) -> None:
        self.length = length
        self.stock_length = stock_length
        super().__init__(
            f"Piece of length {length:g} does not fit into stock length {stock_length:g}"
        )


class FirstFitDecreasingPacker:
    """Greedy bar-by-bar packer.

    Pieces are sorted longest first. Each new bar takes a single pass over
    the pieces still waiting and keeps every piece that fits in the room
    left on the bar; the pieces it skipped wait for the next bar.

    Runs in O(n^2) for n pieces, which is fine for cut lists of a few
    hundred pieces.
    """

    def pack(
        self,
        pieces: Sequence[PieceInstance],
        stock_length: float,
    ) -> list[CuttingPlan]:
        """Assign every piece to a bar.

        Args:
            pieces: Pieces to place, in demand order.
            stock_length: Length of each stock bar.

        Returns:
            Cutting plans in the order the bars were opened.

        Raises:
            UnfittablePieceError: If some piece is longer than the stock.
                No plans are returned in that case.
        """
        # sorted() is stable with reverse=True, so equal lengths keep demand order
        waiting = sorted(pieces, key=lambda p: p.length, reverse=True)
        plans: list[CuttingPlan] = []

        while waiting:
            remaining = stock_length
            placed: list[PieceInstance] = []
            skipped: list[PieceInstance] = []

            for piece in waiting:
                if piece.length <= remaining:
                    placed.append(piece)
                    remaining -= piece.length
                else:
                    skipped.append(piece)

            if not placed:
                logger.warning(
                    "Piece of length %s exceeds stock length %s",
                    skipped[0].length,
                    stock_length,
                )
                raise UnfittablePieceError(skipped[0].length, stock_length)

            plan = CuttingPlan(
                pieces=tuple(placed),
                remaining_length=remaining,
                stock_length=stock_length,
            )
            plans.append(plan)
            waiting = skipped

            logger.debug(
                "Bar %d: %d pieces, %s remaining (%.2f%% used)",
                len(plans),
                plan.piece_count,
                plan.remaining_length,
                plan.utilization_percent,
            )

        return plans
