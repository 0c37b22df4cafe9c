"""Local improvement of cutting plans by moving single pieces between bars."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from ..entities import CuttingPlan
from ..value_objects import PieceInstance

logger = logging.getLogger(__name__)


@dataclass
class _BarState:
    """Mutable working copy of a cutting plan.

    Attributes:
        pieces: Pieces currently assigned to the bar.
        remaining_length: Room left on the bar.
    """

    pieces: list[PieceInstance] = field(default_factory=list)
    remaining_length: float = 0.0


class LocalImprover:
    """Migrates pieces from emptier bars into fuller ones.

    Plans are ordered by remaining length (fullest first). A sweep walks
    every pair ``(current, later)`` in that order and moves the first piece
    of ``later`` that fits into ``current``. After any move the sweep starts
    over from the top. Improvement stops when a whole sweep moves nothing,
    and bars drained to zero pieces are dropped.

    The search never makes a move that frees room only to use it later, so
    the result is a local fixed point, not an optimum.
    """

    def improve(
        self,
        plans: Sequence[CuttingPlan],
        stock_length: float,
    ) -> list[CuttingPlan]:
        """Return an improved copy of ``plans``.

        Args:
            plans: Plans produced by the packer. They are not modified.
            stock_length: Length of each stock bar.

        Returns:
            New list of non-empty plans holding exactly the input pieces.
        """
        if len(plans) < 2:
            return list(plans)

        bars = [
            _BarState(pieces=list(plan.pieces), remaining_length=plan.remaining_length)
            for plan in sorted(plans, key=lambda p: p.remaining_length)
        ]

        moves = 0
        while self._move_one_piece(bars):
            moves += 1

        improved = [
            CuttingPlan(
                pieces=tuple(bar.pieces),
                remaining_length=bar.remaining_length,
                stock_length=stock_length,
            )
            for bar in bars
            if bar.pieces
        ]

        logger.debug(
            "Improvement made %d moves, %d -> %d bars",
            moves,
            len(plans),
            len(improved),
        )
        return improved

    def _move_one_piece(self, bars: list[_BarState]) -> bool:
        """Perform the first available move of a sweep.

        Args:
            bars: Working bars in sweep order, updated in place.

        Returns:
            True if a piece was moved, False at a fixed point.
        """
        for i, current in enumerate(bars[:-1]):
            for later in bars[i + 1 :]:
                for k, piece in enumerate(later.pieces):
                    if piece.length <= current.remaining_length:
                        current.pieces.append(piece)
                        current.remaining_length -= piece.length
                        later.pieces = later.pieces[:k] + later.pieces[k + 1 :]
                        later.remaining_length += piece.length
                        return True
        return False
