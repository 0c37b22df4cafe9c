"""Expansion of demand records into individual pieces."""

from __future__ import annotations

import logging
from typing import Sequence

from ..value_objects import DemandRecord, PieceInstance

logger = logging.getLogger(__name__)


def expand_demand(
    stock_length: float | None,
    items: Sequence[DemandRecord] | None,
) -> list[PieceInstance]:
    """Expand demand records into one PieceInstance per required piece.

    Each record with quantity N becomes N pieces of the record's length.
    Order across records follows the input order.

    Args:
        stock_length: Length of a stock bar. A missing, zero or negative
            value means there is nothing to cut.
        items: Demand records to expand.

    Returns:
        Flat list of pieces, or an empty list when there is nothing to do.
    """
    if not stock_length or stock_length <= 0 or not items:
        return []

    pieces: list[PieceInstance] = []
    for index, record in enumerate(items):
        pieces.extend(
            PieceInstance(length=record.length, record_index=index)
            for _ in range(record.quantity)
        )

    logger.debug("Expanded %d demand records into %d pieces", len(items), len(pieces))
    return pieces
