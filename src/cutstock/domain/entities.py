"""Domain entities for cutting plans."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .value_objects import PieceInstance


def utilization_percent(stock_length: float, remaining_length: float) -> float:
    """Percentage of a bar consumed, rounded to 2 decimal places."""
    return round((stock_length - remaining_length) / stock_length * 100, 2)


@dataclass(frozen=True)
class CuttingPlan:
    """Assignment of pieces to a single stock bar.

    Attributes:
        pieces: Pieces cut from this bar, in cutting order.
        remaining_length: Unused length left on the bar.
        stock_length: Length of the bar the plan is cut from.
    """

    pieces: tuple[PieceInstance, ...]
    remaining_length: float
    stock_length: float

    def __post_init__(self) -> None:
        if self.stock_length <= 0:
            raise ValueError("Stock length must be positive")
        if self.remaining_length < 0:
            raise ValueError("Remaining length must be non-negative")
        if not math.isclose(
            self.used_length + self.remaining_length,
            self.stock_length,
            rel_tol=1e-9,
            abs_tol=1e-9,
        ):
            raise ValueError(
                f"Pieces ({self.used_length}) and remainder "
                f"({self.remaining_length}) do not add up to stock length "
                f"({self.stock_length})"
            )

    @classmethod
    def from_pieces(
        cls, pieces: tuple[PieceInstance, ...] | list[PieceInstance], stock_length: float
    ) -> CuttingPlan:
        """Build a plan, deriving the remainder from the piece lengths."""
        remaining = stock_length
        for piece in pieces:
            remaining -= piece.length
        return cls(
            pieces=tuple(pieces),
            remaining_length=remaining,
            stock_length=stock_length,
        )

    @property
    def used_length(self) -> float:
        """Length consumed by the pieces on this bar."""
        return sum(piece.length for piece in self.pieces)

    @property
    def utilization_percent(self) -> float:
        """Share of the bar consumed by pieces, as a percentage."""
        return utilization_percent(self.stock_length, self.remaining_length)

    @property
    def piece_count(self) -> int:
        """Number of pieces cut from this bar."""
        return len(self.pieces)

    @property
    def is_empty(self) -> bool:
        """True when no pieces are assigned to the bar."""
        return not self.pieces
