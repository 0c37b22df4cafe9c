"""Value objects for the cutting-stock domain.

All value objects are frozen dataclasses so they can be shared between
optimization stages without copying and cannot be mutated by a stage
that only borrows them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DemandRecord:
    """A requirement for ``quantity`` identical pieces of ``length``.

    Attributes:
        name: Label used in reports (may be blank).
        length: Length of each piece in stock units (cm, mm, in...).
        quantity: Number of pieces required.
    """

    name: str
    length: float
    quantity: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Demand length must be positive")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @property
    def total_length(self) -> float:
        """Combined length of every piece in this record."""
        return self.length * self.quantity


@dataclass(frozen=True)
class PieceInstance:
    """One physical piece to cut.

    The piece points back at its demand record by position in the demand
    sequence. The index is only used to look up a display name.

    Attributes:
        length: Piece length in stock units.
        record_index: Zero-based index of the originating DemandRecord.
    """

    length: float
    record_index: int

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Piece length must be positive")
        if self.record_index < 0:
            raise ValueError("Record index must be non-negative")


@dataclass(frozen=True)
class Statistics:
    """Aggregate figures for a finished set of cutting plans.

    Attributes:
        total_stocks: Number of stock bars used.
        total_used_length: Length consumed by pieces across all bars.
        total_waste: Leftover length across all bars.
        overall_efficiency: Used length as a percentage of total stock
            length, rounded to 2 decimal places.
    """

    total_stocks: int
    total_used_length: float
    total_waste: float
    overall_efficiency: float

    def __post_init__(self) -> None:
        if self.total_stocks < 0:
            raise ValueError("Stock count must be non-negative")
        if not 0 <= self.overall_efficiency <= 100:
            raise ValueError("Efficiency must be between 0 and 100")

    @classmethod
    def empty(cls) -> Statistics:
        """Statistics for a run that used no bars."""
        return cls(
            total_stocks=0,
            total_used_length=0,
            total_waste=0,
            overall_efficiency=0,
        )
