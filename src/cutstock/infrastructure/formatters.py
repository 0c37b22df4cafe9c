"""Output formatters and exporters for optimization results."""

from __future__ import annotations

import json
from typing import Any

from cutstock.application.dtos import OptimizationResult
from cutstock.domain import CuttingPlan


def format_number(value: float) -> str:
    """Format a length with a space as thousands separator.

    Integral values print without decimals; others keep up to two.

    Examples:
        >>> format_number(1200)
        '1 200'
        >>> format_number(12.5)
        '12.5'
    """
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    return text.replace(",", " ")


class CuttingPlanFormatter:
    """Formats optimization results as a plain-text report."""

    def __init__(self, unit: str = "cm") -> None:
        """Initialize formatter.

        Args:
            unit: Length unit printed after every length.
        """
        self.unit = unit

    def format(self, result: OptimizationResult) -> str:
        """Format a full report: summary, statistics and every bar."""
        if not result.is_valid:
            return f"Error: {result.error}"

        lines = [
            "CUTTING OPTIMIZATION RESULTS",
            "=" * 60,
            f"Stock length: {self._length(result.stock_length)}",
            f"Pieces: {sum(record.quantity for record in result.demand)}",
            f"Item types: {len(result.demand)}",
            "",
            self.format_statistics(result),
        ]

        if not result.plans:
            lines.append("")
            lines.append("No cutting plans.")
            return "\n".join(lines)

        lines.append("")
        lines.append("CUTTING PLANS")
        lines.append("-" * 60)
        for index, plan in enumerate(result.plans, start=1):
            lines.append("")
            lines.append(self._format_plan(result, plan, index))

        return "\n".join(lines)

    def format_statistics(self, result: OptimizationResult) -> str:
        """Format the statistics block only."""
        stats = result.stats
        return "\n".join(
            [
                "STATISTICS",
                "-" * 60,
                f"Bars used: {stats.total_stocks}",
                f"Total stock length: "
                f"{self._length(stats.total_stocks * result.stock_length)}",
                f"Used material: {self._length(stats.total_used_length)}",
                f"Total waste: {self._length(stats.total_waste)}",
                f"Efficiency: {stats.overall_efficiency:.2f}%",
            ]
        )

    def _format_plan(
        self, result: OptimizationResult, plan: CuttingPlan, index: int
    ) -> str:
        lines = [
            f"Bar {index}:",
            f"  Utilization: {plan.utilization_percent:.2f}%",
            f"  Remainder: {self._length(plan.remaining_length)}",
            "  Pieces:",
        ]
        for number, piece in enumerate(plan.pieces, start=1):
            lines.append(
                f"    {number}. {result.piece_name(piece)}: {self._length(piece.length)}"
            )
        return "\n".join(lines)

    def _length(self, value: float) -> str:
        return f"{format_number(value)} {self.unit}"


class JsonExporter:
    """Exports optimization results as JSON."""

    def export(self, result: OptimizationResult) -> str:
        """Export a result as a JSON string."""
        return json.dumps(self.to_dict(result), indent=2)

    def to_dict(self, result: OptimizationResult) -> dict[str, Any]:
        """Convert a result to JSON-compatible data."""
        data: dict[str, Any] = {
            "stock_length": result.stock_length,
            "plans": [self._format_plan(result, plan) for plan in result.plans],
            "stats": {
                "total_stocks": result.stats.total_stocks,
                "total_used_length": result.stats.total_used_length,
                "total_waste": result.stats.total_waste,
                "overall_efficiency": result.stats.overall_efficiency,
            },
        }
        if not result.is_valid:
            data["error"] = result.error
        return data

    def _format_plan(
        self, result: OptimizationResult, plan: CuttingPlan
    ) -> dict[str, Any]:
        return {
            "pieces": [
                {"name": result.piece_name(piece), "length": piece.length}
                for piece in plan.pieces
            ],
            "remaining_length": plan.remaining_length,
            "utilization_percent": plan.utilization_percent,
        }
