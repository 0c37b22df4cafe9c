"""Cutting optimization endpoint."""

from fastapi import APIRouter

from cutstock.application import OptimizationResult, OptimizeCuttingCommand
from cutstock.domain import DemandRecord
from cutstock.web.dependencies import ImproverDep, PackerDep
from cutstock.web.schemas.requests import OptimizeRequest
from cutstock.web.schemas.responses import (
    CuttingPlanSchema,
    OptimizationResultSchema,
    PieceSchema,
    StatisticsSchema,
)

router = APIRouter(prefix="/optimize", tags=["optimize"])


def _result_to_schema(result: OptimizationResult) -> OptimizationResultSchema:
    """Convert OptimizationResult to response schema."""
    plans = [
        CuttingPlanSchema(
            pieces=[
                PieceSchema(name=result.piece_name(piece), length=piece.length)
                for piece in plan.pieces
            ],
            remaining_length=plan.remaining_length,
            utilization_percent=plan.utilization_percent,
        )
        for plan in result.plans
    ]

    return OptimizationResultSchema(
        is_valid=result.is_valid,
        error=result.error,
        stock_length=result.stock_length,
        plans=plans,
        stats=StatisticsSchema(
            total_stocks=result.stats.total_stocks,
            total_used_length=result.stats.total_used_length,
            total_waste=result.stats.total_waste,
            overall_efficiency=result.stats.overall_efficiency,
        ),
    )


@router.post("", response_model=OptimizationResultSchema)
def optimize(
    request: OptimizeRequest,
    packer: PackerDep,
    improver: ImproverDep,
) -> OptimizationResultSchema:
    """Compute cutting plans for a cut list.

    A piece longer than the stock is reported in the body with
    ``is_valid=false`` rather than as an HTTP error.

    Args:
        request: Stock length, items and engine options.

    Returns:
        Cutting plans and statistics, or the failure message.
    """
    demand = [
        DemandRecord(name=item.name, length=item.length, quantity=item.quantity)
        for item in request.items
    ]
    command = OptimizeCuttingCommand(
        packer=packer, improver=improver, improve=request.improve
    )
    return _result_to_schema(command.execute(request.stock_length, demand))
