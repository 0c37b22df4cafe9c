"""Tests for statistics aggregation."""

from __future__ import annotations

from cutstock.domain import CuttingPlan, PieceInstance, compute_statistics


def _plan(*lengths: float, stock_length: float = 600) -> CuttingPlan:
    return CuttingPlan.from_pieces(
        [PieceInstance(length=length, record_index=0) for length in lengths], stock_length
    )


def test_no_plans_all_zero() -> None:
    stats = compute_statistics([], 600)

    assert stats.total_stocks == 0
    assert stats.total_used_length == 0
    assert stats.total_waste == 0
    assert stats.overall_efficiency == 0


def test_three_partial_bars() -> None:
    stats = compute_statistics([_plan(400), _plan(400), _plan(400)], 600)

    assert stats.total_stocks == 3
    assert stats.total_used_length == 1200
    assert stats.total_waste == 600
    assert stats.overall_efficiency == 66.67


def test_full_bar() -> None:
    stats = compute_statistics([_plan(600)], 600)

    assert stats.total_stocks == 1
    assert stats.total_waste == 0
    assert stats.overall_efficiency == 100.0


def test_used_plus_waste_equals_total_stock() -> None:
    plans = [_plan(300, 250), _plan(120, 75, 75), _plan(599)]

    stats = compute_statistics(plans, 600)

    assert stats.total_used_length + stats.total_waste == stats.total_stocks * 600
    assert stats.total_used_length == 1419
