"""Tests for the local improvement pass."""

from __future__ import annotations

from collections import Counter

import pytest

from cutstock.domain import CuttingPlan, FirstFitDecreasingPacker, LocalImprover, PieceInstance


def _plan(*lengths: float, stock_length: float = 100) -> CuttingPlan:
    pieces = [PieceInstance(length=length, record_index=0) for length in lengths]
    return CuttingPlan.from_pieces(pieces, stock_length)


def _lengths(plans) -> list[list[float]]:
    return [[piece.length for piece in plan.pieces] for plan in plans]


@pytest.fixture
def improver() -> LocalImprover:
    return LocalImprover()


class TestLocalImprover:
    """Tests for LocalImprover.improve."""

    def test_no_plans(self, improver: LocalImprover) -> None:
        assert improver.improve([], 100) == []

    def test_single_plan_returned_unchanged(self, improver: LocalImprover) -> None:
        plan = _plan(40)
        assert improver.improve([plan], 100) == [plan]

    def test_moves_piece_into_fuller_bar(self, improver: LocalImprover) -> None:
        greedy = FirstFitDecreasingPacker().pack(
            [PieceInstance(length, 0) for length in (60, 45, 45, 10)], 100
        )
        assert _lengths(greedy) == [[60, 10], [45, 45]]

        improved = improver.improve(greedy, 100)

        assert _lengths(improved) == [[45, 45, 10], [60]]
        assert [plan.remaining_length for plan in improved] == [0, 40]
        assert [plan.utilization_percent for plan in improved] == [100.0, 60.0]

    def test_drained_bar_is_dropped(self, improver: LocalImprover) -> None:
        improved = improver.improve([_plan(70), _plan(20)], 100)

        assert _lengths(improved) == [[70, 20]]
        assert improved[0].remaining_length == 10

    def test_restarts_after_each_move(self, improver: LocalImprover) -> None:
        plans = [_plan(80), _plan(70), _plan(10, 10, 10)]

        improved = improver.improve(plans, 100)

        assert _lengths(improved) == [[80, 10, 10], [70, 10]]
        assert [plan.remaining_length for plan in improved] == [0, 20]

    def test_no_move_when_nothing_fits(self, improver: LocalImprover) -> None:
        plans = [_plan(400, stock_length=600) for _ in range(3)]

        improved = improver.improve(plans, 600)

        assert _lengths(improved) == [[400], [400], [400]]

    def test_plans_sorted_fullest_first(self, improver: LocalImprover) -> None:
        plans = [_plan(30), _plan(90), _plan(60)]

        improved = improver.improve(plans, 100)

        # the 30 cannot join the 90 bar but fits beside the 60
        assert _lengths(improved) == [[90], [60, 30]]

    def test_input_plans_untouched(self, improver: LocalImprover) -> None:
        plans = [_plan(80), _plan(70), _plan(10, 10, 10)]
        snapshot = [(plan.pieces, plan.remaining_length) for plan in plans]

        improver.improve(plans, 100)

        assert [(plan.pieces, plan.remaining_length) for plan in plans] == snapshot

    def test_piece_multiset_preserved(self, improver: LocalImprover) -> None:
        plans = [_plan(80), _plan(70), _plan(10, 10, 10), _plan(55, 25)]

        improved = improver.improve(plans, 100)

        before = Counter(p for plan in plans for p in plan.pieces)
        after = Counter(p for plan in improved for p in plan.pieces)
        assert before == after
        assert len(improved) <= len(plans)
        assert all(not plan.is_empty for plan in improved)
        assert all(0 <= plan.remaining_length <= 100 for plan in improved)

    @pytest.mark.parametrize(
        "plans",
        [
            [_plan(80), _plan(70), _plan(10, 10, 10)],
            [_plan(60, 10), _plan(45, 45)],
            [_plan(70), _plan(20)],
        ],
    )
    def test_second_run_is_fixed_point(self, improver: LocalImprover, plans) -> None:
        once = improver.improve(plans, 100)
        twice = improver.improve(once, 100)

        assert twice == once

    def test_second_run_can_find_new_move(self, improver: LocalImprover) -> None:
        """A bar that fills up during the sweep is only re-ranked on the next run."""
        plans = [_plan(85, 5), _plan(70), _plan(22)]

        once = improver.improve(plans, 100)
        assert _lengths(once) == [[85, 5], [70, 22]]
        assert [plan.remaining_length for plan in once] == [10, 8]

        twice = improver.improve(once, 100)
        assert _lengths(twice) == [[70, 22, 5], [85]]
        assert [plan.remaining_length for plan in twice] == [3, 15]
