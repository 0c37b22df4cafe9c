"""Tests for demand expansion."""

from __future__ import annotations

import pytest

from cutstock.domain import DemandRecord, PieceInstance, expand_demand


def test_one_piece_per_unit_in_input_order() -> None:
    items = [
        DemandRecord(name="A", length=300, quantity=2),
        DemandRecord(name="B", length=200, quantity=1),
    ]

    pieces = expand_demand(600, items)

    assert pieces == [
        PieceInstance(length=300, record_index=0),
        PieceInstance(length=300, record_index=0),
        PieceInstance(length=200, record_index=1),
    ]


def test_total_count_matches_quantities() -> None:
    items = [DemandRecord(name=str(i), length=10 + i, quantity=i + 1) for i in range(5)]
    assert len(expand_demand(100, items)) == 15


@pytest.mark.parametrize("stock_length", [None, 0, -600])
def test_missing_stock_length_yields_nothing(stock_length) -> None:
    items = [DemandRecord(name="A", length=300, quantity=2)]
    assert expand_demand(stock_length, items) == []


@pytest.mark.parametrize("items", [None, []])
def test_no_items_yields_nothing(items) -> None:
    assert expand_demand(600, items) == []


def test_does_not_check_fit() -> None:
    """Oversized pieces are the packer's concern."""
    pieces = expand_demand(600, [DemandRecord(name="A", length=700, quantity=1)])
    assert [p.length for p in pieces] == [700]
