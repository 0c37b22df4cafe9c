"""Pytest configuration and shared fixtures for cutstock tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from cutstock.domain import DemandRecord

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    """Path to the test fixtures directory."""
    return FIXTURES_PATH


@pytest.fixture
def jobs_path() -> Path:
    """Path to the JSON job fixtures."""
    return FIXTURES_PATH / "jobs"


@pytest.fixture
def rail_and_brace() -> list[DemandRecord]:
    """Two 300 rails and one 200 brace."""
    return [
        DemandRecord(name="Rail", length=300, quantity=2),
        DemandRecord(name="Brace", length=200, quantity=1),
    ]


@pytest.fixture
def reorderable_demand() -> list[DemandRecord]:
    """Demand whose greedy plans can be tightened by the improver (stock 100)."""
    return [
        DemandRecord(name="Long", length=60, quantity=1),
        DemandRecord(name="Mid", length=45, quantity=2),
        DemandRecord(name="Short", length=10, quantity=1),
    ]
