"""Shared test fixtures."""

from typing import Any

import pytest

from tests.unit.factories import AREA_A_ID, AREA_B_ID, AREA_C_ID, CLIMB_ID, make_area, make_climb
from tests.unit.fakes import FakeIndexClient, FakeSourceStore


@pytest.fixture
def areas() -> list[dict[str, Any]]:
    """Three nested areas: C is a child of B, which is a child of A."""
    return [
        make_area(AREA_A_ID, "A", ["A"]),
        make_area(AREA_B_ID, "B", ["A", "B"]),
        make_area(AREA_C_ID, "C", ["A", "B", "C"], leaf=True, total_climbs=1),
    ]


@pytest.fixture
def store(areas: list[dict[str, Any]]) -> FakeSourceStore:
    return FakeSourceStore(
        {
            "areas": areas,
            "climbs": [make_climb(CLIMB_ID, AREA_C_ID)],
        }
    )


@pytest.fixture
def index_client() -> FakeIndexClient:
    return FakeIndexClient()
