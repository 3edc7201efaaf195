"""Shared fixtures for rep_finder tests."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from rep_finder.config import get_config
from rep_finder.domain.entities import Address, LocalReps
from rep_finder.domain.interfaces import RepFinder

REPS_PAYLOAD: dict[str, Any] = {
    "normalizedInput": {
        "line1": "1600 Pennsylvania Ave NW",
        "city": "Washington",
        "state": "DC",
        "zip": "20500",
    },
    "offices": [
        {
            "name": "President of the United States",
            "divisionId": "ocd-division/country:us",
            "levels": ["country"],
            "roles": ["headOfState", "headOfGovernment"],
            "officialIndices": [0],
        },
        {
            "name": "U.S. Senator",
            "divisionId": "ocd-division/country:us/district:dc",
            "levels": ["country"],
            "roles": ["legislatorUpperBody"],
            "officialIndices": [1, 2],
        },
    ],
    "officials": [
        {
            "name": "Jane Doe",
            "address": [{"line1": "1600 Pennsylvania Ave NW", "city": "Washington"}],
            "party": "Independent",
            "phones": ["(202) 456-1111"],
            "photoUrl": "https://example.org/doe.jpg",
            "channels": [{"id": "janedoe", "type": "Twitter"}],
        },
        {"name": "John Roe", "party": "Independent"},
        {"name": "Alex Poe"},
    ],
}


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class CountingRepFinder(RepFinder):
    """Delegate stub that counts calls and can fail or stall on demand."""

    def __init__(self, delay: float = 0.0) -> None:
        self.calls: list[str] = []
        self.delay = delay
        self.failures: dict[str, Exception] = {}

    async def get_reps(self, address: str) -> tuple[LocalReps, Address]:
        self.calls.append(address)
        if self.delay:
            await asyncio.sleep(self.delay)
        error = self.failures.get(address)
        if error is not None:
            raise error
        reps = LocalReps.from_dict(REPS_PAYLOAD)
        canonical = Address(line1=address.upper(), city="Washington", state="DC")
        return reps, canonical

    def call_count(self, address: str | None = None) -> int:
        if address is None:
            return len(self.calls)
        return self.calls.count(address)


@pytest.fixture(autouse=True)
def fresh_config() -> Iterator[None]:
    """Drop any cached configuration around each test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def clock() -> FakeClock:
    """Create a manually advanced clock."""
    return FakeClock()


@pytest.fixture
def delegate() -> CountingRepFinder:
    """Create a counting delegate finder."""
    return CountingRepFinder()


@pytest.fixture
def reps_payload() -> dict[str, Any]:
    """Sample representatives response body."""
    return REPS_PAYLOAD
