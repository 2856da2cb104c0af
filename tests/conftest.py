"""Shared test fixtures and data loading for openings.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference week: Mon 2025-01-06 through Sun 2025-01-12.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")
_schedules = _load_json(FIXTURES_DIR / "schedules.json")

# Day lookup:  DAYS["mon"] → {"date": date(2025, 1, 6), "key": "Mon"}
DAYS: dict[str, dict] = {
    d["name"]: {"date": date.fromisoformat(d["date"]), "key": d["key"]}
    for d in _reference["days"]
}


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def day_date(day: str) -> date:
    """Date object for a named day."""
    return DAYS[day]["date"]


def dt(day: str, time_label: str) -> datetime:
    """Datetime from day name and time label.

    >>> dt("mon", "09:00")
    datetime(2025, 1, 6, 9, 0)
    """
    return datetime.fromisoformat(f"{DAYS[day]['date'].isoformat()}T{time_label}")


def schedule_data(name: str) -> dict:
    """Raw {"openings": ..., "exceptions": ...} for a named schedule."""
    return _schedules[name]


def fixed_clock(at: datetime):
    """Zero-arg clock that always returns `at`."""
    return lambda: at


# ---------------------------------------------------------------------------
# Manager factory
# ---------------------------------------------------------------------------
def make_manager(name: str, clock=None):
    """Build an OpeningsManager from schedules.json by name."""
    from openings.manager import OpeningsManager

    config = _schedules[name]
    if clock is None:
        return OpeningsManager(config["openings"], config["exceptions"])
    return OpeningsManager(config["openings"], config["exceptions"], clock=clock)


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def standard_manager():
    return make_manager("standard")


@pytest.fixture
def holiday_manager():
    return make_manager("holiday")


@pytest.fixture
def empty_manager():
    return make_manager("empty")
