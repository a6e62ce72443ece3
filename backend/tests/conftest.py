"""
Pytest configuration and fixtures.

Each test that touches storage gets a fresh app bound to an in-memory
SQLite database, so nothing persists between tests.
"""
from datetime import date

import pytest

from cycle_tracker import create_app, db
from cycle_tracker.models import PeriodCycle, CycleSettings, CycleTrackerState


def make_cycle(cycle_id, start, end, cycle_length=28, notes=None):
    """Build a stored cycle with a consistent period length."""
    return PeriodCycle(
        id=cycle_id,
        start_date=start,
        end_date=end,
        cycle_length=cycle_length,
        period_length=(end - start).days + 1,
        notes=notes
    )


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def empty_state():
    return CycleTrackerState()


@pytest.fixture
def single_cycle_state():
    """One period, 2024-01-01 through 2024-01-05, with default averages."""
    return CycleTrackerState(
        cycles=[make_cycle('c1', date(2024, 1, 1), date(2024, 1, 5))],
        settings=CycleSettings(average_cycle_length=28, average_period_length=3)
    )


@pytest.fixture
def history_state():
    """Three periods, newest first."""
    return CycleTrackerState(
        cycles=[
            make_cycle('c3', date(2024, 3, 1), date(2024, 3, 5), cycle_length=30),
            make_cycle('c2', date(2024, 1, 31), date(2024, 2, 3), cycle_length=28),
            make_cycle('c1', date(2024, 1, 3), date(2024, 1, 8), cycle_length=29, notes='heavy'),
        ],
        settings=CycleSettings(average_cycle_length=29, average_period_length=5)
    )
