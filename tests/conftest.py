"""Shared test fixtures: sample entries, mocked backend client, Flask app."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from coachlog import create_app
from coachlog.models import Exercise, TrainingEntry
from coachlog.services.api_client import EntriesClient


def _make_entry(**overrides) -> TrainingEntry:
    """Minimal valid entry; keyword arguments override single fields."""
    fields = dict(
        id=1,
        date="2024-01-01",
        microcycle=1,
        session_type="Training",
        volume=60,
        intensity=70,
        complexity=3,
        objective1="Improve Sprint Speed",
        objective2=None,
        exercises=(),
    )
    fields.update(overrides)
    return TrainingEntry(**fields)


@pytest.fixture
def make_entry():
    return _make_entry


@pytest.fixture
def sprint_drill() -> Exercise:
    return Exercise(
        id="ex-1",
        goal="Acceleration",
        exercise_type="Sprint",
        focus="Speed",
        description="6 x 30 m flying sprints",
        duration=20,
        fitness_indicator="Max speed",
    )


@pytest.fixture
def rondo() -> Exercise:
    return Exercise(
        id="ex-2",
        goal="Ball circulation",
        exercise_type="Rondo",
        focus="Passing",
        description="5 v 2 in 12 x 12 m",
        duration=15.0,
        fitness_indicator="Heart rate",
    )


@pytest.fixture
def entries(sprint_drill, rondo) -> list[TrainingEntry]:
    """Five entries over three microcycles, in insertion order."""
    return [
        _make_entry(id=1, date="2024-01-01", microcycle=1, volume=60, intensity=70,
                   objective1="Improve Sprint Speed", exercises=(sprint_drill, rondo)),
        _make_entry(id=2, date="2024-02-01", microcycle=2, session_type="Match", volume=90,
                   intensity=95, complexity=5, objective1="Win", objective2="Pressing high"),
        _make_entry(id=3, date="2024-03-01", microcycle=3, volume=60, intensity=70,
                   objective1="Endurance"),
        _make_entry(id=4, date="2024-03-03", microcycle=3, session_type="Recovery", volume=45,
                   intensity=80, complexity=None, objective1="Regeneration", objective2="sprint mechanics"),
        _make_entry(id=5, date="2024-03-05", microcycle=None, session_type="Other", volume=None,
                   intensity=None, complexity=None, objective1="Team meeting"),
    ]


@pytest.fixture
def client_mock(entries) -> MagicMock:
    mock = MagicMock(spec=EntriesClient)
    mock.fetch_entries.return_value = list(entries)
    mock.create_entry.return_value = 99
    return mock


@pytest.fixture
def app(client_mock):
    return create_app(
        {
            "TESTING": True,
            "SECRET_KEY": "test",
            "ENTRIES_CLIENT": client_mock,
        }
    )


@pytest.fixture
def http(app):
    return app.test_client()
