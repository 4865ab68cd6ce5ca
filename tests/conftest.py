import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from backend.app import app as flask_app


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("API_LIMIT_REACHED",):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    flask_app.config["TESTING"] = True
    return flask_app.test_client()


@pytest.fixture
def advanced_values():
    return {
        "fitnessLevel": "advanced",
        "currentWeeklyMileage": 25,
        "mileageGoal": "increase",
        "easyPaceMin": 8,
        "easyPaceSec": 5,
        "recentRaceDistance": "10k",
        "racePaceMin": 7,
        "racePaceSec": 30,
        "goal": "half-marathon",
        "daysPerWeek": 4,
        "timelineWeeks": 12,
        "longRunDay": "Sunday",
        "injuries": "none",
    }
