"""Shared fixtures for family highlights tests."""

import os
from datetime import date
from pathlib import Path

import pytest

# Set env vars BEFORE importing any family_highlights modules
# Set explicit test values so .env doesn't override them (load_dotenv won't override existing)
_TEST_DATA = Path(__file__).parent / "fixtures" / "family-data.json"
os.environ["HIGHLIGHTS_DATA_SOURCE"] = str(_TEST_DATA)
os.environ["HIGHLIGHTS_REQUEST_TIMEOUT"] = "5"
os.environ["PHOENIX_ENABLED"] = "false"

# Now import and initialize family_highlights (safe because env vars are set)
from family_highlights import initialize  # noqa: E402

initialize()

from family_highlights import state  # noqa: E402


@pytest.fixture
def fixture_path():
    """Path of the sample family-data document."""
    return _TEST_DATA


@pytest.fixture
def sample_dataset():
    """The sample family-data document as loaded at startup."""
    return state.dataset


@pytest.fixture
def ada_dataset():
    """One generation holding a single person born on 14 Feb 1825."""
    return {
        "generations": [
            {
                "persons": [
                    {
                        "firstName": "Ada",
                        "lastName": "Lovelace",
                        "birth": {"date": "14 Feb 1825"},
                    }
                ]
            }
        ]
    }


@pytest.fixture
def valentines_day():
    """Reference date matching John Smith's birthday in the sample data."""
    return date(2024, 2, 14)
