"""
Test configuration — ensures repo root is in sys.path and provides shared
rooms and schedules built from the pinned sample page.
"""

import sys
from pathlib import Path

import pytest

# Add repo root to sys.path so tests can import roomslots.* and tests.fixtures
REPO_ROOT = Path(__file__).parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from roomslots.availability import Room, Schedule  # noqa: E402
from roomslots.collectors import ReservationPageCollector  # noqa: E402
from tests.fixtures import SAMPLE_PAGE_HTML, write_sample_page  # noqa: E402


@pytest.fixture
def room():
    """Empty room 204 with capacity 4."""
    return Room.from_label("King Study Room 204 - 4 Person")


@pytest.fixture
def sample_schedule() -> Schedule:
    """Schedule parsed from the pinned sample page."""
    return ReservationPageCollector().sync(SAMPLE_PAGE_HTML)


@pytest.fixture
def sample_page(tmp_path) -> Path:
    """Sample page written to a temp file."""
    return write_sample_page(tmp_path)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Keep tests off the developer's ROOMSLOTS_* environment."""
    for var in (
        "ROOMSLOTS_CONFIG",
        "ROOMSLOTS_SLOT_MINUTES",
        "ROOMSLOTS_MIN_MINUTES",
        "ROOMSLOTS_TRAILING_POLICY",
        "ROOMSLOTS_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
