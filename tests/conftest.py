"""Shared test fixtures and helpers for inouifi tests."""

import io
import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch, MagicMock
from zoneinfo import ZoneInfo

import pytest
from rich.console import Console

from inouifi.models import Stop, Trip


# =============================================================================
# Constants
# =============================================================================


# A fixed "now" for deterministic time-based tests (Paris is UTC+1 on this day)
FIXED_NOW = datetime(2025, 3, 15, 9, 0, 0, tzinfo=timezone.utc)

PARIS = ZoneInfo("Europe/Paris")


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def freeze_time():
    """Patch models._now to return FIXED_NOW for deterministic tests."""
    with patch("inouifi.models._now", return_value=FIXED_NOW):
        yield


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the config defaults."""
    monkeypatch.delenv("INOUIFI_TIMEZONE", raising=False)
    monkeypatch.delenv("INOUIFI_API_BASE", raising=False)
    # Captured output must be plain text
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)


# =============================================================================
# Test data helpers
# =============================================================================


def iso(dt: datetime) -> str:
    """Format a UTC datetime the way the portal does."""
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def make_stop_payload(
    label="Test Station",
    theoric=None,
    real=None,
    delayed=False,
    created=False,
    diversion=False,
    removed=False,
):
    """Build a stop dict matching the API shape."""
    theoric = theoric or FIXED_NOW + timedelta(hours=1)
    real = real or theoric
    return {
        "label": label,
        "theoricDate": iso(theoric),
        "realDate": iso(real),
        "isDelayed": delayed,
        "isCreated": created,
        "isDiversion": diversion,
        "isRemoved": removed,
    }


def make_stop(**kwargs) -> Stop:
    """Build a Stop through the same path as API data."""
    return Stop.from_api(make_stop_payload(**kwargs))


def make_trip_payload(stops=None):
    return {"stops": stops or []}


def paris_lyon_trip() -> Trip:
    """Paris on time at 10:00Z, Lyon due 12:00Z and running 5 minutes late."""
    return Trip.from_api(make_trip_payload([
        make_stop_payload(
            label="Paris",
            theoric=datetime(2025, 3, 15, 10, 0, tzinfo=timezone.utc),
        ),
        make_stop_payload(
            label="Lyon",
            theoric=datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc),
            real=datetime(2025, 3, 15, 12, 5, tzinfo=timezone.utc),
            delayed=True,
        ),
    ]))


def render_to_text(renderable, width=120) -> str:
    """Capture a Rich renderable as plain text for assertion."""
    console = Console(record=True, width=width, force_terminal=False)
    console.print(renderable)
    return console.export_text()


def render_to_ansi(renderable, width=120) -> str:
    """Capture a Rich renderable with its terminal escape codes."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, force_terminal=True, color_system="standard")
    console.print(renderable)
    return buffer.getvalue()


def load_fixture(name: str):
    """Load a JSON fixture file from tests/fixtures/."""
    fixture_path = Path(__file__).parent / "fixtures" / name
    with open(fixture_path) as f:
        return json.load(f)


def make_mock_httpx_client(json_response):
    """Create a mock httpx.Client that returns the given JSON from .get()."""
    mock_response = MagicMock()
    mock_response.json.return_value = json_response
    mock_response.raise_for_status.return_value = None
    mock_client = MagicMock()
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    mock_client.get.return_value = mock_response
    return mock_client
