"""
Pytest configuration for tgfc-fixtures tests.
"""

import pytest
import structlog

from tgfc_fixtures import config as config_module


@pytest.fixture(autouse=True)
def _reset_state(monkeypatch):
    """Fresh config singleton and default structlog setup for every test."""
    for name in (
        "TGFC_CSV_HAS_HEADER",
        "TGFC_CSV_DELIMITER",
        "TGFC_INPUT_ENCODING",
        "TGFC_LOG_JSON",
        "TGFC_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def park_rows():
    """The two-fixture Park A example, out of time order."""
    return [
        ["Park A", "League", "01/05/2024", "2:00:00 PM", "North Brisbane"],
        ["Park A", "League", "01/05/2024", "10:00:00 AM", "Western Suburbs"],
    ]


@pytest.fixture
def season_rows():
    """Several venues and dates, deliberately unsorted, with skipped rows mixed in."""
    return [
        ["Zillmere", "Cup", "03/05/2024", "9:00:00 AM", "Gold Coast Suns"],
        ["Park A", "League", "04/05/2024", "11:30:00 AM", "St George"],
        ["Park A", "League"],
        ["Park A", "League", "01/05/2024", "2:00:00 PM", "North Brisbane"],
        ["", "", "", "", ""],
        ["Bardon", "League", "01/05/2024", "12:00:00 PM", "Sydney City", "extra"],
        ["Park A", "League", "01/05/2024", "10:00:00 AM", "Western Suburbs"],
        ["Zillmere", "Cup", "03/05/2024", "8:15:00 AM", "The Gap"],
        ["Bardon", "Friendly", "01/05/2024", "12:00:00 AM", "Mt Gravatt"],
    ]
