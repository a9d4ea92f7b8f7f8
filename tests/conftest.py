"""Shared fixtures for the UZ train search tests."""

import json

import pytest

from uz_trains.config import reset_config
from uz_trains.schedule_searcher import reset_searcher

SAMPLE_RECORDS = [
    {"trainId": 1177, "departureStationId": 1902, "arrivalStationId": 1929, "price": 164.65,
     "arrivalTime": "10:25:00", "departureTime": "16:36:00"},
    {"trainId": 1178, "departureStationId": 1902, "arrivalStationId": 1929, "price": 164.65,
     "arrivalTime": "10:25:00", "departureTime": "16:36:00"},
    {"trainId": 1141, "departureStationId": 1902, "arrivalStationId": 1929, "price": 176.77,
     "arrivalTime": "10:25:00", "departureTime": "16:48:00"},
    {"trainId": 1140, "departureStationId": 1902, "arrivalStationId": 1929, "price": 180.2,
     "arrivalTime": "09:55:00", "departureTime": "15:12:00"},
    {"trainId": 1153, "departureStationId": 1929, "arrivalStationId": 1902, "price": 158.1,
     "arrivalTime": "07:15:00", "departureTime": "22:40:00"},
]


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch, tmp_path):
    """Run every test with fresh singletons and no stray UZ_TRAINS_ settings."""
    for name in ("UZ_TRAINS_DATA_FILE", "UZ_TRAINS_LOG_LEVEL", "UZ_TRAINS_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    reset_config()
    reset_searcher()
    yield
    reset_config()
    reset_searcher()


@pytest.fixture
def write_dataset(tmp_path):
    """Write records (or raw text) to a dataset file and return its path."""
    def _write(content, name="data.json"):
        path = tmp_path / name
        if isinstance(content, (str, bytes)):
            path.write_bytes(content.encode("utf-8") if isinstance(content, str) else content)
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_dataset(write_dataset):
    """Path to a dataset file holding SAMPLE_RECORDS."""
    return write_dataset(SAMPLE_RECORDS)
