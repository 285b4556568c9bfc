"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from astrocache.cache.clock import FixedClock
from astrocache.ingest.weatherstack_client import ProviderResponse, WeatherstackClient

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture_bytes(name: str) -> bytes:
    return (FIXTURE_DIR / name).read_bytes()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def vancouver_body() -> bytes:
    return load_fixture_bytes("weather_forecast_vancouver.json")


@pytest.fixture
def vancouver_payload(vancouver_body: bytes) -> dict:
    return json.loads(vancouver_body)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(datetime(2023, 6, 20, 22, 0, 0, tzinfo=UTC))


@pytest.fixture
def mock_client(vancouver_body: bytes) -> MagicMock:
    """A WeatherstackClient double answering every query with Vancouver."""
    client = MagicMock(spec=WeatherstackClient)
    client.get_forecast.return_value = ProviderResponse(200, vancouver_body)
    return client


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "provider": {
            "base_url": "https://test-weatherstack.example.com",
            "timeout": 5.0,
        },
        "server": {"port": 9090},
        "logging": {"level": "DEBUG"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
