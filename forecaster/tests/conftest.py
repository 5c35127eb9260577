"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import pytest_asyncio
import yaml

from forecaster.ingest.nws_client import NwsClient

NWS_TEST_BASE = "https://test-nws.example.com"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)
    return _load


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "nws": {"base_url": NWS_TEST_BASE, "user_agent": "forecaster-tests/1.0"},
        "server": {"port": 9100},
        "log_level": "info",
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest_asyncio.fixture
async def nws():
    client = NwsClient(base_url=NWS_TEST_BASE)
    yield client
    await client.aclose()
