"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from exchangelog.models.exchange import Exchange, Message
from exchangelog.models.records import ExchangeRecord


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def records_file(fixtures_dir: Path) -> Path:
    """Return the path to the sample records file."""
    return fixtures_dir / "exchanges.json"


@pytest.fixture
def sample_records_json(records_file: Path) -> list[dict]:
    """Load sample records JSON fixture."""
    with open(records_file) as f:
        return json.load(f)


@pytest.fixture
def sample_exchanges(sample_records_json: list[dict]) -> list[Exchange]:
    """Parse sample records into exchanges."""
    return [ExchangeRecord.model_validate(r).to_exchange() for r in sample_records_json]


@pytest.fixture
def sample_exchange() -> Exchange:
    """Return a plain exchange with headers, properties and a string body."""
    return Exchange(
        exchange_id="ID-1",
        properties={"retries": 0},
        message=Message(headers={"foo": 123}, body="Hello World"),
    )
