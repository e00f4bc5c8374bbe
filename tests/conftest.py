"""Pytest fixtures for the traffic dashboard tests."""

import pytest
from pathlib import Path
from typing import Any, Dict, List, Union
from unittest.mock import Mock


def pytest_configure(config):
    """Register custom pytest marks."""
    config.addinivalue_line(
        "markers", "unit: Unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests"
    )

# Add the project root to the Python path
import sys
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.metrics_client.models import Snapshot


class FakeMetricsClient:
    """Stand-in for MetricsClient that replays a scripted list of outcomes.

    Each fetch pops the next item: a Snapshot (or plain dict, parsed as one)
    is returned, an exception is raised. The last item repeats forever.
    """

    def __init__(self, outcomes: List[Union[Snapshot, Dict[str, Any], Exception]],
                 endpoint: str = 'http://127.0.0.1:5000/data'):
        self.endpoint = endpoint
        self.outcomes = list(outcomes)
        self.calls = 0

    def fetch_snapshot(self) -> Snapshot:
        self.calls += 1
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, dict):
            return Snapshot.from_dict(outcome)
        return outcome


@pytest.fixture
def single_client_payload() -> Dict[str, Any]:
    """One client with a TCP breakdown."""
    return {
        "10.0.0.1": {
            "inbound": 2048,
            "outbound": 1024,
            "protocols": {"TCP": {"inbound": 2048, "outbound": 1024}}
        }
    }


@pytest.fixture
def multi_client_payload() -> Dict[str, Any]:
    """Three clients; the last one has no protocol breakdown."""
    return {
        "192.168.1.10": {
            "inbound": 5000,
            "outbound": 1200,
            "protocols": {
                "TCP": {"inbound": 4000, "outbound": 1000},
                "UDP": {"inbound": 900, "outbound": 150},
                "ICMP": {"inbound": 100, "outbound": 50}
            }
        },
        "192.168.1.20": {
            "inbound": 300,
            "outbound": 700,
            "protocols": {
                "UDP": {"inbound": 300, "outbound": 700}
            }
        },
        "192.168.1.30": {
            "inbound": 42,
            "outbound": 0
        }
    }


@pytest.fixture
def single_client_snapshot(single_client_payload) -> Snapshot:
    return Snapshot.from_dict(single_client_payload)


@pytest.fixture
def multi_client_snapshot(multi_client_payload) -> Snapshot:
    return Snapshot.from_dict(multi_client_payload)


@pytest.fixture
def fake_client_factory():
    """Build FakeMetricsClient instances from a list of outcomes."""
    def factory(*outcomes, endpoint='http://127.0.0.1:5000/data'):
        return FakeMetricsClient(list(outcomes), endpoint=endpoint)
    return factory


@pytest.fixture
def mock_response():
    """Build a mocked requests.Response."""
    def factory(status_code: int = 200, json_data: Any = None, json_error: Exception = None,
                text: str = '', reason: str = 'OK'):
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        response.text = text
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = json_data
        return response
    return factory
