"""
Common test fixtures and configuration.
"""

import asyncio
from typing import Callable, Dict, Iterator, List, Optional

import httpx
import pytest

from cwa_weather.config import Settings

DATASET_DESCRIPTION = "三十六小時天氣預報"

TIME_WINDOWS = [
    ("2024-06-01 18:00:00", "2024-06-02 06:00:00"),
    ("2024-06-02 06:00:00", "2024-06-02 18:00:00"),
    ("2024-06-02 18:00:00", "2024-06-03 06:00:00"),
]

DEFAULT_ELEMENTS: Dict[str, List[str]] = {
    "Wx": ["多雲", "晴時多雲", "多雲時陰"],
    "PoP": ["10", "20", "30"],
    "MinT": ["24", "25", "22"],
    "MaxT": ["28", "33", "29"],
    "CI": ["舒適", "悶熱", "舒適"],
    "WS": ["3", "4", "2"],
}


def build_element(name: str, values: List[str], windows=TIME_WINDOWS) -> dict:
    return {
        "elementName": name,
        "time": [
            {
                "startTime": start,
                "endTime": end,
                "parameter": {"parameterName": value},
            }
            for (start, end), value in zip(windows, values)
        ],
    }


def build_payload(
    location_name: str = "臺北市",
    elements: Optional[Dict[str, List[str]]] = None,
    include_location: bool = True,
) -> dict:
    """Build a raw CWA F-C0032-001 response body."""
    elements = DEFAULT_ELEMENTS if elements is None else elements
    locations = []
    if include_location:
        locations.append(
            {
                "locationName": location_name,
                "weatherElement": [
                    build_element(name, values) for name, values in elements.items()
                ],
            }
        )
    return {
        "success": "true",
        "result": {"resource_id": "F-C0032-001"},
        "records": {
            "datasetDescription": DATASET_DESCRIPTION,
            "location": locations,
        },
    }


@pytest.fixture
def settings():
    """Settings with an API key and no .env file involved."""
    return Settings(_env_file=None, cwa_api_key="test-key")


@pytest.fixture
def raw_payload():
    """Raw upstream body for one location with three intervals."""
    return build_payload()


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_http_client(
    recorded_requests,
) -> Iterator[Callable[..., httpx.AsyncClient]]:
    """
    Build an ``httpx.AsyncClient`` backed by a mock transport.

    The handler may be a response body (served as JSON with status 200),
    an ``httpx.Response`` or a callable taking the request. Every request
    is appended to ``recorded_requests``. Clients are closed on teardown.
    """
    clients: List[httpx.AsyncClient] = []

    def factory(handler) -> httpx.AsyncClient:
        def dispatch(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            if callable(handler):
                return handler(request)
            if isinstance(handler, httpx.Response):
                return handler
            return httpx.Response(200, json=handler)

        client = httpx.AsyncClient(transport=httpx.MockTransport(dispatch))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        asyncio.run(client.aclose())


@pytest.fixture
def payload_factory():
    """Expose ``build_payload`` to tests that need custom bodies."""
    return build_payload


@pytest.fixture
def element_factory():
    """Expose ``build_element`` to tests that need custom elements."""
    return build_element
