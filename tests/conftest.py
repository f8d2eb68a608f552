"""Shared test fixtures for chuk-mcp-opencage."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from chuk_mcp_opencage.core.opencage import ApiResponse

API_URL = "https://api.opencagedata.com/geocode/v1/json"
PUBLIC_URL = f"{API_URL}?q=London&language=en&limit=10&key=YOUR-API-KEY"

LONDON_RESULT = {
    "formatted": "London, United Kingdom",
    "geometry": {"lat": 51.5074, "lng": -0.1278},
    "confidence": 9,
    "components": {
        "_category": "place",
        "_type": "city",
        "city": "London",
        "country": "United Kingdom",
        "country_code": "gb",
        "ISO_3166-1_alpha-2": "GB",
    },
    "annotations": {
        "flag": "🇬🇧",
        "timezone": {"name": "Europe/London", "offset_string": "+0000"},
        "currency": {"name": "British Pound", "iso_code": "GBP"},
    },
}

LONDON_ONTARIO_RESULT = {
    "formatted": "London, Ontario, Canada",
    "geometry": {"lat": 42.9832, "lng": -81.2453},
    "confidence": 5,
    "components": {"city": "London", "state": "Ontario", "country": "Canada"},
    "annotations": {
        "flag": "🇨🇦",
        "timezone": {"name": "America/Toronto"},
        "currency": {"name": "Canadian Dollar", "iso_code": "CAD"},
    },
}

SAMPLE_FORWARD_RESPONSE = {
    "results": [LONDON_RESULT],
    "status": {"code": 200, "message": "OK"},
    "total_results": 1,
}

SAMPLE_FORWARD_MULTI = {
    "results": [LONDON_RESULT, LONDON_ONTARIO_RESULT],
    "status": {"code": 200, "message": "OK"},
    "total_results": 2,
}

SAMPLE_EMPTY_RESPONSE = {
    "results": [],
    "status": {"code": 200, "message": "OK"},
    "total_results": 0,
}

SAMPLE_REVERSE_RESPONSE = {
    "results": [
        {
            "formatted": "10 Downing Street, London SW1A 2AA, United Kingdom",
            "geometry": {"lat": 51.5034, "lng": -0.1276},
            "confidence": 10,
            "components": {
                "house_number": "10",
                "road": "Downing Street",
                "city": "London",
                "postcode": "SW1A 2AA",
                "country": "United Kingdom",
            },
            "annotations": LONDON_RESULT["annotations"],
        }
    ],
    "status": {"code": 200, "message": "OK"},
    "total_results": 1,
}

SAMPLE_RATE_HEADERS = {
    "x-ratelimit-remaining": "2487",
    "x-ratelimit-limit": "2500",
    "x-ratelimit-reset": "1700000000",
}


def api_response(data, status_code=200, reason="OK", headers=None):
    """Build an ApiResponse as OpenCageClient would return it."""
    return ApiResponse(
        status_code=status_code,
        reason=reason,
        url=PUBLIC_URL,
        headers=headers or {},
        data=data,
    )


@pytest.fixture
def mock_opencage_client():
    """Mock OpenCageClient with canned responses."""
    client = AsyncMock()
    client.geocode = AsyncMock(return_value=api_response(SAMPLE_FORWARD_RESPONSE))
    client.probe = AsyncMock(return_value=api_response(None, headers=SAMPLE_RATE_HEADERS))
    client.base_url = API_URL
    client.has_api_key = True
    return client


@pytest.fixture
def mock_geocoder(mock_opencage_client):
    """Geocoder with mocked OpenCageClient."""
    from chuk_mcp_opencage.core.geocoder import Geocoder

    return Geocoder(client=mock_opencage_client)


@pytest.fixture
def capture_mcp():
    """Fake MCP server whose decorators record registered handlers by name."""
    mcp = MagicMock()
    mcp.tools = {}
    mcp.prompts = {}

    def capture(registry):
        def factory(**kwargs):
            def decorator(fn):
                registry[kwargs.get("name", fn.__name__)] = fn
                return fn

            return decorator

        return factory

    mcp.tool = capture(mcp.tools)
    mcp.prompt = capture(mcp.prompts)
    return mcp


def error_text(result) -> str:
    """Check a tool result carries ``isError`` and return its text block."""
    assert isinstance(result, dict)
    assert result["isError"] is True
    return result["content"][0]["text"]
