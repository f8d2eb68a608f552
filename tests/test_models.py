"""Tests for chuk-mcp-opencage response models."""

import json

import pytest
from pydantic import ValidationError

from chuk_mcp_opencage.models.responses import (
    CapabilitiesResponse,
    ErrorResponse,
    GeocodeResponse,
    GeocodeResult,
    ReverseGeocodeResponse,
    StatusResponse,
    error_result,
    format_response,
)

from .conftest import LONDON_RESULT


def london(**overrides) -> GeocodeResult:
    fields = {
        "formatted": LONDON_RESULT["formatted"],
        "lat": 51.5074,
        "lng": -0.1278,
        "confidence": 9,
        "components": LONDON_RESULT["components"],
        "annotations": LONDON_RESULT["annotations"],
    }
    fields.update(overrides)
    return GeocodeResult(**fields)


class TestErrorResponse:
    def test_to_text(self):
        assert ErrorResponse(error="fail").to_text() == "Error: fail"

    def test_extra_forbid(self):
        with pytest.raises(ValidationError):
            ErrorResponse(error="ok", extra_field="bad")

    def test_json(self):
        data = json.loads(ErrorResponse(error="test").model_dump_json())
        assert data == {"error": "test"}


class TestErrorResult:
    def test_flags_error(self):
        result = error_result("fail")
        assert result["isError"] is True
        assert result["content"] == [{"type": "text", "text": "Error: fail"}]

    def test_json_mode(self):
        result = error_result("fail", "json")
        assert json.loads(result["content"][0]["text"]) == {"error": "fail"}


class TestGeocodeResult:
    def test_create_minimal(self):
        r = GeocodeResult(formatted="Somewhere", lat=1.0, lng=2.0)
        assert r.confidence is None
        assert r.components == {}
        assert r.annotations is None

    @pytest.mark.parametrize("confidence", [-1, 11])
    def test_confidence_range(self, confidence):
        with pytest.raises(ValidationError):
            london(confidence=confidence)

    def test_annotation_accessors(self):
        r = london()
        assert r.flag == "🇬🇧"
        assert r.timezone == "Europe/London"
        assert r.currency == "British Pound (GBP)"

    def test_accessors_without_annotations(self):
        r = london(annotations=None)
        assert r.flag is None
        assert r.timezone is None
        assert r.currency is None

    def test_currency_name_only(self):
        r = london(annotations={"currency": {"name": "Euro"}})
        assert r.currency == "Euro"

    def test_to_text(self):
        text = london().to_text()
        assert "London, United Kingdom" in text
        assert "51.5074, -0.1278" in text
        assert "Confidence: 9/10" in text
        assert "Timezone: Europe/London" in text
        assert "Currency: British Pound (GBP)" in text

    def test_to_text_skips_missing_annotations(self):
        text = london(annotations={"flag": "🇬🇧"}).to_text()
        assert "Flag:" in text
        assert "Timezone" not in text
        assert "Currency" not in text


class TestGeocodeResponse:
    def test_numbered_entries(self):
        response = GeocodeResponse(
            query="London",
            results=[london(), london(formatted="London, Ontario, Canada")],
            count=2,
            total_results=2,
            message="Found 2 result(s) for 'London'",
        )
        text = response.to_text()
        assert "1. London, United Kingdom" in text
        assert "2. London, Ontario, Canada" in text
        assert text.index("1. ") < text.index("2. ")

    def test_request_url_shown(self):
        response = GeocodeResponse(
            query="London",
            results=[london()],
            count=1,
            request_url="https://api.opencagedata.com/geocode/v1/json?q=London&key=YOUR-API-KEY",
            message="Found 1 result(s) for 'London'",
        )
        assert "API call: https://api.opencagedata.com" in response.to_text()

    def test_empty_is_message_only(self):
        response = GeocodeResponse(
            query="xyzzy",
            results=[],
            count=0,
            request_url="https://example.com",
            message="No results found for 'xyzzy'",
        )
        assert response.to_text() == "No results found for 'xyzzy'"

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            GeocodeResponse(query="x", results=[], count=-1, message="m")


class TestReverseGeocodeResponse:
    def test_to_text(self):
        response = ReverseGeocodeResponse(
            lat=51.5074,
            lng=-0.1278,
            result=london(),
            message="Reverse geocoding for coordinates 51.5074, -0.1278",
        )
        text = response.to_text()
        assert "Address: London, United Kingdom" in text
        assert "Confidence: 9/10" in text
        assert '"country": "United Kingdom"' in text
        assert "Annotations:" in text
        assert "Europe/London" in text

    def test_without_annotations(self):
        response = ReverseGeocodeResponse(
            lat=51.5074, lng=-0.1278, result=london(annotations=None), message="m"
        )
        assert "Annotations" not in response.to_text()

    def test_unrecognised_annotations_have_no_heading(self):
        response = ReverseGeocodeResponse(
            lat=51.5034,
            lng=-0.1276,
            result=london(annotations={"what3words": {"words": "index.home.raft"}}),
            message="m",
        )
        assert "Annotations" not in response.to_text()

    def test_not_found(self):
        response = ReverseGeocodeResponse(
            lat=0.0, lng=-150.0, message="No address found for coordinates 0.0, -150.0"
        )
        assert response.to_text() == "No address found for coordinates 0.0, -150.0"


class TestStatusResponse:
    def test_full(self):
        response = StatusResponse(
            status_code=200,
            status_text="OK",
            remaining=2487,
            limit=2500,
            reset="2023-11-14T22:13:20.000Z",
            message="OpenCage API Status",
        )
        text = response.to_text()
        assert "Rate Limit: 2487/2500 requests remaining" in text
        assert "Reset Time: 2023-11-14T22:13:20.000Z" in text
        assert "Response Status: 200 OK" in text

    def test_missing_headers_omitted(self):
        response = StatusResponse(status_code=401, status_text="Unauthorized", message="s")
        text = response.to_text()
        assert "Rate Limit" not in text
        assert "Reset Time" not in text
        assert "Response Status: 401 Unauthorized" in text

    def test_defaults(self):
        response = StatusResponse(status_code=200, message="s")
        assert response.server == "chuk-mcp-opencage"


class TestCapabilitiesResponse:
    def test_to_text(self):
        response = CapabilitiesResponse(
            server="chuk-mcp-opencage",
            version="0.1.0",
            geocoding_tools=["geocode-forward", "geocode-reverse"],
            discovery_tools=["get-api-status"],
            prompts=["geocoding-assistant"],
            tool_count=3,
            api_url="https://api.opencagedata.com/geocode/v1/json",
            llm_guidance="Use geocode-forward.",
            message="caps",
        )
        text = response.to_text()
        assert "Geocoding: geocode-forward, geocode-reverse" in text
        assert "Prompts: geocoding-assistant" in text


class TestFormatResponse:
    def test_text_is_default(self):
        assert format_response(ErrorResponse(error="x")) == "Error: x"

    def test_json_mode(self):
        data = json.loads(format_response(ErrorResponse(error="x"), "json"))
        assert data["error"] == "x"

    def test_unknown_mode_falls_back_to_json(self):
        data = json.loads(format_response(ErrorResponse(error="x"), "yaml"))
        assert data["error"] == "x"
