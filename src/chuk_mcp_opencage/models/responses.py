"""
Response models for chuk-mcp-opencage tools.

All tool responses are Pydantic models for type safety and consistent API.
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def format_response(model: BaseModel, output_mode: str = "text") -> str:
    """Format a response model as human-readable text or JSON.

    Args:
        model: Pydantic response model instance
        output_mode: "text" (default) or "json"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json())


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")

    def to_text(self) -> str:
        return f"Error: {self.error}"


def error_result(error: str, output_mode: str = "text") -> dict[str, Any]:
    """Wrap an error message as an MCP tool result with ``isError`` set.

    The text block carries the rendered ErrorResponse, so callers that only
    read the content still see ``Error: ...`` (or ``{"error": ...}``).
    """
    text = format_response(ErrorResponse(error=error), output_mode)
    return {"content": [{"type": "text", "text": text}], "isError": True, "_meta": {}}


class GeocodeResult(BaseModel):
    """Single OpenCage match."""

    model_config = ConfigDict(extra="forbid")

    formatted: str = Field(..., description="Formatted address")
    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")
    confidence: int | None = Field(None, description="Match confidence (0-10)", ge=0, le=10)
    components: dict[str, Any] = Field(default_factory=dict, description="Address components")
    annotations: dict[str, Any] | None = Field(None, description="Timezone, currency, flag, etc.")

    @property
    def flag(self) -> str | None:
        if not self.annotations:
            return None
        return self.annotations.get("flag")

    @property
    def timezone(self) -> str | None:
        if not self.annotations:
            return None
        tz = self.annotations.get("timezone") or {}
        return tz.get("name")

    @property
    def currency(self) -> str | None:
        if not self.annotations:
            return None
        currency = self.annotations.get("currency") or {}
        name = currency.get("name")
        iso = currency.get("iso_code")
        if name and iso:
            return f"{name} ({iso})"
        return name or iso

    def annotation_lines(self, indent: str = "   ") -> list[str]:
        lines = []
        if self.flag:
            lines.append(f"{indent}Flag: {self.flag}")
        if self.timezone:
            lines.append(f"{indent}Timezone: {self.timezone}")
        if self.currency:
            lines.append(f"{indent}Currency: {self.currency}")
        return lines

    def to_text(self) -> str:
        parts = [self.formatted, f"   Coordinates: {self.lat}, {self.lng}"]
        if self.confidence is not None:
            parts.append(f"   Confidence: {self.confidence}/10")
        parts.extend(self.annotation_lines())
        return "\n".join(parts)


class GeocodeResponse(BaseModel):
    """Forward geocoding response."""

    model_config = ConfigDict(extra="forbid")

    query: str = Field(..., description="Original search query")
    results: list[GeocodeResult] = Field(..., description="Matches in upstream order")
    count: int = Field(..., description="Number of results", ge=0)
    total_results: int = Field(0, description="Total results reported by OpenCage", ge=0)
    request_url: str | None = Field(None, description="API call with the key redacted")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        if not self.results:
            return self.message
        lines = [f"{self.message}:", ""]
        for i, r in enumerate(self.results, 1):
            lines.append(f"{i}. {r.to_text()}")
            lines.append("")
        if self.request_url:
            lines.append(f"API call: {self.request_url}")
        return "\n".join(lines).rstrip()


class ReverseGeocodeResponse(BaseModel):
    """Reverse geocoding response; ``result`` is None when nothing was found."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Query latitude")
    lng: float = Field(..., description="Query longitude")
    result: GeocodeResult | None = Field(None, description="The single best match")
    request_url: str | None = Field(None, description="API call with the key redacted")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        if self.result is None:
            return self.message
        r = self.result
        lines = [f"{self.message}:", "", f"Address: {r.formatted}"]
        if r.confidence is not None:
            lines.append(f"Confidence: {r.confidence}/10")
        if r.components:
            lines.append(f"Components: {json.dumps(r.components, indent=2, ensure_ascii=False)}")
        extra = r.annotation_lines(indent="  ")
        if extra:
            lines.append("Annotations:")
            lines.extend(extra)
        return "\n".join(lines)


class StatusResponse(BaseModel):
    """API quota and rate-limit status."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(default="chuk-mcp-opencage", description="Server name")
    version: str = Field(default="0.1.0", description="Server version")
    status_code: int = Field(..., description="HTTP status of the probe request")
    status_text: str = Field("", description="HTTP reason phrase of the probe request")
    remaining: int | None = Field(None, description="Requests remaining in the current period")
    limit: int | None = Field(None, description="Requests allowed per period")
    reset: str | None = Field(None, description="ISO-8601 time the quota resets")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [f"{self.message}:", ""]
        if self.remaining is not None and self.limit is not None:
            lines.append(f"Rate Limit: {self.remaining}/{self.limit} requests remaining")
        if self.reset:
            lines.append(f"Reset Time: {self.reset}")
        lines.append(f"Response Status: {self.status_code} {self.status_text}".rstrip())
        return "\n".join(lines)


class CapabilitiesResponse(BaseModel):
    """Response model for server capabilities listing."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    geocoding_tools: list[str] = Field(..., description="Available geocoding tools")
    discovery_tools: list[str] = Field(..., description="Available discovery tools")
    prompts: list[str] = Field(default_factory=list, description="Available prompts")
    tool_count: int = Field(..., description="Total number of tools", ge=0)
    api_url: str = Field(..., description="OpenCage API endpoint")
    llm_guidance: str = Field(..., description="LLM-friendly usage guidance")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"{self.server} v{self.version}",
            f"Tools: {self.tool_count}",
            f"Geocoding: {', '.join(self.geocoding_tools)}",
            f"Discovery: {', '.join(self.discovery_tools)}",
            f"Prompts: {', '.join(self.prompts)}",
            f"OpenCage: {self.api_url}",
            f"Guidance: {self.llm_guidance}",
        ]
        return "\n".join(lines)
