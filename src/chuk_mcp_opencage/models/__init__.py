"""Response models for chuk-mcp-opencage."""

from .responses import (
    CapabilitiesResponse,
    ErrorResponse,
    GeocodeResponse,
    GeocodeResult,
    ReverseGeocodeResponse,
    StatusResponse,
    error_result,
    format_response,
)

__all__ = [
    "CapabilitiesResponse",
    "ErrorResponse",
    "GeocodeResponse",
    "GeocodeResult",
    "ReverseGeocodeResponse",
    "StatusResponse",
    "error_result",
    "format_response",
]
