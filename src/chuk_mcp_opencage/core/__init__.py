"""Core OpenCage client and geocoder manager."""

from .geocoder import ApiStatusResult, ForwardResult, GeocodeItem, Geocoder, ReverseResult
from .opencage import ApiResponse, OpenCageClient

__all__ = [
    "ApiResponse",
    "ApiStatusResult",
    "ForwardResult",
    "GeocodeItem",
    "Geocoder",
    "OpenCageClient",
    "ReverseResult",
]
