"""
Geocoder manager - async orchestrator for OpenCage operations.

Wraps OpenCageClient with validation, defaults, parsing, and typed
dataclass results.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..constants import ErrorMessages, OpenCageConfig, RateLimitHeader
from .opencage import OpenCageClient

logger = logging.getLogger(__name__)


@dataclass
class GeocodeItem:
    """Parsed OpenCage result."""

    formatted: str
    lat: float
    lng: float
    confidence: int | None = None
    components: dict[str, Any] = field(default_factory=dict)
    annotations: dict[str, Any] | None = None


@dataclass
class ForwardResult:
    """Forward geocoding outcome: parsed matches plus request metadata."""

    items: list[GeocodeItem]
    total_results: int
    request_url: str


@dataclass
class ReverseResult:
    """Reverse geocoding outcome; ``item`` is None when nothing was found."""

    lat: float
    lng: float
    item: GeocodeItem | None
    request_url: str


@dataclass
class ApiStatusResult:
    """Rate-limit information read from a probe response."""

    status_code: int
    status_text: str
    remaining: int | None = None
    limit: int | None = None
    reset: str | None = None


class Geocoder:
    """Central manager for OpenCage geocoding operations."""

    def __init__(self, client: OpenCageClient):
        self._client = client

    @property
    def base_url(self) -> str:
        return self._client.base_url

    @property
    def api_key_configured(self) -> bool:
        return self._client.has_api_key

    # --- Validation helpers ---

    @staticmethod
    def _validate_coordinates(lat: float, lng: float) -> None:
        """Validate lat/lng ranges."""
        if not (-90 <= lat <= 90):
            raise ValueError(ErrorMessages.INVALID_LAT.format(lat))
        if not (-180 <= lng <= 180):
            raise ValueError(ErrorMessages.INVALID_LON.format(lng))

    @staticmethod
    def _validate_query(query: str) -> None:
        """Validate search query is not empty."""
        if not query or not query.strip():
            raise ValueError(ErrorMessages.EMPTY_QUERY)

    @staticmethod
    def _validate_limit(limit: int) -> None:
        if not (OpenCageConfig.MIN_LIMIT <= limit <= OpenCageConfig.MAX_LIMIT):
            raise ValueError(ErrorMessages.INVALID_LIMIT.format(OpenCageConfig.MAX_LIMIT, limit))

    @staticmethod
    def _validate_bounds(bounds: str) -> str:
        """Check bounds is four comma-separated numbers and normalise spacing."""
        parts = [p.strip() for p in bounds.split(",")]
        if len(parts) != 4:
            raise ValueError(ErrorMessages.INVALID_BOUNDS.format(bounds))
        try:
            [float(p) for p in parts]
        except ValueError as e:
            raise ValueError(ErrorMessages.INVALID_BOUNDS.format(bounds)) from e
        return ",".join(parts)

    # --- Primary operations ---

    async def geocode(
        self,
        query: str,
        language: str | None = None,
        countrycode: str | None = None,
        bounds: str | None = None,
        limit: int | None = None,
    ) -> ForwardResult:
        """Forward geocode: address or place name to coordinates.

        Args:
            query: Address or place name to search for
            language: Result language, defaults to "en"
            countrycode: Comma-separated ISO country codes to filter
            bounds: "min_lon,min_lat,max_lon,max_lat" search hint
            limit: Maximum results (1-100), defaults to 10

        Returns:
            ForwardResult; ``items`` is empty when nothing matched

        Raises:
            ValueError: If any argument is invalid
        """
        self._validate_query(query)
        if limit is None:
            limit = OpenCageConfig.DEFAULT_LIMIT
        self._validate_limit(limit)
        if bounds:
            bounds = self._validate_bounds(bounds)

        api = await self._client.geocode(
            query.strip(),
            language=language or OpenCageConfig.DEFAULT_LANGUAGE,
            limit=limit,
            countrycode=countrycode,
            bounds=bounds,
        )
        data = api.data or {}
        parsed = (self._parse_result(r) for r in data.get("results") or [])
        items = [item for item in parsed if item is not None]
        logger.debug("geocode %r returned %d result(s)", query, len(items))
        total = _parse_int(data.get("total_results"))
        return ForwardResult(
            items=items,
            total_results=total if total is not None else len(items),
            request_url=api.url,
        )

    async def reverse_geocode(
        self,
        lat: float,
        lng: float,
        language: str | None = None,
        no_annotations: bool = False,
    ) -> ReverseResult:
        """Reverse geocode: coordinates to an address.

        Raises:
            ValueError: If coordinates are out of range
        """
        self._validate_coordinates(lat, lng)
        api = await self._client.geocode(
            f"{lat},{lng}",
            language=language or OpenCageConfig.DEFAULT_LANGUAGE,
            limit=OpenCageConfig.REVERSE_LIMIT,
            no_annotations=no_annotations,
        )
        results = (api.data or {}).get("results") or []
        item = self._parse_result(results[0]) if results else None
        if item is not None and no_annotations:
            item.annotations = None
        return ReverseResult(lat=lat, lng=lng, item=item, request_url=api.url)

    async def api_status(self) -> ApiStatusResult:
        """Probe the API and report rate-limit headers."""
        api = await self._client.probe()
        headers = api.headers
        return ApiStatusResult(
            status_code=api.status_code,
            status_text=api.reason,
            remaining=_parse_int(headers.get(RateLimitHeader.REMAINING)),
            limit=_parse_int(headers.get(RateLimitHeader.LIMIT)),
            reset=epoch_to_iso(headers.get(RateLimitHeader.RESET)),
        )

    # --- Parsing helpers ---

    @staticmethod
    def _parse_result(raw: dict) -> GeocodeItem | None:
        """Parse an OpenCage result into a GeocodeItem.

        Returns None when the result has no numeric geometry. A confidence
        outside 0-10 or of the wrong type is dropped.
        """
        geometry = raw.get("geometry") or {}
        try:
            lat = float(geometry["lat"])
            lng = float(geometry["lng"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Skipping result without usable geometry: %r", raw.get("formatted"))
            return None
        confidence = _parse_int(raw.get("confidence"))
        if confidence is not None and not (0 <= confidence <= 10):
            confidence = None
        return GeocodeItem(
            formatted=raw.get("formatted", ""),
            lat=lat,
            lng=lng,
            confidence=confidence,
            components=raw.get("components") or {},
            annotations=raw.get("annotations") or None,
        )

    async def close(self) -> None:
        await self._client.close()


def _parse_int(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def epoch_to_iso(value: str | None) -> str | None:
    """Convert an epoch-seconds header value to an ISO-8601 UTC timestamp.

    Returns None for a missing, unparseable, or out-of-range value.
    """
    seconds = _parse_int(value)
    if seconds is None:
        return None
    try:
        dt = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None
    return dt.strftime("%Y-%m-%dT%H:%M:%S.000Z")
