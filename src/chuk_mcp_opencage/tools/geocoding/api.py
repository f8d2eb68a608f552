"""
Geocoding tool registration for chuk-mcp-opencage.

Registers forward and reverse geocoding tools.
"""

import logging

from chuk_mcp_server.constants import ATTR_MCP_TOOL

from ...constants import OpenCageConfig, SuccessMessages
from ...core.geocoder import GeocodeItem
from ...models.responses import (
    GeocodeResponse,
    GeocodeResult,
    ReverseGeocodeResponse,
    error_result,
    format_response,
)

logger = logging.getLogger(__name__)


def _to_model(item: GeocodeItem) -> GeocodeResult:
    return GeocodeResult(
        formatted=item.formatted,
        lat=item.lat,
        lng=item.lng,
        confidence=item.confidence,
        components=item.components,
        annotations=item.annotations,
    )


def _declare_ranges(func, **ranges: tuple[float, float]) -> None:
    """Add minimum/maximum to the input schema of a registered tool.

    The Geocoder re-checks every range, so a client that ignores the schema
    still gets an error response.
    """
    handler = getattr(func, ATTR_MCP_TOOL, None)
    if handler is None:
        return
    properties = handler.mcp_tool.inputSchema["properties"]
    for param, (low, high) in ranges.items():
        properties[param]["minimum"] = low
        properties[param]["maximum"] = high
    handler.invalidate_cache()


def register_geocoding_tools(mcp, geocoder):
    """Register geocoding tools with the MCP server."""

    @mcp.tool(
        name="geocode-forward",
        description="Convert an address or place name to geographic coordinates (latitude/longitude)",
    )
    async def geocode_forward(
        query: str,
        language: str = OpenCageConfig.DEFAULT_LANGUAGE,
        countrycode: str | None = None,
        bounds: str | None = None,
        limit: int = OpenCageConfig.DEFAULT_LIMIT,
        output_mode: str = "text",
    ) -> str | dict:
        """Forward geocode an address or place name to coordinates.

        Args:
            query: The address, place name, or location to geocode
            language: Language for results (e.g. "en", "de", "fr", default "en")
            countrycode: Restrict results to countries (ISO 3166-1 alpha-2, e.g. "gb" or "us,ca")
            bounds: Bounding box hint "min_lon,min_lat,max_lon,max_lat"
            limit: Maximum number of results (1-100, default 10)
            output_mode: "text" (default) or "json"

        Returns:
            Numbered matches with formatted address, coordinates, confidence,
            and flag/timezone/currency where available
        """
        try:
            found = await geocoder.geocode(
                query,
                language=language,
                countrycode=countrycode,
                bounds=bounds,
                limit=limit,
            )
            results = [_to_model(item) for item in found.items]
            if results:
                message = SuccessMessages.GEOCODE_FOUND.format(len(results), query)
            else:
                message = SuccessMessages.NO_RESULTS.format(query)
            response = GeocodeResponse(
                query=query,
                results=results,
                count=len(results),
                total_results=found.total_results,
                request_url=found.request_url,
                message=message,
            )
            return format_response(response, output_mode)
        except Exception as e:
            logger.error("geocode-forward failed: %s", e)
            return error_result(str(e), output_mode)

    _declare_ranges(
        geocode_forward, limit=(OpenCageConfig.MIN_LIMIT, OpenCageConfig.MAX_LIMIT)
    )

    @mcp.tool(
        name="geocode-reverse",
        description="Convert geographic coordinates (latitude/longitude) to an address or place name",
    )
    async def geocode_reverse(
        latitude: float,
        longitude: float,
        language: str = OpenCageConfig.DEFAULT_LANGUAGE,
        no_annotations: bool = False,
        output_mode: str = "text",
    ) -> str | dict:
        """Reverse geocode coordinates to an address.

        Args:
            latitude: Latitude (-90 to 90)
            longitude: Longitude (-180 to 180)
            language: Language for results (e.g. "en", "de", "fr", default "en")
            no_annotations: Exclude timezone/currency/flag metadata
            output_mode: "text" (default) or "json"

        Returns:
            Address, confidence, address components, and annotations
        """
        try:
            found = await geocoder.reverse_geocode(
                latitude, longitude, language=language, no_annotations=no_annotations
            )
            if found.item is None:
                response = ReverseGeocodeResponse(
                    lat=latitude,
                    lng=longitude,
                    request_url=found.request_url,
                    message=SuccessMessages.NO_ADDRESS.format(latitude, longitude),
                )
            else:
                response = ReverseGeocodeResponse(
                    lat=latitude,
                    lng=longitude,
                    result=_to_model(found.item),
                    request_url=found.request_url,
                    message=SuccessMessages.REVERSE_FOUND.format(latitude, longitude),
                )
            return format_response(response, output_mode)
        except Exception as e:
            logger.error("geocode-reverse failed: %s", e)
            return error_result(str(e), output_mode)

    _declare_ranges(geocode_reverse, latitude=(-90, 90), longitude=(-180, 180))
