"""
Discovery tool registration for chuk-mcp-opencage.

Registers API status and capabilities tools.
"""

import logging

from ...constants import (
    ALL_PROMPTS,
    ALL_TOOLS,
    DISCOVERY_TOOLS,
    GEOCODING_TOOLS,
    ServerConfig,
    SuccessMessages,
)
from ...models.responses import (
    CapabilitiesResponse,
    StatusResponse,
    error_result,
    format_response,
)

logger = logging.getLogger(__name__)


def register_discovery_tools(mcp, geocoder):
    """Register discovery tools with the MCP server."""

    @mcp.tool(
        name="get-api-status",
        description="Get current API usage and rate limit information for your OpenCage API key",
    )
    async def get_api_status(output_mode: str = "text") -> str | dict:
        """Get OpenCage API usage and rate limit status.

        Makes one minimal request and reports the rate-limit headers.
        Headers the API did not send are left out of the summary.

        Args:
            output_mode: "text" (default) or "json"

        Returns:
            Remaining/total requests, reset time, and HTTP status
        """
        try:
            status = await geocoder.api_status()
            response = StatusResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                status_code=status.status_code,
                status_text=status.status_text,
                remaining=status.remaining,
                limit=status.limit,
                reset=status.reset,
                message=SuccessMessages.STATUS,
            )
            return format_response(response, output_mode)
        except Exception as e:
            logger.error("get-api-status failed: %s", e)
            return error_result(str(e), output_mode)

    @mcp.tool(
        name="geocoder-capabilities",
        description="List the available geocoding tools, prompts, and usage guidance",
    )
    async def geocoder_capabilities(output_mode: str = "text") -> str | dict:
        """Get full server capabilities.

        Args:
            output_mode: "text" (default) or "json"

        Returns:
            Tool and prompt lists, API endpoint, and guidance
        """
        try:
            response = CapabilitiesResponse(
                server=ServerConfig.NAME,
                version=ServerConfig.VERSION,
                geocoding_tools=GEOCODING_TOOLS,
                discovery_tools=DISCOVERY_TOOLS,
                prompts=ALL_PROMPTS,
                tool_count=len(ALL_TOOLS),
                api_url=geocoder.base_url,
                llm_guidance=(
                    "Use 'geocode-forward' to convert an address or place name to coordinates. "
                    "Use 'geocode-reverse' to find the address at a latitude/longitude. "
                    "Use 'get-api-status' to check remaining OpenCage quota. "
                    "Confidence is 0-10; higher means a tighter match."
                ),
                message=SuccessMessages.CAPABILITIES.format(
                    ServerConfig.NAME, ServerConfig.VERSION
                ),
            )
            return format_response(response, output_mode)
        except Exception as e:
            logger.error("geocoder-capabilities failed: %s", e)
            return error_result(str(e), output_mode)
