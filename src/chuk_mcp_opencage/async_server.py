#!/usr/bin/env python3
"""
Async OpenCage MCP Server using chuk-mcp-server

Forward/reverse geocoding and API quota status via the OpenCage API.
"""

import logging
import os
import sys

from chuk_mcp_server import ChukMCPServer

from .constants import EnvVar, ErrorMessages, OpenCageConfig, ServerConfig
from .core.geocoder import Geocoder
from .core.opencage import OpenCageClient
from .prompts import register_prompts
from .tools.discovery import register_discovery_tools
from .tools.geocoding import register_geocoding_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer(ServerConfig.NAME)

# API key is read once; require_api_key() refuses to start without it
client = OpenCageClient(
    api_key=os.environ.get(EnvVar.OPENCAGE_API_KEY, ""),
    base_url=os.environ.get(EnvVar.OPENCAGE_BASE_URL) or OpenCageConfig.BASE_URL,
)
geocoder = Geocoder(client)

# Register all tool and prompt modules
register_geocoding_tools(mcp, geocoder)
register_discovery_tools(mcp, geocoder)
register_prompts(mcp)


def require_api_key() -> None:
    """Exit the process if no OpenCage API key was configured."""
    if not geocoder.api_key_configured:
        logger.error(ErrorMessages.MISSING_API_KEY)
        print(f"Error: {ErrorMessages.MISSING_API_KEY}", file=sys.stderr)
        sys.exit(1)


# Run the server
if __name__ == "__main__":
    require_api_key()
    logger.info("Starting OpenCage MCP Server...")
    mcp.run(stdio=True)
