"""chuk-mcp-opencage: OpenCage geocoding MCP server."""

from .constants import ServerConfig

__version__ = ServerConfig.VERSION
