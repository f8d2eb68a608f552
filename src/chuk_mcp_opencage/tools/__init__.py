"""MCP tool modules for chuk-mcp-opencage."""
