"""
Constants for chuk-mcp-opencage server.

All magic strings, API metadata, and configuration values live here.
"""


class ServerConfig:
    NAME = "chuk-mcp-opencage"
    VERSION = "0.1.0"
    DESCRIPTION = "Forward/reverse geocoding MCP Server via the OpenCage API"


class OpenCageConfig:
    BASE_URL = "https://api.opencagedata.com/geocode/v1/json"
    USER_AGENT = "chuk-mcp-opencage/0.1.0"
    DEFAULT_LANGUAGE = "en"
    DEFAULT_LIMIT = 10
    MIN_LIMIT = 1
    MAX_LIMIT = 100
    REVERSE_LIMIT = 1
    PROBE_QUERY = "0,0"
    REDACTED_KEY = "YOUR-API-KEY"


class RateLimitHeader:
    REMAINING = "x-ratelimit-remaining"
    LIMIT = "x-ratelimit-limit"
    RESET = "x-ratelimit-reset"


class EnvVar:
    MCP_STDIO = "MCP_STDIO"
    OPENCAGE_API_KEY = "OPENCAGE_API_KEY"
    OPENCAGE_BASE_URL = "OPENCAGE_BASE_URL"


# Tool lists
GEOCODING_TOOLS = ["geocode-forward", "geocode-reverse"]
DISCOVERY_TOOLS = ["get-api-status", "geocoder-capabilities"]
ALL_TOOLS = GEOCODING_TOOLS + DISCOVERY_TOOLS

# Prompt lists
ASSISTANT_PROMPT = "geocoding-assistant"
ALL_PROMPTS = [ASSISTANT_PROMPT]
DEFAULT_PROMPT_TASK = "general geocoding"


class ErrorMessages:
    MISSING_API_KEY = "OPENCAGE_API_KEY environment variable is required"
    EMPTY_QUERY = "Query string cannot be empty"
    INVALID_LAT = "Invalid latitude {}: must be between -90 and 90"
    INVALID_LON = "Invalid longitude {}: must be between -180 and 180"
    INVALID_LIMIT = "limit must be between 1 and {}, got {}"
    INVALID_BOUNDS = "Invalid bounds '{}': expected min_lon,min_lat,max_lon,max_lat"
    API_ERROR = "OpenCage API error (HTTP {}): {}"
    NETWORK_ERROR = "Network error contacting OpenCage: {}"
    INVALID_JSON = "Invalid JSON from OpenCage: {}"


class SuccessMessages:
    GEOCODE_FOUND = "Found {} result(s) for '{}'"
    NO_RESULTS = "No results found for '{}'"
    REVERSE_FOUND = "Reverse geocoding for coordinates {}, {}"
    NO_ADDRESS = "No address found for coordinates {}, {}"
    STATUS = "OpenCage API Status"
    CAPABILITIES = "{} v{} capabilities"
