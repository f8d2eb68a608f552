"""
Prompt registration for chuk-mcp-opencage.

Registers the geocoding-assistant prompt.
"""

import logging

from ..constants import ASSISTANT_PROMPT, DEFAULT_PROMPT_TASK

logger = logging.getLogger(__name__)

ASSISTANT_TEMPLATE = """I need help with a geocoding task: {task}

Please help me understand what I can do with the OpenCage geocoding API through this MCP server:

1. Forward Geocoding: Convert addresses/place names to coordinates
2. Reverse Geocoding: Convert coordinates to addresses
3. Check API status and rate limits

Available tools:
- geocode-forward: Convert address → coordinates
- geocode-reverse: Convert coordinates → address
- get-api-status: Check API usage

What would you like to help me with regarding geocoding?"""


def build_assistant_prompt(task: str | None = None) -> str:
    """Render the assistant prompt text, falling back to a generic task."""
    return ASSISTANT_TEMPLATE.format(task=(task or "").strip() or DEFAULT_PROMPT_TASK)


def register_prompts(mcp):
    """Register prompts with the MCP server."""

    @mcp.prompt(
        name=ASSISTANT_PROMPT,
        description="Help users with geocoding tasks - converting between addresses and coordinates",
    )
    def geocoding_assistant(task: str = DEFAULT_PROMPT_TASK) -> str:
        """Geocoding assistant prompt.

        Args:
            task: The geocoding task to help with
        """
        logger.debug("Rendering %s prompt", ASSISTANT_PROMPT)
        return build_assistant_prompt(task)
