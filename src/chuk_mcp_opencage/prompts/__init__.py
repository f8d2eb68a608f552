"""Prompts for chuk-mcp-opencage."""

from .api import build_assistant_prompt, register_prompts

__all__ = ["build_assistant_prompt", "register_prompts"]
