"""
Lightweight MCP tool runner for chuk-mcp-opencage.

Runs tools directly without MCP transport — useful for testing and demos.
Requires OPENCAGE_API_KEY in the environment.
"""

from __future__ import annotations

import asyncio
import json
import os
import sys
from typing import Any

from chuk_mcp_opencage.constants import EnvVar
from chuk_mcp_opencage.core.geocoder import Geocoder
from chuk_mcp_opencage.core.opencage import OpenCageClient
from chuk_mcp_opencage.prompts import register_prompts
from chuk_mcp_opencage.tools.discovery import register_discovery_tools
from chuk_mcp_opencage.tools.geocoding import register_geocoding_tools


class _MiniMCP:
    """Minimal MCP-like interface for capturing tool and prompt registrations."""

    def __init__(self):
        self._tools: dict[str, Any] = {}
        self._prompts: dict[str, Any] = {}

    def tool(self, name: str | None = None, **kwargs):
        def decorator(fn):
            self._tools[name or fn.__name__] = fn
            return fn

        return decorator

    def prompt(self, name: str | None = None, **kwargs):
        def decorator(fn):
            self._prompts[name or fn.__name__] = fn
            return fn

        return decorator


class ToolRunner:
    """Run OpenCage MCP tools directly without transport."""

    def __init__(self, api_key: str):
        self._mcp = _MiniMCP()
        self.geocoder = Geocoder(OpenCageClient(api_key=api_key))
        register_geocoding_tools(self._mcp, self.geocoder)
        register_discovery_tools(self._mcp, self.geocoder)
        register_prompts(self._mcp)

    @property
    def tool_names(self) -> list[str]:
        return list(self._mcp._tools.keys())

    async def _call(self, tool_name: str, output_mode: str, **kwargs) -> str:
        result = await self._mcp._tools[tool_name](output_mode=output_mode, **kwargs)
        if isinstance(result, dict):
            # error results carry isError plus one text block
            return result["content"][0]["text"]
        return result

    async def run(self, tool_name: str, **kwargs) -> dict:
        """Run a tool and return parsed JSON result."""
        return json.loads(await self._call(tool_name, "json", **kwargs))

    async def run_text(self, tool_name: str, **kwargs) -> str:
        """Run a tool and return text output."""
        return await self._call(tool_name, "text", **kwargs)

    def prompt(self, name: str, **kwargs) -> str:
        return self._mcp._prompts[name](**kwargs)


async def main():
    """Demo: exercise every tool and the assistant prompt."""
    api_key = os.environ.get(EnvVar.OPENCAGE_API_KEY)
    if not api_key:
        print(f"Set {EnvVar.OPENCAGE_API_KEY} to run the demo", file=sys.stderr)
        sys.exit(1)

    runner = ToolRunner(api_key)
    print(f"Available tools ({len(runner.tool_names)}): {runner.tool_names}\n")

    print("=" * 60)
    print("1. geocode-forward")
    print("=" * 60)
    result = await runner.run("geocode-forward", query="London", limit=2)
    for r in result.get("results", []):
        print(f"  {r['formatted']}")
        print(f"    lat={r['lat']}, lng={r['lng']}, confidence={r['confidence']}")
    print()

    print("=" * 60)
    print("2. geocode-reverse")
    print("=" * 60)
    print(await runner.run_text("geocode-reverse", latitude=51.5034, longitude=-0.1276))
    print()

    print("=" * 60)
    print("3. get-api-status")
    print("=" * 60)
    print(await runner.run_text("get-api-status"))
    print()

    print("=" * 60)
    print("4. geocoder-capabilities")
    print("=" * 60)
    print(await runner.run_text("geocoder-capabilities"))
    print()

    print("=" * 60)
    print("5. geocoding-assistant prompt")
    print("=" * 60)
    print(runner.prompt("geocoding-assistant", task="plan a walking tour of London"))

    await runner.geocoder.close()


if __name__ == "__main__":
    asyncio.run(main())
