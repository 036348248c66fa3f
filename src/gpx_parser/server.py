"""MCP server for gpx-parser.

Registers all tools and runs via stdio transport.
"""

import json

from mcp.server.fastmcp import FastMCP

from .state import state
from .tools.gpx import register_gpx_tools
from .tools.export import register_export_tools
from .tools.status import register_status_tools

mcp = FastMCP(
    "gpx-parser",
    instructions="Parse GPX files into waypoints, routes and tracks with distance, elevation and slope statistics, and export them as GeoJSON",
)

# Register all tool groups
register_gpx_tools(mcp)
register_export_tools(mcp)
register_status_tools(mcp)


@mcp.resource("state://session")
def session_state() -> str:
    """Current session summary as JSON."""
    return json.dumps(state.summary(), indent=2)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
