"""MCP server for merge-my-gpx.

Registers all tools and runs via stdio transport.
"""

from mcp.server.fastmcp import FastMCP

from .tools.transform import register_transform_tools
from .tools.info import register_info_tools

mcp = FastMCP(
    "merge-my-gpx",
    instructions="Merge, invert, decimate and inspect GPX track files",
)

# Register all tool groups
register_transform_tools(mcp)
register_info_tools(mcp)


def main():
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
