"""Info tool: gpx_info."""

import json

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..commands import info_files
from ..errors import MergeMyGpxError


def register_info_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def gpx_info(files: list[str]) -> str:
        """Return statistics for each GPX file as JSON.

        Per track and per file: point count, distance (m), elevation gain and
        loss (m), and the first/last timestamp when the file has times.

        Args:
            files: Absolute paths to .gpx files.
        """
        try:
            results = info_files(files)
        except MergeMyGpxError as e:
            return f"Error: {e}"
        return json.dumps(
            [{"file": str(path), **stats.model_dump(mode="json")} for path, stats in results],
            indent=2,
        )
