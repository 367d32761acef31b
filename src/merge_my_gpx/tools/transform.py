"""Transform tools: merge_gpx, merge_gpx_directory, invert_gpx, invert_gpx_directory, decimate_gpx."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..commands import decimate_files, invert_all, invert_files, merge_all, merge_files
from ..errors import MergeMyGpxError
from ..files import Action
from ..models import DecimationPolicy


def _written(paths: list[Path]) -> str:
    return ", ".join(str(p) for p in paths)


def register_transform_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def merge_gpx(files: list[str], output_path: str | None = None) -> str:
        """Merge all tracks of the given GPX files into one file with a single track.

        Files are joined in the order given: the end of one file connects to
        the start of the next. Reverse a file with invert_gpx first if needed.

        Args:
            files: Absolute paths to .gpx files, in join order.
            output_path: Where to write the result. Default: merged.gpx next
                to the first input file.
        """
        if not files:
            return "Error: Provide at least one GPX file."
        out = Path(output_path) if output_path else Path(files[0]).parent / f"{Action.MERGE.value}.gpx"
        try:
            written = merge_files(files, out)
        except MergeMyGpxError as e:
            return f"Error: {e}"
        return f"Merged {len(files)} file(s) into {written}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def merge_gpx_directory(directory: str) -> str:
        """Merge every GPX file of a directory, sorted by name, into <directory>/merged.gpx.

        Args:
            directory: Absolute path of the directory holding the .gpx files.
        """
        try:
            written = merge_all(directory)
        except MergeMyGpxError as e:
            return f"Error: {e}"
        if written is None:
            return f"No GPX files found in '{directory}'"
        return f"Merged directory into {written}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def invert_gpx(files: list[str]) -> str:
        """Reverse the direction of every track of each file.

        Writes <name>-inverted.gpx next to each input. Timestamps are kept on
        their points, so the inverted tracks run backwards in time.

        Args:
            files: Absolute paths to .gpx files.
        """
        try:
            written = invert_files(files)
        except MergeMyGpxError as e:
            return f"Error: {e}"
        return f"Inverted {len(written)} file(s): {_written(written)}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def invert_gpx_directory(directory: str) -> str:
        """Invert every GPX file of a directory (files already named *-inverted.gpx are skipped).

        Args:
            directory: Absolute path of the directory holding the .gpx files.
        """
        try:
            written = invert_all(directory)
        except MergeMyGpxError as e:
            return f"Error: {e}"
        if not written:
            return f"No GPX files found in '{directory}'"
        return f"Inverted {len(written)} file(s): {_written(written)}"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def decimate_gpx(
        files: list[str],
        factor: int | None = None,
        target_max_points: int | None = None,
    ) -> str:
        """Reduce the number of points of each segment, keeping its first and last point.

        Use this when a platform such as Komoot rejects a file for having too
        many points. Give either factor or target_max_points.
        Writes <name>-decimated.gpx next to each input.

        Args:
            files: Absolute paths to .gpx files.
            factor: Keep every Nth point (N >= 2).
            target_max_points: Keep at most this many points per segment (>= 2).
        """
        policy = DecimationPolicy(factor=factor, target_max_points=target_max_points)
        try:
            written = decimate_files(files, policy)
        except MergeMyGpxError as e:
            return f"Error: {e}"
        return f"Decimated {len(written)} file(s): {_written(written)}"
