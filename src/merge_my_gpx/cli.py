"""Command-line entry point: merge, invert, decimate and inspect GPX files."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from merge_my_gpx import __version__
from merge_my_gpx.commands import (
    decimate_files,
    info_files,
    invert_all,
    invert_files,
    merge_all,
    merge_files,
)
from merge_my_gpx.config import get_settings
from merge_my_gpx.core.models import DocumentStatistics, TrackStatistics
from merge_my_gpx.errors import MergeMyGpxError
from merge_my_gpx.models import DecimationPolicy

logger = logging.getLogger(__name__)

HELP_FOR_FILES_ARG = "A list of paths to your GPX files (separated with spaces)."
HELP_FOR_DIRECTORY_ARG = "The path of the directory where your GPX files are."


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr at the configured level, or DEBUG when verbose."""
    level_name = "DEBUG" if verbose else get_settings().log_level.upper()
    level = getattr(logging, level_name, logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(handler)


def _format_distance(meters: float) -> str:
    if meters >= 1000:
        return f"{meters / 1000:.2f} km"
    return f"{meters:.0f} m"


def _print_totals(stats: TrackStatistics) -> None:
    print(f"Points = {stats.point_count}")
    print(f"Distance = {_format_distance(stats.distance_m)}")
    print(f"Elevation gain = {stats.elevation_gain_m:.0f} m")
    print(f"Elevation loss = {stats.elevation_loss_m:.0f} m")
    if stats.time_span:
        print(f"Start = {stats.time_span.start.isoformat()}")
        print(f"End = {stats.time_span.end.isoformat()}")
        print(f"Duration = {stats.duration}")
    else:
        print("Time span = unavailable")


def _print_track_header(track: TrackStatistics) -> None:
    if track.name:
        print(f"Name = {track.name}")
    if track.number is not None:
        print(f"Number = {track.number}")
    if track.type:
        print(f"Type = {track.type}")
    if track.comment:
        print(f"Comment = {track.comment}")
    if track.description:
        print(f"Description = {track.description}")


def print_statistics(path: Path, stats: DocumentStatistics) -> None:
    print("******************************************")
    print(f"Info about {path}")
    if stats.version:
        print(f"GPX version = {stats.version}")
    if stats.creator:
        print(f"Creator = {stats.creator}")

    print("-- Metadata ------------------------------")
    if stats.name:
        print(f"Name = {stats.name}")
    if stats.description:
        print(f"Description = {stats.description}")
    if stats.author:
        print(f"Author = {stats.author}")
    if stats.copyright:
        print(f"Copyright = {stats.copyright}")
    if stats.link:
        print(f"Link = {stats.link}")
    if stats.keywords:
        print(f"Keywords = {stats.keywords}")
    if stats.time:
        print(f"Time = {stats.time.isoformat()}")
    print(f"Waypoints = {stats.waypoint_count}")
    print(f"Routes = {stats.route_count}")

    for i, route in enumerate(stats.routes):
        print(f"---- Route #{i}  ----------------------------")
        _print_track_header(route)
        _print_totals(route)

    print("-- Tracks --------------------------------")
    for i, track in enumerate(stats.tracks):
        print(f"---- Track #{i}  ----------------------------")
        _print_track_header(track)
        for j, count in enumerate(track.segment_point_counts):
            print(f"Segment #{j} = {count} points")
        _print_totals(track)

    print("-- Total ---------------------------------")
    _print_totals(stats)
    print("******************************************")


def _run_merge(args: argparse.Namespace) -> None:
    output = args.output if args.output else Path.cwd() / "merged.gpx"
    merge_files(args.files, output)


def _run_merge_all(args: argparse.Namespace) -> None:
    merge_all(args.directory)


def _run_invert(args: argparse.Namespace) -> None:
    invert_files(args.files)


def _run_invert_all(args: argparse.Namespace) -> None:
    invert_all(args.directory)


def _run_decimate(args: argparse.Namespace) -> None:
    policy = DecimationPolicy(factor=args.factor, target_max_points=args.max_points)
    decimate_files(args.files, policy)


def _run_info(args: argparse.Namespace) -> None:
    for path, stats in info_files(args.files):
        print_statistics(path, stats)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="merge-my-gpx",
        description="MMG - A tool to merge GPX files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    merge_parser = subparsers.add_parser(
        "merge",
        help="Merge all tracks from all given files into a file with a single track.",
        description=(
            "Merge all tracks from all given files into a file with a single track. "
            "Files are merged by order of appearance on the command-line. "
            "The output file `merged.gpx` is created in the current directory."
        ),
    )
    merge_parser.add_argument("files", nargs="+", type=Path, help=HELP_FOR_FILES_ARG)
    merge_parser.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Where to write the merged file (default: ./merged.gpx).",
    )
    merge_parser.set_defaults(func=_run_merge)

    merge_all_parser = subparsers.add_parser(
        "merge-all",
        help='Same as the "merge" command with all the files in the given directory.',
        description=(
            "Merge all GPX files of a directory, by alphabetical order of their names. "
            "The output file `merged.gpx` is created in the directory."
        ),
    )
    merge_all_parser.add_argument("directory", type=Path, help=HELP_FOR_DIRECTORY_ARG)
    merge_all_parser.set_defaults(func=_run_merge_all)

    invert_parser = subparsers.add_parser(
        "invert",
        help="Invert each track of each given file.",
        description=(
            "Invert each track of each given file. An output file is created per input file. "
            "Tracks and segments are not merged, just inverted one by one."
        ),
    )
    invert_parser.add_argument("files", nargs="+", type=Path, help=HELP_FOR_FILES_ARG)
    invert_parser.set_defaults(func=_run_invert)

    invert_all_parser = subparsers.add_parser(
        "invert-all",
        help='Same as the "invert" command with all the files in the given directory.',
    )
    invert_all_parser.add_argument("directory", type=Path, help=HELP_FOR_DIRECTORY_ARG)
    invert_all_parser.set_defaults(func=_run_invert_all)

    decimate_parser = subparsers.add_parser(
        "decimate",
        help="Reduce the number of points of each segment of each given file.",
        description=(
            "Decimate the points of each segment of each track of each given file, "
            "to reduce their size. Platforms such as Komoot refuse files with too many "
            "points; use this command until the import goes through."
        ),
    )
    decimate_parser.add_argument("files", nargs="+", type=Path, help=HELP_FOR_FILES_ARG)
    strategy = decimate_parser.add_mutually_exclusive_group(required=True)
    strategy.add_argument(
        "-f", "--factor", type=int, default=None,
        help="Decimate by a factor M; that is, keep only every M-th point.",
    )
    strategy.add_argument(
        "-m", "--max-points", type=int, default=None,
        help="Keep at most this many points in each segment.",
    )
    decimate_parser.set_defaults(func=_run_decimate)

    info_parser = subparsers.add_parser(
        "info", help="Print information about one or more GPX files.",
    )
    info_parser.add_argument("files", nargs="+", type=Path, help=HELP_FOR_FILES_ARG)
    info_parser.set_defaults(func=_run_info)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        args.func(args)
    except (MergeMyGpxError, OSError) as e:
        if args.verbose:
            logger.exception("Command %s failed", args.command)
        print(f"*** Error: {e} ***", file=sys.stderr)
        return 1

    print("*** OK ***")
    return 0


if __name__ == "__main__":
    sys.exit(main())
