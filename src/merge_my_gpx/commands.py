"""File-level operations behind each CLI subcommand and MCP tool.

Every operation checks its input paths, loads all documents, runs one
core transform and writes the result next to the input.
"""

import logging
from pathlib import Path
from typing import Sequence

from merge_my_gpx.config import get_settings
from merge_my_gpx.core.decimate import decimate
from merge_my_gpx.core.gpx import load_gpx, save_gpx
from merge_my_gpx.core.info import info
from merge_my_gpx.core.invert import invert
from merge_my_gpx.core.merge import merge
from merge_my_gpx.core.models import DocumentStatistics
from merge_my_gpx.files import (
    Action,
    check_directory,
    check_files,
    is_output_of,
    list_gpx_files,
    output_path,
)
from merge_my_gpx.models import DecimationPolicy

logger = logging.getLogger(__name__)


def merge_files(files: Sequence[str | Path], output_file: str | Path) -> Path:
    """Merge the tracks of all files, in the given order, into one single-track file."""
    paths = check_files(files)
    logger.info("Merging %d files...", len(paths))

    documents = [load_gpx(path) for path in paths]
    merged = merge(documents, name=Action.MERGE.value)

    output_file = Path(output_file)
    save_gpx(merged, output_file, creator=get_settings().creator)
    return output_file


def merge_all(directory: str | Path) -> Path | None:
    """Merge every GPX file of a directory, by file name, into ``<directory>/merged.gpx``.

    A ``merged.gpx`` left by an earlier run is not merged into the new one.
    Returns None when the directory holds no GPX file.
    """
    output_file = output_path(check_directory(directory), Action.MERGE)
    files = list_gpx_files(directory, exclude=[output_file.name])
    if not files:
        logger.info("No GPX files found in '%s'", directory)
        return None
    return merge_files(files, output_file)


def invert_files(files: Sequence[str | Path]) -> list[Path]:
    """Write an inverted copy ``<stem>-inverted.gpx`` of each file."""
    paths = check_files(files)
    documents = [load_gpx(path) for path in paths]

    creator = get_settings().creator
    written = []
    for path, document in zip(paths, documents):
        out = output_path(path, Action.INVERT)
        save_gpx(invert(document), out, creator=creator)
        written.append(out)
    return written


def invert_all(directory: str | Path) -> list[Path]:
    """Invert every GPX file of a directory that is not itself an inverted copy."""
    files = []
    for path in list_gpx_files(directory):
        if is_output_of(path, Action.INVERT):
            logger.info("Skipping '%s' (output of a previous run)", path)
            continue
        files.append(path)

    if not files:
        logger.info("No GPX files found in '%s'", directory)
        return []
    return invert_files(files)


def decimate_files(files: Sequence[str | Path], policy: DecimationPolicy) -> list[Path]:
    """Write a decimated copy ``<stem>-decimated.gpx`` of each file."""
    paths = check_files(files)
    documents = [load_gpx(path) for path in paths]

    creator = get_settings().creator
    written = []
    for path, document in zip(paths, documents):
        decimated = decimate(document, policy)
        logger.info(
            "'%s': %d points -> %d points",
            path, document.point_count(), decimated.point_count(),
        )
        out = output_path(path, Action.DECIMATE)
        save_gpx(decimated, out, creator=creator)
        written.append(out)
    return written


def info_files(files: Sequence[str | Path]) -> list[tuple[Path, DocumentStatistics]]:
    """Return statistics for each file, paired with its path."""
    paths = check_files(files)
    documents = [load_gpx(path) for path in paths]
    return list(zip(paths, info(documents)))
