"""Input path checks, GPX file discovery and output file naming."""

import enum
import logging
from pathlib import Path
from typing import Iterable, Sequence

from merge_my_gpx.errors import InputFileError

logger = logging.getLogger(__name__)

GPX_SUFFIX = ".gpx"


class Action(str, enum.Enum):
    """Operations that write a file, valued by the label used in output names."""
    MERGE = "merged"
    INVERT = "inverted"
    DECIMATE = "decimated"


def check_directory(directory: str | Path) -> Path:
    """Raise InputFileError unless ``directory`` is an existing directory."""
    path = Path(directory)
    if not path.is_dir():
        raise InputFileError(f"'{path}' does not exist or is not a directory")
    return path


def check_files(files: Sequence[str | Path]) -> list[Path]:
    """Raise InputFileError unless every path is an existing, distinct .gpx file."""
    paths = [Path(f) for f in files]

    if len(paths) == 1 and paths[0].is_dir():
        raise InputFileError(
            "A list of files is expected but you have passed a single directory"
        )

    for path in paths:
        if not path.is_file():
            raise InputFileError(f"'{path}' does not exist or is a directory")
        if path.suffix != GPX_SUFFIX:
            raise InputFileError(
                f"'{path}' does not appear to be a GPX file (since its extension is not '{GPX_SUFFIX}')"
            )

    if len({str(path) for path in paths}) != len(paths):
        raise InputFileError("There are duplicated files in the list")

    return paths


def list_gpx_files(directory: str | Path, exclude: Iterable[str] = ()) -> list[Path]:
    """List the .gpx files of a directory sorted by name, skipping names in ``exclude``."""
    path = check_directory(directory)
    skipped = set(exclude)

    files = []
    for entry in sorted(path.iterdir()):
        if entry.suffix != GPX_SUFFIX or not entry.is_file():
            continue
        if entry.name in skipped:
            logger.info("Skipping '%s' (output of a previous run)", entry)
            continue
        files.append(entry)
    return files


def output_path(path: str | Path, action: Action) -> Path:
    """Path of the file written by ``action`` for an input file or directory.

    A directory gets ``<directory>/<action>.gpx``; a file gets a sibling
    named ``<stem>-<action>.gpx``.
    """
    path = Path(path)
    if path.is_dir():
        return path / f"{action.value}{GPX_SUFFIX}"
    return path.with_name(f"{path.stem}-{action.value}{path.suffix}")


def is_output_of(path: str | Path, action: Action) -> bool:
    """True if ``path`` looks like a file written by ``action`` for a single input."""
    return Path(path).stem.endswith(f"-{action.value}")
