"""Concatenate several GPX documents into a single track."""

import logging
from typing import Sequence

from merge_my_gpx.errors import EmptyInput
from merge_my_gpx.models import GpxDocument, GpxSegment, GpxTrack

logger = logging.getLogger(__name__)

MERGED_NAME = "merged"


def merge(documents: Sequence[GpxDocument], name: str = MERGED_NAME) -> GpxDocument:
    """Merge documents into one document holding one track with one segment.

    Points are concatenated in the order given: document, then track, then
    segment, then point. Nothing is deduplicated or reordered, so a gap
    between the end of one file and the start of the next stays in the output.

    Raises:
        EmptyInput: if no documents are given or none of them holds a point.
    """
    if not documents:
        raise EmptyInput("No GPX documents to merge")

    points = [point for document in documents for point in document.points()]
    if not points:
        raise EmptyInput(f"None of the {len(documents)} GPX document(s) contains track points")

    logger.debug("Merged %d points from %d document(s)", len(points), len(documents))

    # Point extensions refer to the namespace prefixes of their source file
    namespaces: dict[str, str] = {}
    for document in documents:
        namespaces.update(document.namespaces)

    track = GpxTrack(name=name, segments=[GpxSegment(points=points)])
    return GpxDocument(name=name, namespaces=namespaces, tracks=[track])
