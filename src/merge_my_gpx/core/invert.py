"""Reverse the direction of travel of every segment."""

from merge_my_gpx.models import GpxDocument, GpxSegment


def invert(document: GpxDocument) -> GpxDocument:
    """Return a copy of the document with the points of each segment reversed.

    Track and segment order are kept. Timestamps stay attached to their
    points, so an inverted track runs backwards in time.
    """
    tracks = [
        track.model_copy(update={
            "segments": [GpxSegment(points=segment.points[::-1]) for segment in track.segments],
        })
        for track in document.tracks
    ]
    return document.model_copy(update={
        "tracks": tracks,
        "waypoints": list(document.waypoints),
        "routes": list(document.routes),
    })
