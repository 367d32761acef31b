"""Point-count reduction by uniform stride."""

import logging
import math

from merge_my_gpx.errors import InvalidPolicy
from merge_my_gpx.models import DecimationPolicy, GpxDocument, GpxPoint, GpxSegment

logger = logging.getLogger(__name__)


def _check_policy(policy: DecimationPolicy) -> None:
    if (policy.factor is None) == (policy.target_max_points is None):
        raise InvalidPolicy("Set exactly one of factor or target_max_points")
    if policy.factor is not None and policy.factor < 2:
        raise InvalidPolicy(f"Decimation factor must be at least 2, got {policy.factor}")
    if policy.target_max_points is not None and policy.target_max_points < 2:
        raise InvalidPolicy(
            f"target_max_points must be at least 2, got {policy.target_max_points}"
        )


def _stride(length: int, policy: DecimationPolicy) -> int:
    if policy.factor is not None:
        return policy.factor
    if length <= policy.target_max_points:
        return 1
    # ceil((L-1)/(T-1)) keeps the stride points plus the forced last one within T
    return math.ceil((length - 1) / (policy.target_max_points - 1))


def decimate_points(points: list[GpxPoint], stride: int) -> list[GpxPoint]:
    """Keep every ``stride``-th point, always including the first and last."""
    if len(points) <= 2 or stride <= 1:
        return list(points)
    kept = points[::stride]
    if (len(points) - 1) % stride:
        kept.append(points[-1])
    return kept


def decimate(document: GpxDocument, policy: DecimationPolicy) -> GpxDocument:
    """Return a copy of the document with fewer points in each segment.

    Every segment is decimated on its own; the number of tracks and segments
    does not change. The first and last point of each segment are always kept.

    Raises:
        InvalidPolicy: if the policy does not set exactly one strategy, or
            sets a factor or target below 2.
    """
    _check_policy(policy)

    tracks = []
    for track in document.tracks:
        segments = [
            GpxSegment(points=decimate_points(segment.points, _stride(len(segment), policy)))
            for segment in track.segments
        ]
        tracks.append(track.model_copy(update={"segments": segments}))

    result = document.model_copy(update={
        "tracks": tracks,
        "waypoints": list(document.waypoints),
        "routes": list(document.routes),
    })
    logger.debug(
        "Decimated %d points down to %d", document.point_count(), result.point_count()
    )
    return result
