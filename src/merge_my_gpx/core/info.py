"""Summary statistics for GPX documents."""

from datetime import datetime, timezone
from typing import Iterable, Optional, Sequence

from merge_my_gpx.core.geo import segment_distance, segment_elevation_change
from merge_my_gpx.core.models import DocumentStatistics, TimeSpan, TrackStatistics
from merge_my_gpx.models import GpxDocument, GpxPoint, GpxRoute, GpxTrack


def _as_utc(time: datetime) -> datetime:
    """Read timestamps without a zone as UTC so they compare with aware ones."""
    if time.tzinfo is None:
        return time.replace(tzinfo=timezone.utc)
    return time


def _time_span(points: Iterable[GpxPoint]) -> Optional[TimeSpan]:
    times = [_as_utc(point.time) for point in points if point.time is not None]
    if not times:
        return None
    return TimeSpan(start=min(times), end=max(times))


def _merge_spans(spans: Iterable[Optional[TimeSpan]]) -> Optional[TimeSpan]:
    present = [span for span in spans if span is not None]
    if not present:
        return None
    return TimeSpan(
        start=min(_as_utc(span.start) for span in present),
        end=max(_as_utc(span.end) for span in present),
    )


def track_statistics(track: GpxTrack) -> TrackStatistics:
    """Compute point count, distance, gain/loss and time span for one track.

    Distance and elevation change only accumulate between consecutive points
    of the same segment; nothing is counted across a segment boundary.
    """
    distance_m = 0.0
    gain_m = 0.0
    loss_m = 0.0
    for segment in track.segments:
        distance_m += segment_distance(segment.points)
        gain, loss = segment_elevation_change(segment.points)
        gain_m += gain
        loss_m += loss

    return TrackStatistics(
        name=track.name,
        comment=track.comment,
        description=track.description,
        type=track.type,
        number=track.number,
        segment_point_counts=[len(segment) for segment in track.segments],
        point_count=track.point_count(),
        distance_m=distance_m,
        elevation_gain_m=gain_m,
        elevation_loss_m=loss_m,
        time_span=_time_span(track.points()),
    )


def route_statistics(route: GpxRoute) -> TrackStatistics:
    """Statistics for a route, treated as a single segment."""
    gain, loss = segment_elevation_change(route.points)
    return TrackStatistics(
        name=route.name,
        comment=route.comment,
        description=route.description,
        type=route.type,
        number=route.number,
        segment_point_counts=[len(route.points)],
        point_count=len(route.points),
        distance_m=segment_distance(route.points),
        elevation_gain_m=gain,
        elevation_loss_m=loss,
        time_span=_time_span(route.points),
    )


def document_statistics(document: GpxDocument) -> DocumentStatistics:
    """Compute per-track statistics and their document-level totals.

    Routes get their own statistics but do not count towards the totals.
    """
    tracks = [track_statistics(track) for track in document.tracks]
    routes = [route_statistics(route) for route in document.routes]
    author = (document.author.name or document.author.email) if document.author else None
    copyright = None
    if document.copyright:
        copyright = " ".join(
            part for part in (document.copyright.author, document.copyright.year,
                              document.copyright.license) if part
        )
    return DocumentStatistics(
        version=document.version,
        name=document.name or "",
        description=document.description,
        creator=document.creator,
        time=document.time,
        author=author,
        keywords=document.keywords,
        link=document.link.href if document.link else None,
        copyright=copyright,
        waypoint_count=len(document.waypoints),
        route_count=len(routes),
        routes=routes,
        tracks=tracks,
        segment_point_counts=[count for t in tracks for count in t.segment_point_counts],
        point_count=sum(t.point_count for t in tracks),
        distance_m=sum(t.distance_m for t in tracks),
        elevation_gain_m=sum(t.elevation_gain_m for t in tracks),
        elevation_loss_m=sum(t.elevation_loss_m for t in tracks),
        time_span=_merge_spans(t.time_span for t in tracks),
    )


def info(documents: Sequence[GpxDocument]) -> list[DocumentStatistics]:
    """Return statistics for each document, in input order."""
    return [document_statistics(document) for document in documents]
