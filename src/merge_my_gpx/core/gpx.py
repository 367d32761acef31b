"""GPX file parsing and writing."""

import logging
from pathlib import Path
from typing import Optional

import gpxpy
import gpxpy.gpx

from merge_my_gpx.errors import ParseError
from merge_my_gpx.models import (
    GpxAuthor,
    GpxCopyright,
    GpxDocument,
    GpxLink,
    GpxPoint,
    GpxRoute,
    GpxSegment,
    GpxTrack,
    GpxWaypoint,
)

logger = logging.getLogger(__name__)


def _parse_link(href, text, link_type) -> Optional[GpxLink]:
    if not href:
        return None
    return GpxLink(href=href, text=text, type=link_type)


def _parse_point(point) -> GpxPoint:
    return GpxPoint(
        lat=point.latitude,
        lon=point.longitude,
        elevation=point.elevation,
        time=point.time,
        extensions=tuple(point.extensions),
    )


def _parse_metadata(gpx: gpxpy.gpx.GPX) -> dict:
    author = None
    if gpx.author_name or gpx.author_email or gpx.author_link:
        author = GpxAuthor(
            name=gpx.author_name,
            email=gpx.author_email,
            link=_parse_link(gpx.author_link, gpx.author_link_text, gpx.author_link_type),
        )
    copyright = None
    if gpx.copyright_author or gpx.copyright_year or gpx.copyright_license:
        copyright = GpxCopyright(
            author=gpx.copyright_author,
            year=gpx.copyright_year,
            license=gpx.copyright_license,
        )
    return {
        "version": gpx.version,
        "name": gpx.name,
        "description": gpx.description,
        "time": gpx.time,
        "creator": gpx.creator,
        "author": author,
        "copyright": copyright,
        "link": _parse_link(gpx.link, gpx.link_text, gpx.link_type),
        "keywords": gpx.keywords,
        "metadata_extensions": list(gpx.metadata_extensions),
        "extensions": list(gpx.extensions),
        "namespaces": dict(gpx.nsmap),
        "schema_locations": list(gpx.schema_locations),
    }


def parse_gpx(content: bytes) -> GpxDocument:
    """Parse GPX content into a GpxDocument.

    Raises:
        ParseError: if the bytes are not UTF-8 or not valid GPX.
    """
    try:
        gpx = gpxpy.parse(content.decode("utf-8"))
    except (UnicodeDecodeError, gpxpy.gpx.GPXException, ValueError) as e:
        raise ParseError(f"Invalid GPX content: {e}") from e

    tracks = []
    for track in gpx.tracks:
        tracks.append(GpxTrack(
            name=track.name or "",
            comment=track.comment,
            description=track.description,
            type=track.type,
            number=track.number,
            extensions=list(track.extensions),
            segments=[
                GpxSegment(points=[_parse_point(point) for point in segment.points])
                for segment in track.segments
            ],
        ))

    routes = [
        GpxRoute(
            name=route.name or "",
            comment=route.comment,
            description=route.description,
            type=route.type,
            number=route.number,
            extensions=list(route.extensions),
            points=[_parse_point(point) for point in route.points],
        )
        for route in gpx.routes
    ]

    waypoints = [
        GpxWaypoint(
            name=wp.name or "",
            lat=wp.latitude,
            lon=wp.longitude,
            elevation=wp.elevation,
            time=wp.time,
            extensions=tuple(wp.extensions),
        )
        for wp in gpx.waypoints
    ]

    return GpxDocument(
        **_parse_metadata(gpx),
        waypoints=waypoints,
        routes=routes,
        tracks=tracks,
    )


def _write_metadata(gpx: gpxpy.gpx.GPX, document: GpxDocument) -> None:
    gpx.name = document.name
    gpx.description = document.description
    gpx.time = document.time
    gpx.keywords = document.keywords
    if document.author:
        gpx.author_name = document.author.name
        gpx.author_email = document.author.email
        if document.author.link:
            gpx.author_link = document.author.link.href
            gpx.author_link_text = document.author.link.text
            gpx.author_link_type = document.author.link.type
    if document.copyright:
        gpx.copyright_author = document.copyright.author
        gpx.copyright_year = document.copyright.year
        gpx.copyright_license = document.copyright.license
    if document.link:
        gpx.link = document.link.href
        gpx.link_text = document.link.text
        gpx.link_type = document.link.type
    gpx.metadata_extensions = list(document.metadata_extensions)
    gpx.extensions = list(document.extensions)
    gpx.nsmap = dict(document.namespaces)
    # GPX 1.0 schema locations would contradict the 1.1 output
    if document.version != "1.0":
        gpx.schema_locations = list(document.schema_locations)


def serialize_gpx(document: GpxDocument, creator: Optional[str] = None) -> bytes:
    """Write a GpxDocument as GPX 1.1 XML.

    ``creator`` replaces the document's creator when given.
    """
    gpx = gpxpy.gpx.GPX()
    _write_metadata(gpx, document)
    gpx.creator = creator or document.creator

    for wp in document.waypoints:
        gpx_waypoint = gpxpy.gpx.GPXWaypoint(
            latitude=wp.lat,
            longitude=wp.lon,
            elevation=wp.elevation,
            time=wp.time,
            name=wp.name or None,
        )
        gpx_waypoint.extensions = list(wp.extensions)
        gpx.waypoints.append(gpx_waypoint)

    for route in document.routes:
        gpx_route = gpxpy.gpx.GPXRoute(
            name=route.name or None,
            description=route.description,
            number=route.number,
        )
        gpx_route.comment = route.comment
        gpx_route.type = route.type
        gpx_route.extensions = list(route.extensions)
        for point in route.points:
            gpx_point = gpxpy.gpx.GPXRoutePoint(
                latitude=point.lat,
                longitude=point.lon,
                elevation=point.elevation,
                time=point.time,
            )
            gpx_point.extensions = list(point.extensions)
            gpx_route.points.append(gpx_point)
        gpx.routes.append(gpx_route)

    for track in document.tracks:
        gpx_track = gpxpy.gpx.GPXTrack(
            name=track.name or None,
            description=track.description,
            number=track.number,
        )
        gpx_track.comment = track.comment
        gpx_track.type = track.type
        gpx_track.extensions = list(track.extensions)
        for segment in track.segments:
            gpx_segment = gpxpy.gpx.GPXTrackSegment()
            for point in segment.points:
                gpx_point = gpxpy.gpx.GPXTrackPoint(
                    latitude=point.lat,
                    longitude=point.lon,
                    elevation=point.elevation,
                    time=point.time,
                )
                gpx_point.extensions = list(point.extensions)
                gpx_segment.points.append(gpx_point)
            gpx_track.segments.append(gpx_segment)
        gpx.tracks.append(gpx_track)

    return gpx.to_xml(version="1.1").encode("utf-8")


def load_gpx(filepath: str | Path) -> GpxDocument:
    """Read and parse a GPX file."""
    logger.info("Loading GPX from '%s'...", filepath)
    with open(filepath, "rb") as f:
        content = f.read()
    try:
        return parse_gpx(content)
    except ParseError as e:
        raise ParseError(f"Cannot parse '{filepath}': {e}") from e


def save_gpx(document: GpxDocument, filepath: str | Path, creator: Optional[str] = None) -> None:
    """Serialize a GpxDocument and write it to a file."""
    logger.info("Saving GPX to '%s'...", filepath)
    content = serialize_gpx(document, creator=creator)
    with open(filepath, "wb") as f:
        f.write(content)
