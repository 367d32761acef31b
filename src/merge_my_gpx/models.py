"""Pydantic models for the in-memory GPX document."""

from datetime import datetime
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field


class GpxPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
    elevation: Optional[float] = None
    time: Optional[datetime] = None
    # Parsed <extensions> children (heart rate, cadence, ...), kept opaque
    extensions: tuple[Any, ...] = ()


class GpxWaypoint(GpxPoint):
    name: str = ""


class GpxLink(BaseModel):
    href: str
    text: Optional[str] = None
    type: Optional[str] = None


class GpxAuthor(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    link: Optional[GpxLink] = None


class GpxCopyright(BaseModel):
    author: Optional[str] = None
    year: Optional[str] = None
    license: Optional[str] = None


class GpxSegment(BaseModel):
    points: list[GpxPoint] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)


class GpxTrack(BaseModel):
    name: str = ""
    comment: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    number: Optional[int] = None
    extensions: list[Any] = Field(default_factory=list)
    segments: list[GpxSegment] = Field(default_factory=list)

    def points(self) -> Iterator[GpxPoint]:
        """Yield every point of the track in segment order."""
        for segment in self.segments:
            yield from segment.points

    def point_count(self) -> int:
        return sum(len(segment) for segment in self.segments)


class GpxRoute(BaseModel):
    """A planned route; transforms carry routes through without touching them."""
    name: str = ""
    comment: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    number: Optional[int] = None
    extensions: list[Any] = Field(default_factory=list)
    points: list[GpxPoint] = Field(default_factory=list)


class GpxDocument(BaseModel):
    """A parsed GPX file: metadata, waypoints, routes and an ordered list of tracks."""

    version: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    time: Optional[datetime] = None
    creator: Optional[str] = None
    author: Optional[GpxAuthor] = None
    copyright: Optional[GpxCopyright] = None
    link: Optional[GpxLink] = None
    keywords: Optional[str] = None
    metadata_extensions: list[Any] = Field(default_factory=list)
    extensions: list[Any] = Field(default_factory=list)
    # Namespace prefixes declared by the source file, needed to write extensions back
    namespaces: dict[str, str] = Field(default_factory=dict)
    schema_locations: list[str] = Field(default_factory=list)
    waypoints: list[GpxWaypoint] = Field(default_factory=list)
    routes: list[GpxRoute] = Field(default_factory=list)
    tracks: list[GpxTrack] = Field(default_factory=list)

    def points(self) -> Iterator[GpxPoint]:
        """Yield every track point in track, segment, point order."""
        for track in self.tracks:
            yield from track.points()

    def point_count(self) -> int:
        return sum(track.point_count() for track in self.tracks)


class DecimationPolicy(BaseModel):
    """How many points to keep per segment.

    Set ``factor`` to keep every Nth point, or ``target_max_points`` to cap
    every segment at that many points. Ranges are checked by ``decimate``.
    """
    model_config = ConfigDict(frozen=True)

    factor: Optional[int] = None
    target_max_points: Optional[int] = None
