"""Pydantic return models for core computation functions."""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class TimeSpan(BaseModel):
    start: datetime
    end: datetime

    @model_validator(mode="after")
    def end_not_before_start(self) -> "TimeSpan":
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not be before start ({self.start})")
        return self

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


class TrackStatistics(BaseModel):
    """Return type for track_statistics and route_statistics."""
    name: str = ""
    comment: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    number: Optional[int] = None
    segment_point_counts: list[int] = Field(default_factory=list)
    point_count: int = Field(default=0, ge=0)
    distance_m: float = Field(default=0.0, ge=0)
    elevation_gain_m: float = Field(default=0.0, ge=0)
    elevation_loss_m: float = Field(default=0.0, ge=0)
    time_span: Optional[TimeSpan] = None

    @property
    def duration(self) -> Optional[timedelta]:
        return self.time_span.duration if self.time_span else None


class DocumentStatistics(TrackStatistics):
    """Return type for document_statistics: per-track values plus their totals.

    Totals cover tracks only; routes are reported on their own.
    """
    version: Optional[str] = None
    creator: Optional[str] = None
    time: Optional[datetime] = None
    author: Optional[str] = None
    keywords: Optional[str] = None
    link: Optional[str] = None
    copyright: Optional[str] = None
    waypoint_count: int = Field(default=0, ge=0)
    route_count: int = Field(default=0, ge=0)
    routes: list[TrackStatistics] = Field(default_factory=list)
    tracks: list[TrackStatistics] = Field(default_factory=list)
