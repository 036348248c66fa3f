"""Pydantic domain models for parsed GPX documents."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Point(BaseModel):
    """A waypoint, route point or track point.

    ``name``/``sym``/``cmt``/``desc`` are only populated for waypoints.
    """
    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
    ele: Optional[float] = None
    name: Optional[str] = None
    sym: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None
    time: Optional[datetime] = None


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str = ""
    text: Optional[str] = ""
    type: Optional[str] = ""


class AuthorEmail(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    domain: str = ""


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = ""
    email: AuthorEmail = Field(default_factory=AuthorEmail)
    link: Link = Field(default_factory=Link)


class Metadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = ""
    desc: Optional[str] = ""
    time: Optional[str] = ""
    author: Author = Field(default_factory=Author)
    link: Link = Field(default_factory=Link)


class RouteDistance(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: float = 0.0
    cumul: tuple[float, ...] = ()


class ElevationStats(BaseModel):
    """Elevation summary. Zero values are reported as None."""
    model_config = ConfigDict(frozen=True)

    max: Optional[float] = None
    min: Optional[float] = None
    pos: Optional[float] = None
    neg: Optional[float] = None
    avg: Optional[float] = None


class BaseRoute(BaseModel):
    """Shared shape of routes and tracks."""
    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None
    src: Optional[str] = None
    number: Optional[str] = None
    type: Optional[str] = None
    link: Link = Field(default_factory=Link)
    points: tuple[Point, ...] = ()
    distance: RouteDistance = Field(default_factory=RouteDistance)
    elevation: ElevationStats = Field(default_factory=ElevationStats)
    slopes: tuple[float, ...] = ()


class Route(BaseRoute):
    pass


class Track(BaseRoute):
    pass


class GpxDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    metadata: Metadata = Field(default_factory=Metadata)
    waypoints: tuple[Point, ...] = ()
    routes: tuple[Route, ...] = ()
    tracks: tuple[Track, ...] = ()
