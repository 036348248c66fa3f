"""Pydantic return models for the GeoJSON projection."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, field_validator

from gpx_parser.models import Link, Metadata


class LineStringGeometry(BaseModel):
    type: Literal["LineString"] = "LineString"
    coordinates: list[list[float]]

    @field_validator("coordinates")
    @classmethod
    def positions_must_be_3d(cls, v: list[list[float]]) -> list[list[float]]:
        for i, position in enumerate(v):
            if len(position) != 3:
                raise ValueError(f"Position {i} must have exactly 3 components, got {len(position)}")
        return v


class PointGeometry(BaseModel):
    type: Literal["Point"] = "Point"
    coordinates: list[float]

    @field_validator("coordinates")
    @classmethod
    def position_must_be_3d(cls, v: list[float]) -> list[float]:
        if len(v) != 3:
            raise ValueError(f"Position must have exactly 3 components, got {len(v)}")
        return v


class PathProperties(BaseModel):
    name: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None
    src: Optional[str] = None
    number: Optional[str] = None
    link: Link
    type: Optional[str] = None


class WaypointProperties(BaseModel):
    name: Optional[str] = None
    sym: Optional[str] = None
    cmt: Optional[str] = None
    desc: Optional[str] = None


class LineStringFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: LineStringGeometry
    properties: PathProperties


class PointFeature(BaseModel):
    type: Literal["Feature"] = "Feature"
    geometry: PointGeometry
    properties: WaypointProperties


class FeatureCollection(BaseModel):
    """GeoJSON FeatureCollection with document metadata as ``properties``."""
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[Union[LineStringFeature, PointFeature]] = []
    properties: Metadata
