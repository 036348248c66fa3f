"""Projection of a parsed GPX document to GeoJSON."""

from typing import Iterable

from gpx_parser.models import BaseRoute, GpxDocument, Point
from .models import (
    FeatureCollection,
    LineStringFeature,
    LineStringGeometry,
    PathProperties,
    PointFeature,
    PointGeometry,
    WaypointProperties,
)


def _position(point: Point) -> list[float]:
    # GeoJSON order, missing elevation as 0
    return [point.lon, point.lat, point.ele or 0]


def _line_feature(path: BaseRoute) -> LineStringFeature:
    return LineStringFeature(
        geometry=LineStringGeometry(coordinates=[_position(pt) for pt in path.points]),
        properties=PathProperties(
            name=path.name,
            cmt=path.cmt,
            desc=path.desc,
            src=path.src,
            number=path.number,
            link=path.link,
            type=path.type,
        ),
    )


def _point_feature(point: Point) -> PointFeature:
    return PointFeature(
        geometry=PointGeometry(coordinates=_position(point)),
        properties=WaypointProperties(
            name=point.name,
            sym=point.sym,
            cmt=point.cmt,
            desc=point.desc,
        ),
    )


def to_geojson(document: GpxDocument) -> FeatureCollection:
    """Project a document: tracks, then routes, then waypoints."""
    paths: Iterable[BaseRoute] = [*document.tracks, *document.routes]
    features: list = [_line_feature(path) for path in paths]
    features.extend(_point_feature(wpt) for wpt in document.waypoints)
    return FeatureCollection(features=features, properties=document.metadata)
