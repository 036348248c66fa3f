"""GPX parsing with distance, elevation and slope statistics, and GeoJSON export."""

__version__ = "1.0.0"

from .core.gpx import GPXParser, parse_gpx, parse_gpx_file, parse_tree
from .core.geojson import to_geojson
from .models import GpxDocument, Metadata, Point, Route, Track

__all__ = [
    "GPXParser",
    "GpxDocument",
    "Metadata",
    "Point",
    "Route",
    "Track",
    "parse_gpx",
    "parse_gpx_file",
    "parse_tree",
    "to_geojson",
]
