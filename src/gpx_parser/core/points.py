"""Point extraction for waypoints, route points and track points."""

import math

from gpx_parser.models import Point
from .fields import parse_elevation, parse_float, parse_time, read_scalar
from .tree import XmlNode


def _coordinate(node: XmlNode, name: str) -> float:
    value = parse_float(node.get(name) or "0")
    return 0.0 if math.isnan(value) else value


def parse_waypoint(wpt: XmlNode) -> Point:
    """Build a waypoint.

    Unlike route/track points, a missing or unparsable ``lat``/``lon`` is
    kept as NaN.
    """
    return Point(
        lat=parse_float(wpt.get("lat") or ""),
        lon=parse_float(wpt.get("lon") or ""),
        ele=parse_elevation(read_scalar(wpt, "ele")),
        name=read_scalar(wpt, "name"),
        sym=read_scalar(wpt, "sym"),
        cmt=read_scalar(wpt, "cmt"),
        desc=read_scalar(wpt, "desc"),
        time=parse_time(read_scalar(wpt, "time")),
    )


def parse_path_point(node: XmlNode) -> Point:
    """Build a route or track point; bad coordinates fall back to 0."""
    return Point(
        lat=_coordinate(node, "lat"),
        lon=_coordinate(node, "lon"),
        ele=parse_elevation(read_scalar(node, "ele")),
        time=parse_time(read_scalar(node, "time")),
    )
