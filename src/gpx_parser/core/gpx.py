"""GPX document parsing."""

import logging
from pathlib import Path
from typing import Optional, Union

from gpx_parser.models import BaseRoute, GpxDocument, Metadata, Point, Route, Track
from .fields import read_direct_child, read_scalar
from .geojson import to_geojson
from .geometry import calc_elevation_stats, calc_route_distance, calc_slope
from .metadata import parse_link, parse_metadata
from .models import FeatureCollection
from .points import parse_path_point, parse_waypoint
from .tree import XmlNode, parse_xml

logger = logging.getLogger(__name__)


def _parse_path(node: XmlNode, point_tag: str, cls: type[BaseRoute]) -> BaseRoute:
    """Build a route (``rte``/``rtept``) or track (``trk``/``trkpt``)."""
    type_elem = read_direct_child(node, "type")
    points = [parse_path_point(pt) for pt in node.find_all(point_tag)]
    distance = calc_route_distance(points)
    if len(points) < 2:
        logger.debug("%s %r has %d point(s)", node.tag, read_scalar(node, "name"), len(points))

    return cls(
        name=read_scalar(node, "name"),
        cmt=read_scalar(node, "cmt"),
        desc=read_scalar(node, "desc"),
        src=read_scalar(node, "src"),
        number=read_scalar(node, "number"),
        type=type_elem.text() if type_elem is not None else None,
        link=parse_link(node.find("link")),
        points=points,
        distance=distance,
        elevation=calc_elevation_stats(points),
        slopes=calc_slope(points, distance.cumul),
    )


def parse_tree(root: XmlNode) -> GpxDocument:
    """Extract a GpxDocument from an already-built XML tree."""
    document = GpxDocument(
        metadata=parse_metadata(root.find("metadata")),
        waypoints=[parse_waypoint(wpt) for wpt in root.find_all("wpt")],
        routes=[_parse_path(rte, "rtept", Route) for rte in root.find_all("rte")],
        tracks=[_parse_path(trk, "trkpt", Track) for trk in root.find_all("trk")],
    )
    logger.debug(
        "Parsed GPX: %d waypoint(s), %d route(s), %d track(s)",
        len(document.waypoints), len(document.routes), len(document.tracks),
    )
    return document


def parse_gpx(text: Union[str, bytes]) -> GpxDocument:
    """Parse GPX text or raw bytes into a GpxDocument.

    Raises ``xml.etree.ElementTree.ParseError`` for malformed XML and
    ``gpxpy.gpx.GPXException`` for unparsable timestamps.
    """
    return parse_tree(parse_xml(text))


def parse_gpx_file(filepath: Union[str, Path]) -> GpxDocument:
    """Read and parse a GPX file, honouring its XML encoding declaration."""
    with open(filepath, "rb") as f:
        return parse_gpx(f.read())


class GPXParser:
    """Parsed GPX document with attribute access to its parts.

    Usage:
        gpx = GPXParser(text)
        gpx.tracks[0].distance.total
        gpx.to_geojson().model_dump()
    """

    def __init__(self, gpx_text: Union[str, bytes]):
        self.xml_source = parse_xml(gpx_text)
        self.document = parse_tree(self.xml_source)

    @property
    def metadata(self) -> Metadata:
        return self.document.metadata

    @property
    def waypoints(self) -> tuple[Point, ...]:
        return self.document.waypoints

    @property
    def routes(self) -> tuple[Route, ...]:
        return self.document.routes

    @property
    def tracks(self) -> tuple[Track, ...]:
        return self.document.tracks

    @staticmethod
    def get_element_value(parent: XmlNode, needle: str) -> Optional[str]:
        return read_scalar(parent, needle)

    @staticmethod
    def query_direct_selector(parent: XmlNode, needle: str) -> Optional[XmlNode]:
        return read_direct_child(parent, needle)

    def to_geojson(self) -> FeatureCollection:
        return to_geojson(self.document)
