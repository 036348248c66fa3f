"""GPX loading tools: load_gpx, load_gpx_text, describe_paths."""

import json
import logging
import xml.etree.ElementTree as ET

from gpxpy.gpx import GPXException
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from ..state import state, path_summary
from ..core.gpx import parse_gpx, parse_gpx_file
from ..models import GpxDocument
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _store(document: GpxDocument, source: str) -> str:
    state.document = document
    state.source = source
    logger.info("Loaded GPX from %s", source)

    track_m = sum(t.distance.total for t in document.tracks)
    route_m = sum(r.distance.total for r in document.routes)
    return (
        f"GPX loaded: {len(document.tracks)} track(s) ({track_m / 1000:.2f} km), "
        f"{len(document.routes)} route(s) ({route_m / 1000:.2f} km), "
        f"{len(document.waypoints)} waypoint(s)."
    )


def register_gpx_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_gpx(file_path: str) -> str:
        """Load a GPX file and compute distance, elevation and slope statistics.

        Replaces any previously loaded document.
        **Next:** describe_paths, get_geojson or export_geojson.

        Args:
            file_path: Absolute path to a .gpx file.
        """
        try:
            document = parse_gpx_file(file_path)
        except OSError as e:
            return f"Error: Cannot read {file_path}: {e}"
        except ET.ParseError as e:
            return f"Error: Malformed XML in {file_path}: {e}"
        except (GPXException, ValueError) as e:
            return f"Error: {file_path}: {e}"
        return _store(document, file_path)

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def load_gpx_text(gpx: str) -> str:
        """Load a GPX document passed as text.

        **Next:** describe_paths, get_geojson or export_geojson.

        Args:
            gpx: Complete GPX XML document.
        """
        try:
            document = parse_gpx(gpx)
        except ET.ParseError as e:
            return f"Error: Malformed XML: {e}"
        except (GPXException, ValueError) as e:
            return f"Error: {e}"
        return _store(document, "<text>")

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def describe_paths() -> str:
        """Return distance, elevation and slope statistics for every track and route.

        **Requires:** load_gpx or load_gpx_text first.
        """
        try:
            require_state(state, document=True)
        except ValueError as e:
            return f"Error: {e}"

        doc = state.document
        return json.dumps({
            "tracks": [path_summary(t) for t in doc.tracks],
            "routes": [path_summary(r) for r in doc.routes],
        }, indent=2)
