"""Export tools: get_geojson, export_geojson, set_export_params."""

import logging
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations
from pydantic import ValidationError

from ..state import state, ExportParams
from ..core.geojson import to_geojson
from ._prereqs import require_state

logger = logging.getLogger(__name__)


def _validate_output_path(output_path: str) -> None:
    """Raise ValueError if output_path resolves outside the user's home directory."""
    resolved = Path(output_path).resolve()
    home = Path.home().resolve()
    try:
        resolved.relative_to(home)
    except ValueError:
        raise ValueError(
            f"Output path {output_path!r} is outside the home directory. "
            "Use a path within your home directory."
        )


def _geojson_text() -> str:
    indent = state.export_params.indent or None
    return to_geojson(state.document).model_dump_json(indent=indent)


def register_export_tools(mcp: FastMCP):

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))
    def get_geojson() -> str:
        """Return the loaded document as a GeoJSON FeatureCollection.

        Tracks come first, then routes (LineStrings), then waypoints (Points).
        Document metadata is carried in the top-level ``properties``.
        **Requires:** load_gpx or load_gpx_text first.
        """
        try:
            require_state(state, document=True)
        except ValueError as e:
            return f"Error: {e}"
        return _geojson_text()

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=True))
    def export_geojson(output_path: str) -> str:
        """Write the loaded document as a GeoJSON file.

        **Requires:** load_gpx or load_gpx_text first.

        Args:
            output_path: Destination file path (within your home directory).
        """
        try:
            require_state(state, document=True)
            _validate_output_path(output_path)
        except ValueError as e:
            return f"Error: {e}"

        path = Path(output_path)
        text = _geojson_text()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            return f"Error: Cannot write {output_path}: {e}"

        logger.info("GeoJSON written to %s", path)
        return f"GeoJSON exported to {path} ({len(text)} bytes)"

    @mcp.tool(annotations=ToolAnnotations(readOnlyHint=False, destructiveHint=False))
    def set_export_params(indent: int = 2) -> str:
        """Set JSON formatting for get_geojson and export_geojson.

        Args:
            indent: Spaces per indentation level (0 = compact, max 8).
        """
        try:
            state.export_params = ExportParams(indent=indent)
        except ValidationError as e:
            return f"Error: Invalid export parameters: {e.errors()[0]['msg']}"
        return f"Export params set: indent={state.export_params.indent}"
