"""Session state for the gpx-parser MCP server.

Holds the currently loaded GPX document and export settings.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gpx_parser.models import BaseRoute, GpxDocument


class ExportParams(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    indent: int = Field(default=2, ge=0, le=8)


def path_summary(path: BaseRoute) -> dict:
    """Statistics for one route or track, JSON-safe."""
    finite_slopes = [s for s in path.slopes if math.isfinite(s)]
    return {
        "name": path.name,
        "points": len(path.points),
        "distance_m": path.distance.total,
        "elevation": path.elevation.model_dump(),
        "max_slope": max(finite_slopes) if finite_slopes else None,
        "min_slope": min(finite_slopes) if finite_slopes else None,
    }


class SessionState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    document: Optional[GpxDocument] = None
    source: Optional[str] = None
    export_params: ExportParams = Field(default_factory=ExportParams)

    @property
    def is_loaded(self) -> bool:
        return self.document is not None

    def summary(self) -> dict:
        if self.document is None:
            return {
                "loaded": False,
                "export": {"indent": self.export_params.indent},
            }
        doc = self.document
        return {
            "loaded": True,
            "source": self.source,
            "metadata": {"name": doc.metadata.name, "desc": doc.metadata.desc},
            "counts": {
                "waypoints": len(doc.waypoints),
                "routes": len(doc.routes),
                "tracks": len(doc.tracks),
            },
            "tracks": [path_summary(t) for t in doc.tracks],
            "routes": [path_summary(r) for r in doc.routes],
            "export": {"indent": self.export_params.indent},
        }


# Global session state, one per MCP server process
state = SessionState()
