"""Field extraction helpers on top of the XML tree."""

import math
import re
from datetime import datetime
from typing import Optional

from gpxpy.gpxfield import parse_time as _parse_gpx_time

from .tree import XmlNode

# Longest numeric prefix, after leading whitespace.
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def read_scalar(node: XmlNode, tag: str) -> Optional[str]:
    """Text of the first descendant named ``tag``, or None if there is none."""
    elem = node.find(tag)
    if elem is None:
        return None
    return elem.text()


def read_direct_child(node: XmlNode, tag: str) -> Optional[XmlNode]:
    """Find ``tag`` under ``node``, preferring a direct child on collisions.

    A ``type`` element can sit both on a route/track and inside its nested
    ``link``. When several descendants match, the last direct child with that
    tag wins; with no direct match the first descendant is kept.
    """
    matches = node.find_all(tag)
    if not matches:
        return None
    found = matches[0]
    if len(matches) > 1:
        for child in node.children():
            if child.tag == tag:
                found = child
    return found


def parse_float(text: Optional[str]) -> float:
    """Parse the leading number of ``text``; NaN when there is none.

    >>> parse_float(" 12.5m")
    12.5
    """
    if text is None:
        return math.nan
    m = _FLOAT_PREFIX.match(text)
    if not m:
        return math.nan
    return float(m.group(1))


def parse_elevation(text: Optional[str]) -> Optional[float]:
    """Elevation from element text; missing text counts as ``"0"``."""
    value = parse_float(text or "0")
    return None if math.isnan(value) else value


def parse_time(text: Optional[str]) -> Optional[datetime]:
    """Timestamp from element text.

    Raises ``gpxpy.gpx.GPXException`` when the text is not a timestamp.
    """
    if not text:
        return None
    return _parse_gpx_time(text.strip())
