"""GeoJSON emission for intersection results."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from alphaoverlap.geometry.base import Bounds
from alphaoverlap.geometry.intersection import IntersectionResult

LOGGER = logging.getLogger(__name__)

FEATURE_NAME = "Intersection Area"
JSON_INDENT = 4


def empty_feature_collection() -> dict[str, Any]:
    """Return a FeatureCollection without features."""
    return {"type": "FeatureCollection", "features": []}


def envelope_polygon(bounds: Bounds) -> dict[str, Any]:
    """Return a GeoJSON Polygon for an axis-aligned envelope."""
    minx, miny, maxx, maxy = bounds
    return {
        "type": "Polygon",
        "coordinates": [
            [
                [minx, miny],
                [maxx, miny],
                [maxx, maxy],
                [minx, maxy],
                [minx, miny],
            ]
        ],
    }


def feature_collection(result: IntersectionResult, *, exact: bool = False) -> dict[str, Any]:
    """Build the output document for an intersection result.

    By default the feature geometry is the envelope of the intersection, which
    is exact for two axis-aligned rectangles only. ``exact`` emits the full
    intersection geometry instead.
    """
    handle = result.handle
    if handle is None or not result.has_overlap:
        return empty_feature_collection()
    provider = handle.provider
    if exact:
        geometry = provider.to_geojson(handle.geometry)
    else:
        geometry = envelope_polygon(provider.bounds(handle.geometry))
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"name": FEATURE_NAME},
                "geometry": geometry,
            }
        ],
    }


def dumps_geojson(document: dict[str, Any]) -> str:
    """Serialize a document as pretty-printed GeoJSON text."""
    return json.dumps(document, indent=JSON_INDENT, ensure_ascii=False) + "\n"


def write_geojson(document: dict[str, Any], path: Path) -> Path:
    """Write a GeoJSON document, replacing any existing file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_geojson(document), encoding="utf-8")
    LOGGER.info("Wrote %s (%s feature(s))", path, len(document.get("features", [])))
    return path
