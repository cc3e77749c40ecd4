"""Shapely-backed geometry provider."""

from __future__ import annotations

import logging
from typing import Any

import shapely
from shapely.geometry import LinearRing, Polygon, mapping
from shapely.geometry.base import BaseGeometry

from alphaoverlap.geometry.base import Bounds, Coordinates

LOGGER = logging.getLogger(__name__)


def _as_lists(value: Any) -> Any:
    """Convert nested tuples from shapely mappings into JSON-style lists."""
    if isinstance(value, dict):
        return {key: _as_lists(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_as_lists(item) for item in value]
    return value


class ShapelyGeometryProvider:
    """Geometry provider delegating to Shapely (GEOS)."""

    name = "shapely"
    available = True

    def __init__(self) -> None:
        self._live: dict[int, BaseGeometry] = {}
        LOGGER.debug("Using shapely %s (GEOS %s)", shapely.__version__, shapely.geos_version_string)

    def _track(self, geometry: BaseGeometry) -> BaseGeometry:
        self._live[id(geometry)] = geometry
        return geometry

    def create_polygon(self, ring: Coordinates) -> BaseGeometry:
        """Build a polygon from a closed coordinate ring."""
        shell = LinearRing([(float(x), float(y)) for x, y in ring])
        return self._track(Polygon(shell))

    def intersection(self, first: BaseGeometry, second: BaseGeometry) -> BaseGeometry:
        return self._track(first.intersection(second))

    def is_empty(self, geometry: BaseGeometry) -> bool:
        return bool(geometry.is_empty)

    def bounds(self, geometry: BaseGeometry) -> Bounds:
        minx, miny, maxx, maxy = geometry.bounds
        return (float(minx), float(miny), float(maxx), float(maxy))

    def to_geojson(self, geometry: BaseGeometry) -> dict[str, Any]:
        return _as_lists(mapping(geometry))

    def destroy(self, geometry: BaseGeometry) -> None:
        key = id(geometry)
        if key not in self._live:
            raise ValueError("Geometry is not owned by this provider or was already destroyed.")
        del self._live[key]

    def live_count(self) -> int:
        return len(self._live)
