"""Geometry providers, extent mapping and intersection."""

from alphaoverlap.geometry.base import Bounds, GeometryProvider
from alphaoverlap.geometry.extent import pixel_to_geo, rectangle_from_bounds, rectangle_geometry
from alphaoverlap.geometry.handles import GeometryHandle
from alphaoverlap.geometry.intersection import (
    EMPTY,
    MISSING_INPUT,
    OVERLAP,
    UNAVAILABLE,
    IntersectionEngine,
    IntersectionResult,
)
from alphaoverlap.geometry.registry import (
    DEFAULT_GEOMETRY_ENGINE,
    geometry_engines,
    get_geometry_provider,
)
from alphaoverlap.geometry.unavailable import UnavailableGeometryProvider

__all__ = [
    "Bounds",
    "DEFAULT_GEOMETRY_ENGINE",
    "EMPTY",
    "GeometryHandle",
    "GeometryProvider",
    "IntersectionEngine",
    "IntersectionResult",
    "MISSING_INPUT",
    "OVERLAP",
    "UNAVAILABLE",
    "UnavailableGeometryProvider",
    "geometry_engines",
    "get_geometry_provider",
    "pixel_to_geo",
    "rectangle_from_bounds",
    "rectangle_geometry",
]
