"""Registry for named geometry providers."""

from __future__ import annotations

from typing import Callable

from alphaoverlap.geometry.base import GeometryProvider
from alphaoverlap.geometry.unavailable import UnavailableGeometryProvider

ProviderFactory = Callable[[], GeometryProvider]

DEFAULT_GEOMETRY_ENGINE = "shapely"


def _shapely_factory() -> GeometryProvider:
    from alphaoverlap.geometry.shapely_provider import ShapelyGeometryProvider

    return ShapelyGeometryProvider()


_PROVIDERS: dict[str, ProviderFactory] = {
    "shapely": _shapely_factory,
    "none": UnavailableGeometryProvider,
}


def geometry_engines() -> tuple[str, ...]:
    """Return the names of the registered geometry engines."""
    return tuple(_PROVIDERS)


def get_geometry_provider(name: str = DEFAULT_GEOMETRY_ENGINE) -> GeometryProvider:
    """Return a geometry provider instance for the given engine name."""
    try:
        factory = _PROVIDERS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown geometry engine: {name}") from exc
    try:
        return factory()
    except ImportError as exc:
        raise RuntimeError(f"Geometry engine '{name}' is not installed: {exc}") from exc
