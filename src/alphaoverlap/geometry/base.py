"""Geometry provider protocol shared by the intersection pipeline."""

from __future__ import annotations

from typing import Any, Protocol, Sequence, Tuple

Bounds = Tuple[float, float, float, float]
Coordinates = Sequence[Tuple[float, float]]


class GeometryProvider(Protocol):
    """Capability interface over a planar-geometry engine.

    Geometries returned by ``create_polygon`` and ``intersection`` are owned
    by the caller and must be passed to ``destroy`` exactly once.
    """

    name: str
    available: bool

    def create_polygon(self, ring: Coordinates) -> Any:
        ...

    def intersection(self, first: Any, second: Any) -> Any:
        ...

    def is_empty(self, geometry: Any) -> bool:
        ...

    def bounds(self, geometry: Any) -> Bounds:
        ...

    def to_geojson(self, geometry: Any) -> dict[str, Any]:
        ...

    def destroy(self, geometry: Any) -> None:
        ...

    def live_count(self) -> int:
        ...
