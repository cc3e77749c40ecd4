"""Geometry provider used when no geometry engine is enabled."""

from __future__ import annotations

from typing import Any, NoReturn

from alphaoverlap.errors import GeometryUnavailableError


class UnavailableGeometryProvider:
    """Provider that reports itself unavailable and refuses all operations."""

    name = "none"
    available = False

    def _refuse(self) -> NoReturn:
        raise GeometryUnavailableError("No geometry engine is available.")

    def create_polygon(self, ring: Any) -> Any:
        self._refuse()

    def intersection(self, first: Any, second: Any) -> Any:
        self._refuse()

    def is_empty(self, geometry: Any) -> bool:
        self._refuse()

    def bounds(self, geometry: Any) -> Any:
        self._refuse()

    def to_geojson(self, geometry: Any) -> dict[str, Any]:
        self._refuse()

    def destroy(self, geometry: Any) -> None:
        self._refuse()

    def live_count(self) -> int:
        return 0
