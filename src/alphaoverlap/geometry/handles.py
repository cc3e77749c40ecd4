"""Scoped ownership of provider-created geometries."""

from __future__ import annotations

from types import TracebackType
from typing import Any

from alphaoverlap.geometry.base import GeometryProvider


class GeometryHandle:
    """Own one provider geometry and destroy it exactly once.

    Use as a context manager or call ``release`` explicitly; repeated
    releases are no-ops.
    """

    def __init__(self, provider: GeometryProvider, geometry: Any) -> None:
        self._provider = provider
        self._geometry = geometry
        self._released = False

    @property
    def provider(self) -> GeometryProvider:
        return self._provider

    @property
    def released(self) -> bool:
        return self._released

    @property
    def geometry(self) -> Any:
        if self._released:
            raise RuntimeError("Geometry handle was already released.")
        return self._geometry

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        geometry, self._geometry = self._geometry, None
        self._provider.destroy(geometry)

    def __enter__(self) -> GeometryHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()
