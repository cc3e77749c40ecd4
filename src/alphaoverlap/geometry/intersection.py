"""Intersection of two owned geometries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType

from alphaoverlap.geometry.base import GeometryProvider
from alphaoverlap.geometry.handles import GeometryHandle

LOGGER = logging.getLogger(__name__)

OVERLAP = "overlap"
EMPTY = "empty"
MISSING_INPUT = "missing_input"
UNAVAILABLE = "unavailable"


@dataclass
class IntersectionResult:
    """Outcome of an intersection; owns the overlap geometry when present."""

    status: str
    handle: GeometryHandle | None = None

    @property
    def has_overlap(self) -> bool:
        return self.status == OVERLAP and self.handle is not None

    def release(self) -> None:
        if self.handle is not None:
            self.handle.release()

    def __enter__(self) -> IntersectionResult:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.release()


class IntersectionEngine:
    """Intersect geometries through a geometry provider."""

    def __init__(self, provider: GeometryProvider) -> None:
        self.provider = provider

    def intersect(
        self,
        first: GeometryHandle | None,
        second: GeometryHandle | None,
    ) -> IntersectionResult:
        """Intersect two geometries; either may be None when a raster had no data."""
        if not self.provider.available:
            LOGGER.warning("Geometry engine '%s' is unavailable.", self.provider.name)
            return IntersectionResult(UNAVAILABLE)
        if first is None or second is None:
            missing = [
                label
                for label, handle in (("first", first), ("second", second))
                if handle is None
            ]
            LOGGER.warning(
                "Cannot compute intersection; no geometry for %s raster.",
                " and ".join(missing),
            )
            return IntersectionResult(MISSING_INPUT)

        handle = GeometryHandle(
            self.provider,
            self.provider.intersection(first.geometry, second.geometry),
        )
        try:
            empty = self.provider.is_empty(handle.geometry)
        except Exception:
            handle.release()
            raise
        if empty:
            handle.release()
            LOGGER.info("Intersection is empty.")
            return IntersectionResult(EMPTY)
        LOGGER.info("Intersection found.")
        return IntersectionResult(OVERLAP, handle)
