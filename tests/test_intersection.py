from __future__ import annotations

import pytest

from alphaoverlap.errors import GeometryUnavailableError
from alphaoverlap.geometry.extent import rectangle_geometry
from alphaoverlap.geometry.handles import GeometryHandle
from alphaoverlap.geometry.intersection import (
    EMPTY,
    MISSING_INPUT,
    OVERLAP,
    UNAVAILABLE,
    IntersectionEngine,
)
from alphaoverlap.geometry.registry import geometry_engines, get_geometry_provider
from alphaoverlap.geometry.shapely_provider import ShapelyGeometryProvider
from alphaoverlap.geometry.unavailable import UnavailableGeometryProvider


def _square(minx: float, miny: float, maxx: float, maxy: float):
    return (
        (minx, maxy),
        (maxx, maxy),
        (maxx, miny),
        (minx, miny),
        (minx, maxy),
    )


class RecordingProvider(ShapelyGeometryProvider):
    """Shapely provider that records destroy calls."""

    def __init__(self, *, fail_intersection: bool = False) -> None:
        super().__init__()
        self.destroyed: list[int] = []
        self.fail_intersection = fail_intersection

    def intersection(self, first, second):
        if self.fail_intersection:
            raise RuntimeError("boom")
        return super().intersection(first, second)

    def destroy(self, geometry) -> None:
        self.destroyed.append(id(geometry))
        super().destroy(geometry)


def test_overlapping_rectangles_intersect_to_shared_square() -> None:
    provider = ShapelyGeometryProvider()
    engine = IntersectionEngine(provider)

    with rectangle_geometry(provider, _square(0, 0, 10, 10)) as first, rectangle_geometry(
        provider, _square(5, 5, 15, 15)
    ) as second:
        with engine.intersect(first, second) as result:
            assert result.status == OVERLAP
            assert result.has_overlap
            assert provider.bounds(result.handle.geometry) == (5.0, 5.0, 10.0, 10.0)

    assert provider.live_count() == 0


def test_self_intersection_matches_rectangle() -> None:
    provider = ShapelyGeometryProvider()
    engine = IntersectionEngine(provider)
    ring = _square(-3.5, 2.25, 7.0, 9.75)

    with rectangle_geometry(provider, ring) as first, rectangle_geometry(provider, ring) as second:
        with engine.intersect(first, second) as result:
            bounds = provider.bounds(result.handle.geometry)

    assert bounds == pytest.approx((-3.5, 2.25, 7.0, 9.75))
    assert provider.live_count() == 0


def test_disjoint_rectangles_are_empty_and_release_intermediate() -> None:
    provider = RecordingProvider()
    engine = IntersectionEngine(provider)

    with rectangle_geometry(provider, _square(0, 0, 10, 10)) as first, rectangle_geometry(
        provider, _square(20, 20, 30, 30)
    ) as second:
        result = engine.intersect(first, second)
        assert result.status == EMPTY
        assert result.handle is None
        assert len(provider.destroyed) == 1

    assert len(provider.destroyed) == 3
    assert provider.live_count() == 0


def test_missing_input_cannot_compute() -> None:
    provider = ShapelyGeometryProvider()
    engine = IntersectionEngine(provider)

    with rectangle_geometry(provider, _square(0, 0, 1, 1)) as first:
        result = engine.intersect(first, None)

    assert result.status == MISSING_INPUT
    assert not result.has_overlap
    assert provider.live_count() == 0


def test_unavailable_engine_reports_unavailable() -> None:
    engine = IntersectionEngine(UnavailableGeometryProvider())

    assert engine.intersect(None, None).status == UNAVAILABLE


def test_handles_released_when_intersection_fails() -> None:
    provider = RecordingProvider(fail_intersection=True)
    engine = IntersectionEngine(provider)

    with pytest.raises(RuntimeError, match="boom"):
        with rectangle_geometry(provider, _square(0, 0, 1, 1)) as first, rectangle_geometry(
            provider, _square(0, 0, 2, 2)
        ) as second:
            engine.intersect(first, second)

    assert len(provider.destroyed) == 2
    assert provider.live_count() == 0


def test_handle_release_is_idempotent() -> None:
    provider = RecordingProvider()
    handle = GeometryHandle(provider, provider.create_polygon(_square(0, 0, 1, 1)))

    handle.release()
    handle.release()

    assert handle.released
    assert len(provider.destroyed) == 1
    with pytest.raises(RuntimeError, match="already released"):
        _ = handle.geometry


def test_provider_rejects_double_destroy() -> None:
    provider = ShapelyGeometryProvider()
    geometry = provider.create_polygon(_square(0, 0, 1, 1))
    provider.destroy(geometry)

    with pytest.raises(ValueError, match="already destroyed"):
        provider.destroy(geometry)


def test_unavailable_provider_refuses_geometry_work() -> None:
    provider = UnavailableGeometryProvider()

    with pytest.raises(GeometryUnavailableError):
        provider.create_polygon(_square(0, 0, 1, 1))


def test_registry_lists_engines_and_rejects_unknown() -> None:
    assert set(geometry_engines()) == {"shapely", "none"}
    assert get_geometry_provider("shapely").available
    assert not get_geometry_provider("none").available
    with pytest.raises(KeyError, match="Unknown geometry engine"):
        get_geometry_provider("missing")
