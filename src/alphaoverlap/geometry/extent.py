"""Pixel to geographic extent mapping."""

from __future__ import annotations

from alphaoverlap.geometry.base import GeometryProvider
from alphaoverlap.geometry.handles import GeometryHandle
from alphaoverlap.raster.models import AffineTransform, GeoPoint, GeoRectangle, PixelBoundingBox


def pixel_to_geo(
    x: float,
    y: float,
    transform: AffineTransform | None,
    height: int,
) -> GeoPoint:
    """Map a pixel coordinate to geographic space.

    Without a transform the pixel grid is flipped vertically
    (``geoX = x``, ``geoY = height - y``). That fallback is not georeferenced
    and only keeps rasters without metadata usable.
    """
    if transform is not None:
        return transform.apply(x, y)
    return (float(x), float(height - y))


def rectangle_from_bounds(
    bounds: PixelBoundingBox,
    transform: AffineTransform | None,
    height: int,
) -> GeoRectangle:
    """Return the closed UL, UR, LR, LL, UL ring covering the pixel box."""
    # The lower-right corner is the pixel just past the last included one.
    ulx, uly = pixel_to_geo(bounds.min_x, bounds.min_y, transform, height)
    lrx, lry = pixel_to_geo(bounds.max_x + 1, bounds.max_y + 1, transform, height)
    return (
        (ulx, uly),
        (lrx, uly),
        (lrx, lry),
        (ulx, lry),
        (ulx, uly),
    )


def rectangle_geometry(provider: GeometryProvider, rectangle: GeoRectangle) -> GeometryHandle:
    """Create an owned polygon geometry for a geographic rectangle."""
    return GeometryHandle(provider, provider.create_polygon(rectangle))
