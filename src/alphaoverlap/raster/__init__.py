"""Raster loading, alpha mask scanning and statistics."""

from alphaoverlap.raster.loader import load_alpha_raster, select_alpha_band
from alphaoverlap.raster.models import (
    OPAQUE_VALUE,
    AffineTransform,
    AlphaRaster,
    GeoRectangle,
    PixelBoundingBox,
    RasterSummary,
)
from alphaoverlap.raster.scan import count_opaque, find_opaque_bounds
from alphaoverlap.raster.summary import log_summary, summarize_raster

__all__ = [
    "AffineTransform",
    "AlphaRaster",
    "GeoRectangle",
    "OPAQUE_VALUE",
    "PixelBoundingBox",
    "RasterSummary",
    "count_opaque",
    "find_opaque_bounds",
    "load_alpha_raster",
    "log_summary",
    "select_alpha_band",
    "summarize_raster",
]
