"""Per-raster statistics and diagnostics."""

from __future__ import annotations

import logging

from alphaoverlap.logging_utils import raster_logger
from alphaoverlap.raster.models import AlphaRaster, RasterSummary
from alphaoverlap.raster.scan import count_opaque

LOGGER = logging.getLogger(__name__)


def summarize_raster(raster: AlphaRaster) -> RasterSummary:
    """Collect statistics about a loaded alpha raster."""
    opaque = count_opaque(raster.mask)
    total = raster.width * raster.height
    return RasterSummary(
        path=raster.path,
        width=raster.width,
        height=raster.height,
        band_count=raster.band_count,
        color_interp=raster.color_interp,
        alpha_band=raster.alpha_band,
        opaque_pixels=opaque,
        opaque_percent=(opaque * 100.0 / total) if total else 0.0,
        transform=raster.transform.to_gdal() if raster.transform is not None else None,
        crs=raster.crs,
    )


def log_summary(summary: RasterSummary) -> None:
    """Log a human readable description of a raster summary."""
    log = raster_logger(LOGGER, summary.path)
    log.info("Size: %sx%s", summary.width, summary.height)
    log.info("Bands: %s", summary.band_count)
    for index, name in enumerate(summary.color_interp, start=1):
        marker = " (alpha)" if index == summary.alpha_band else ""
        log.info("  Band %s: %s%s", index, name, marker)
    log.info("Opaque pixels: %s (%.2f%%)", summary.opaque_pixels, summary.opaque_percent)
    if summary.transform is not None:
        log.info("Geotransform: [%s]", ", ".join(f"{value:g}" for value in summary.transform))
    else:
        log.info("Geotransform not found")
    log.info("CRS: %s", summary.crs or "none")
