"""Two-raster alpha overlap pipeline."""

from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from pyproj import CRS

from alphaoverlap.config import RunConfig
from alphaoverlap.contracts import validate_feature_collection
from alphaoverlap.geojson import feature_collection, write_geojson
from alphaoverlap.geometry.base import Bounds, GeometryProvider
from alphaoverlap.geometry.extent import rectangle_from_bounds, rectangle_geometry
from alphaoverlap.geometry.handles import GeometryHandle
from alphaoverlap.geometry.intersection import IntersectionEngine
from alphaoverlap.geometry.registry import get_geometry_provider
from alphaoverlap.logging_utils import raster_logger
from alphaoverlap.raster.loader import load_alpha_raster
from alphaoverlap.raster.models import AlphaRaster, GeoRectangle, PixelBoundingBox, RasterSummary
from alphaoverlap.raster.scan import find_opaque_bounds
from alphaoverlap.raster.summary import log_summary, summarize_raster

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RasterExtent:
    """Opaque extent of one raster in pixel and geographic space."""

    summary: RasterSummary
    pixel_bounds: PixelBoundingBox | None
    rectangle: GeoRectangle | None
    georeferenced: bool


@dataclass(frozen=True)
class OverlapReport:
    """Outcome of a pipeline run."""

    output: Path
    status: str
    extents: tuple[RasterExtent, ...]
    envelope: Bounds | None
    document: dict[str, Any]


def raster_extent(raster: AlphaRaster, summary: RasterSummary) -> RasterExtent:
    """Scan a raster mask and map its opaque extent to geographic space."""
    log = raster_logger(LOGGER, raster.path)
    bounds = find_opaque_bounds(raster.mask)
    if bounds is None:
        log.info("No opaque data found")
        return RasterExtent(summary, None, None, raster.transform is not None)
    log.info(
        "Data bounds: [%s,%s] - [%s,%s]", bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y
    )
    rectangle = rectangle_from_bounds(bounds, raster.transform, raster.height)
    (ulx, uly), _, (lrx, lry), _, _ = rectangle
    log.info("Geographic bounds: [%g,%g] - [%g,%g]", ulx, uly, lrx, lry)
    return RasterExtent(summary, bounds, rectangle, raster.transform is not None)


def _crs_equal(left: str, right: str) -> bool:
    return CRS.from_user_input(left) == CRS.from_user_input(right)


def check_compatibility(extents: Sequence[RasterExtent]) -> list[str]:
    """Return warnings about rasters whose coordinates cannot be compared."""
    warnings: list[str] = []
    referenced = [extent.georeferenced for extent in extents]
    if any(referenced) and not all(referenced):
        warnings.append(
            "Mixing georeferenced and non-georeferenced rasters; "
            "the intersection is not geographically meaningful."
        )
    crs_values = [extent.summary.crs for extent in extents if extent.summary.crs]
    if len(crs_values) == len(extents) and len(crs_values) > 1:
        first = crs_values[0]
        for other in crs_values[1:]:
            if not _crs_equal(first, other):
                warnings.append(f"CRS mismatch: {first} differs from {other}.")
    return warnings


def _geometry_for(
    stack: ExitStack,
    provider: GeometryProvider,
    extent: RasterExtent,
) -> GeometryHandle | None:
    if extent.rectangle is None or not provider.available:
        return None
    return stack.enter_context(rectangle_geometry(provider, extent.rectangle))


def run_overlap(
    config: RunConfig,
    *,
    provider: GeometryProvider | None = None,
) -> OverlapReport:
    """Load both rasters, intersect their opaque extents and write GeoJSON."""
    if provider is None:
        provider = get_geometry_provider(config.geometry_engine)

    extents: list[RasterExtent] = []
    for path in config.inputs:
        raster = load_alpha_raster(path)
        summary = summarize_raster(raster)
        log_summary(summary)
        extents.append(raster_extent(raster, summary))

    for warning in check_compatibility(extents):
        LOGGER.warning("%s", warning)

    LOGGER.info("Computing intersection with '%s' geometry engine", provider.name)
    envelope: Bounds | None = None
    with ExitStack() as stack:
        handles = [_geometry_for(stack, provider, extent) for extent in extents]
        result = stack.enter_context(IntersectionEngine(provider).intersect(*handles))
        document = feature_collection(result, exact=config.exact_geometry)
        if result.has_overlap and result.handle is not None:
            envelope = provider.bounds(result.handle.geometry)
        status = result.status

    if provider.live_count():
        LOGGER.warning("%s geometry handle(s) still alive after run.", provider.live_count())
    if config.validate_output:
        validate_feature_collection(document)
    write_geojson(document, config.output)
    return OverlapReport(
        output=config.output,
        status=status,
        extents=tuple(extents),
        envelope=envelope,
        document=document,
    )
