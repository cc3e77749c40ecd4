"""Raster loading and alpha band selection."""

from __future__ import annotations

import logging
import warnings
from pathlib import Path
from typing import Sequence

import numpy as np
import rasterio
from rasterio.enums import ColorInterp
from rasterio.errors import NotGeoreferencedWarning, RasterioError

from alphaoverlap.errors import MaskReadFailure, NoAlphaBand, RasterOpenFailure
from alphaoverlap.logging_utils import raster_logger
from alphaoverlap.raster.models import AffineTransform, AlphaRaster

LOGGER = logging.getLogger(__name__)

MIN_POSITIONAL_ALPHA_BANDS = 4


def select_alpha_band(color_interp: Sequence[ColorInterp]) -> int | None:
    """Return the 1-based alpha band index, or None if no band qualifies.

    A band tagged as alpha wins. Without a tag, rasters with four or more
    bands use their last band.
    """
    for index, interp in enumerate(color_interp, start=1):
        if interp == ColorInterp.alpha:
            return index
    if len(color_interp) >= MIN_POSITIONAL_ALPHA_BANDS:
        return len(color_interp)
    return None


def _open_dataset(
    path: Path, log: logging.LoggerAdapter
) -> tuple[rasterio.io.DatasetReader, AffineTransform | None]:
    """Open ``path`` and return it with its geotransform, or None when it has none.

    rasterio substitutes an identity matrix for a missing geotransform and
    signals it with ``NotGeoreferencedWarning``; an explicit identity
    transform raises no warning and is kept.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always", NotGeoreferencedWarning)
        dataset = rasterio.open(path)
        transform = dataset.transform
    georeferenced = True
    for warning in caught:
        if issubclass(warning.category, NotGeoreferencedWarning):
            georeferenced = False
        else:
            log.warning("%s", warning.message)
    if not georeferenced:
        return dataset, None
    return dataset, AffineTransform.from_gdal(transform.to_gdal())


def load_alpha_raster(path: Path) -> AlphaRaster:
    """Open a raster, select its alpha band and read it as a uint8 mask."""
    path = Path(path)
    log = raster_logger(LOGGER, path)
    try:
        dataset, transform = _open_dataset(path, log)
    except (RasterioError, OSError) as exc:
        raise RasterOpenFailure(path, f"unable to open raster ({exc})") from exc

    with dataset:
        width = dataset.width
        height = dataset.height
        color_interp = tuple(dataset.colorinterp)
        log.info("Loaded %s (%sx%s)", path, width, height)
        if transform is None:
            log.debug("No geotransform; using pixel coordinates")

        alpha_band = select_alpha_band(color_interp)
        if alpha_band is None:
            raise NoAlphaBand(
                path, f"no alpha band among {dataset.count} band(s) and fewer than 4 bands"
            )
        log.debug("Reading alpha band %s", alpha_band)
        try:
            mask = dataset.read(alpha_band, out_dtype="uint8")
        except RasterioError as exc:
            raise MaskReadFailure(path, f"failed to read band {alpha_band} ({exc})") from exc
        if mask.shape != (height, width):
            raise MaskReadFailure(
                path, f"band {alpha_band} read returned shape {mask.shape}"
            )
        mask = np.ascontiguousarray(mask)
        mask.setflags(write=False)

        return AlphaRaster(
            path=path,
            width=width,
            height=height,
            band_count=dataset.count,
            color_interp=tuple(interp.name for interp in color_interp),
            alpha_band=alpha_band,
            mask=mask,
            transform=transform,
            crs=dataset.crs.to_string() if dataset.crs else None,
        )
