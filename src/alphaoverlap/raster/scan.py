"""Opaque-extent scanning of alpha masks."""

from __future__ import annotations

import numpy as np

from alphaoverlap.raster.models import OPAQUE_VALUE, PixelBoundingBox


def _opaque(mask: np.ndarray) -> np.ndarray:
    if mask.ndim != 2:
        raise ValueError(f"Alpha mask must be 2D, got shape {mask.shape}")
    return mask == OPAQUE_VALUE


def find_opaque_bounds(mask: np.ndarray) -> PixelBoundingBox | None:
    """Return the tightest box covering every opaque pixel, or None if there is none."""
    opaque = _opaque(mask)
    rows = np.flatnonzero(opaque.any(axis=1))
    if rows.size == 0:
        return None
    cols = np.flatnonzero(opaque.any(axis=0))
    return PixelBoundingBox(
        min_x=int(cols[0]),
        min_y=int(rows[0]),
        max_x=int(cols[-1]),
        max_y=int(rows[-1]),
    )


def count_opaque(mask: np.ndarray) -> int:
    """Return the number of fully opaque pixels."""
    return int(np.count_nonzero(_opaque(mask)))
