"""Data models used by raster mask processing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np

GeoPoint = Tuple[float, float]
GeoRectangle = Tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint, GeoPoint]

OPAQUE_VALUE = 255


@dataclass(frozen=True)
class AffineTransform:
    """Six GDAL-ordered coefficients mapping pixel to geographic space."""

    c0: float
    c1: float
    c2: float
    c3: float
    c4: float
    c5: float

    @classmethod
    def from_gdal(cls, coefficients: tuple[float, ...]) -> "AffineTransform":
        if len(coefficients) != 6:
            raise ValueError(f"Expected 6 affine coefficients, got {len(coefficients)}")
        return cls(*(float(value) for value in coefficients))

    def to_gdal(self) -> tuple[float, float, float, float, float, float]:
        return (self.c0, self.c1, self.c2, self.c3, self.c4, self.c5)

    def apply(self, x: float, y: float) -> GeoPoint:
        """Map a pixel coordinate to geographic coordinates."""
        return (
            self.c0 + x * self.c1 + y * self.c2,
            self.c3 + x * self.c4 + y * self.c5,
        )


@dataclass(frozen=True)
class PixelBoundingBox:
    """Inclusive pixel-index bounds of opaque data."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self) -> None:
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(
                f"Invalid pixel bounds [{self.min_x},{self.min_y}] - [{self.max_x},{self.max_y}]"
            )

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


@dataclass(frozen=True, eq=False)
class AlphaRaster:
    """A loaded raster reduced to its alpha mask and georeferencing."""

    path: Path
    width: int
    height: int
    band_count: int
    color_interp: tuple[str, ...]
    alpha_band: int
    mask: np.ndarray
    transform: AffineTransform | None
    crs: str | None


@dataclass(frozen=True)
class RasterSummary:
    """Per-raster statistics reported after a load."""

    path: Path
    width: int
    height: int
    band_count: int
    color_interp: tuple[str, ...]
    alpha_band: int
    opaque_pixels: int
    opaque_percent: float
    transform: tuple[float, ...] | None
    crs: str | None

    def as_dict(self) -> dict[str, object]:
        return {
            "path": str(self.path),
            "width": self.width,
            "height": self.height,
            "band_count": self.band_count,
            "color_interp": list(self.color_interp),
            "alpha_band": self.alpha_band,
            "opaque_pixels": self.opaque_pixels,
            "opaque_percent": self.opaque_percent,
            "transform": list(self.transform) if self.transform is not None else None,
            "crs": self.crs,
        }
