"""Exception types raised by alphaoverlap."""

from __future__ import annotations

from pathlib import Path


class AlphaOverlapError(Exception):
    """Base class for alphaoverlap failures."""


class ConfigError(AlphaOverlapError):
    """Raised when a run configuration cannot be loaded or is invalid."""


class RasterLoadError(AlphaOverlapError):
    """Base class for structural failures while loading a raster."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class RasterOpenFailure(RasterLoadError):
    """Raised when a raster file is missing or unreadable."""


class NoAlphaBand(RasterLoadError):
    """Raised when no band can serve as the alpha channel."""


class MaskReadFailure(RasterLoadError):
    """Raised when reading the alpha band does not complete cleanly."""


class GeometryUnavailableError(AlphaOverlapError):
    """Raised when geometry work is requested without a geometry engine."""
