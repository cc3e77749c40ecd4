"""Environment and dependency checks for alphaoverlap."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable

MIN_PYTHON = (3, 10)


@dataclass(frozen=True)
class CheckResult:
    """Result of a single doctor check."""

    name: str
    status: str
    detail: str


def _status(name: str, status: str, detail: str) -> CheckResult:
    return CheckResult(name=name, status=status, detail=detail)


def check_python_version() -> CheckResult:
    """Verify the running Python meets the minimum version."""
    if sys.version_info < MIN_PYTHON:
        return _status(
            "python",
            "error",
            f"Python {MIN_PYTHON[0]}.{MIN_PYTHON[1]}+ required",
        )
    return _status("python", "ok", f"{sys.version_info.major}.{sys.version_info.minor}")


def check_raster_deps() -> Iterable[CheckResult]:
    """Verify that rasterio and GDAL can be imported."""
    results = []
    try:
        import rasterio

        results.append(_status("rasterio", "ok", rasterio.__version__))
        results.append(_status("gdal", "ok", rasterio.__gdal_version__))
    except ImportError as exc:  # pragma: no cover - import failure path
        results.append(_status("rasterio", "error", str(exc)))
    try:
        import pyproj

        results.append(_status("pyproj", "ok", pyproj.__version__))
    except ImportError as exc:  # pragma: no cover - import failure path
        results.append(_status("pyproj", "error", str(exc)))
    return results


def check_geometry_deps() -> Iterable[CheckResult]:
    """Report the geometry engine; a missing engine degrades to empty output."""
    try:
        import shapely
    except ImportError as exc:  # pragma: no cover - import failure path
        return [_status("shapely", "warn", f"{exc}; intersections will be empty")]
    return [
        _status("shapely", "ok", shapely.__version__),
        _status("geos", "ok", shapely.geos_version_string),
    ]


def run_doctor() -> list[CheckResult]:
    """Run all environment checks and return the aggregated results."""
    return [check_python_version(), *check_raster_deps(), *check_geometry_deps()]
