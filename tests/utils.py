from __future__ import annotations

import os
import warnings
from pathlib import Path
from typing import Tuple

import numpy as np
import rasterio
from rasterio.enums import ColorInterp
from rasterio.errors import NotGeoreferencedWarning
from rasterio.transform import Affine, from_origin


def alpha_mask(
    shape: Tuple[int, int],
    *,
    window: Tuple[int, int, int, int] | None = None,
    value: int = 255,
) -> np.ndarray:
    """Return a uint8 mask; ``window`` is (row_start, row_stop, col_start, col_stop)."""
    mask = np.zeros(shape, dtype=np.uint8)
    if window is None:
        mask[:, :] = value
    else:
        row_start, row_stop, col_start, col_stop = window
        mask[row_start:row_stop, col_start:col_stop] = value
    return mask


def write_rgba(
    path: Path,
    alpha: np.ndarray,
    *,
    transform: Affine | None = None,
    crs: str | None = "EPSG:3857",
    tag_alpha: bool = True,
    count: int = 4,
) -> None:
    """Write a GeoTIFF whose last band carries ``alpha``.

    With ``tag_alpha`` the last band is marked as alpha through the GTiff
    ``ALPHA`` creation option (RGBA for four bands, gray+alpha for two).
    """
    height, width = alpha.shape
    bands = [np.full((height, width), 128, dtype=np.uint8) for _ in range(count - 1)]
    bands.append(alpha.astype(np.uint8))
    profile: dict[str, object] = {
        "driver": "GTiff",
        "height": height,
        "width": width,
        "count": count,
        "dtype": "uint8",
    }
    if transform is not None:
        profile["transform"] = transform
        profile["crs"] = crs
    if tag_alpha:
        if count not in (2, 4):
            raise ValueError("tag_alpha needs a two or four band raster")
        profile["alpha"] = "YES"
        if count == 4:
            profile["photometric"] = "RGB"
    path.parent.mkdir(parents=True, exist_ok=True)
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NotGeoreferencedWarning)
        with rasterio.open(path, "w", **profile) as dataset:
            dataset.write(np.stack(bands))
            if not tag_alpha:
                dataset.colorinterp = [ColorInterp.gray] + [ColorInterp.undefined] * (count - 1)


def write_rgb(path: Path, shape: Tuple[int, int], *, transform: Affine | None = None) -> None:
    """Write a three-band RGB GeoTIFF without any alpha channel."""
    height, width = shape
    with rasterio.open(
        path,
        "w",
        driver="GTiff",
        height=height,
        width=width,
        count=3,
        dtype="uint8",
        crs="EPSG:3857",
        transform=transform or from_origin(0.0, float(height), 1.0, 1.0),
        photometric="RGB",
    ) as dataset:
        dataset.write(np.full((3, height, width), 200, dtype=np.uint8))


def with_src_env(base_env: dict[str, str] | None = None) -> dict[str, str]:
    """Return an environment with repo src/ on PYTHONPATH."""
    env = dict(base_env or os.environ)
    repo_root = Path(__file__).resolve().parents[1]
    src_path = repo_root / "src"
    if src_path.exists():
        existing = env.get("PYTHONPATH", "")
        entries = [entry for entry in existing.split(os.pathsep) if entry]
        src_str = str(src_path)
        if src_str not in entries:
            entries.insert(0, src_str)
        env["PYTHONPATH"] = os.pathsep.join(entries)
    return env
