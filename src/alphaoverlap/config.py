"""Run configuration loading and normalization helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping

import jsonschema

from alphaoverlap.contracts import validate_run_config
from alphaoverlap.errors import ConfigError
from alphaoverlap.geometry.registry import DEFAULT_GEOMETRY_ENGINE

ENV_CONFIG = "ALPHAOVERLAP_CONFIG"
DEFAULT_CONFIG_NAME = "alphaoverlap.json"
DEFAULT_INPUTS = (Path("orto1.tif"), Path("orto2.tif"))
DEFAULT_OUTPUT = Path("intersection_obchaja_2.geojson")


@dataclass(frozen=True)
class RunConfig:
    """Normalized configuration for one intersection run."""

    inputs: tuple[Path, Path] = DEFAULT_INPUTS
    output: Path = DEFAULT_OUTPUT
    geometry_engine: str = DEFAULT_GEOMETRY_ENGINE
    exact_geometry: bool = False
    validate_output: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            "inputs": [str(path) for path in self.inputs],
            "output": str(self.output),
            "geometry_engine": self.geometry_engine,
            "exact_geometry": self.exact_geometry,
            "validate_output": self.validate_output,
        }

    def with_overrides(self, **overrides: Any) -> RunConfig:
        """Return a copy with non-None overrides applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        if "inputs" in values:
            values["inputs"] = _normalize_inputs(values["inputs"])
        if "output" in values:
            values["output"] = Path(values["output"])
        return replace(self, **values)


def _normalize_inputs(value: object) -> tuple[Path, Path]:
    if not isinstance(value, (list, tuple)):
        raise ConfigError("inputs must be a list of two raster paths.")
    paths = [Path(str(item)) for item in value if str(item)]
    if len(paths) != 2:
        raise ConfigError(f"Exactly two input rasters are required, got {len(paths)}.")
    return (paths[0], paths[1])


def normalize_run_config(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize a raw config payload into canonical keys."""
    normalized: dict[str, Any] = {}
    inputs = payload.get("inputs")
    if inputs is None and ("first" in payload or "second" in payload):
        inputs = [payload.get("first"), payload.get("second")]
    if inputs is not None:
        if not isinstance(inputs, (list, tuple)) or any(item is None for item in inputs):
            raise ConfigError("inputs must list two raster paths.")
        normalized["inputs"] = [str(item) for item in inputs]
    output = payload.get("output") or payload.get("output_path")
    if output is not None:
        normalized["output"] = str(output)
    for key in ("geometry_engine", "exact_geometry", "validate_output"):
        if key in payload:
            normalized[key] = payload[key]
    unknown = set(payload) - {
        "inputs",
        "first",
        "second",
        "output",
        "output_path",
        "geometry_engine",
        "exact_geometry",
        "validate_output",
    }
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    return normalized


def load_run_config(path: Path) -> RunConfig:
    """Load and validate a run config file from disk."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Failed to read config {path}: {exc}") from exc
    if not isinstance(payload, Mapping):
        raise ConfigError("Run config must be a JSON object.")
    normalized = normalize_run_config(payload)
    try:
        validate_run_config(normalized)
    except jsonschema.ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc.message}") from exc
    return RunConfig().with_overrides(**normalized)


def find_config_path(explicit: Path | None = None) -> Path | None:
    """Return the config path to use: explicit, environment, then working directory."""
    if explicit:
        return Path(explicit)
    env_path = os.environ.get(ENV_CONFIG)
    if env_path:
        return Path(env_path) if Path(env_path).exists() else None
    candidate = Path.cwd() / DEFAULT_CONFIG_NAME
    if candidate.exists():
        return candidate
    return None


def resolve_run_config(explicit: Path | None = None) -> RunConfig:
    """Load the discovered config file, or return defaults when none exists."""
    path = find_config_path(explicit)
    if path is None:
        return RunConfig()
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    return load_run_config(path)
