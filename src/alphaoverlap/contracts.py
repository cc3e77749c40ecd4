"""Schema validation helpers for run configs and emitted GeoJSON."""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Mapping

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema bundled in the package."""
    with resources.files("alphaoverlap.schemas").joinpath(name).open(
        "r", encoding="utf-8"
    ) as handle:
        return json.load(handle)


def validate_feature_collection(document: Mapping[str, Any]) -> None:
    """Validate an emitted FeatureCollection against the schema."""
    schema = _load_schema("feature_collection.schema.json")
    jsonschema.validate(document, schema)


def validate_run_config(payload: Mapping[str, Any]) -> None:
    """Validate a run config payload against the schema."""
    schema = _load_schema("run_config.schema.json")
    jsonschema.validate(payload, schema)
