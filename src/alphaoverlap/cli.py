"""Command-line interface for alphaoverlap."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

import jsonschema

from alphaoverlap import __version__
from alphaoverlap.config import RunConfig, resolve_run_config
from alphaoverlap.doctor import run_doctor
from alphaoverlap.errors import ConfigError, RasterLoadError
from alphaoverlap.geometry.registry import geometry_engines
from alphaoverlap.logging_utils import LogOptions, configure_logging
from alphaoverlap.pipeline import run_overlap
from alphaoverlap.raster.loader import load_alpha_raster
from alphaoverlap.raster.summary import summarize_raster

LOGGER = logging.getLogger("alphaoverlap.cli")


def _add_intersect_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the intersect subcommand and its arguments."""
    intersect = subparsers.add_parser(
        "intersect",
        help="Intersect the opaque extents of two rasters and write GeoJSON.",
    )
    intersect.add_argument(
        "rasters",
        nargs="*",
        metavar="RASTER",
        help="Two raster paths (defaults: orto1.tif orto2.tif or the config file).",
    )
    intersect.add_argument("--output", help="GeoJSON output path.")
    intersect.add_argument("--config", help="Path to a JSON run config.")
    intersect.add_argument(
        "--geometry-engine",
        choices=geometry_engines(),
        help="Geometry engine used for the intersection.",
    )
    intersect.add_argument(
        "--exact-geometry",
        action="store_true",
        default=None,
        help="Emit the exact intersection shape instead of its envelope.",
    )
    intersect.add_argument(
        "--validate",
        action="store_true",
        default=None,
        help="Validate the GeoJSON document against the bundled schema.",
    )


def _add_info_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the info subcommand and its arguments."""
    info = subparsers.add_parser("info", help="Print alpha mask statistics for a raster.")
    info.add_argument("raster", help="Raster path.")
    info.add_argument("--output", help="Write the summary JSON to a file instead of stdout.")


def _intersect_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> RunConfig:
    if args.rasters and len(args.rasters) != 2:
        parser.error("intersect expects exactly two rasters")
    config = resolve_run_config(Path(args.config) if args.config else None)
    return config.with_overrides(
        inputs=args.rasters or None,
        output=args.output,
        geometry_engine=args.geometry_engine,
        exact_geometry=args.exact_geometry,
        validate_output=args.validate,
    )


def _run_intersect(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        config = _intersect_config(args, parser)
    except ConfigError as exc:
        LOGGER.error("%s", exc)
        return 1
    try:
        report = run_overlap(config)
    except RasterLoadError as exc:
        LOGGER.error("Failed to load raster: %s", exc)
        return 1
    except jsonschema.ValidationError as exc:
        LOGGER.error("GeoJSON output failed validation: %s", exc.message)
        return 1
    LOGGER.info("Intersection status: %s", report.status)
    LOGGER.info("GeoJSON written to %s", report.output)
    return 0


def _run_info(args: argparse.Namespace) -> int:
    try:
        raster = load_alpha_raster(Path(args.raster))
    except RasterLoadError as exc:
        LOGGER.error("Failed to load raster: %s", exc)
        return 1
    payload = summarize_raster(raster).as_dict()
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        LOGGER.info("Summary written to %s", output_path)
    else:
        print(json.dumps(payload, indent=2))
    return 0


def _dispatch(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.command == "version":
        print(__version__)
        return 0
    if args.command == "doctor":
        results = run_doctor()
        for result in results:
            LOGGER.info("%s: %s - %s", result.name, result.status, result.detail)
        if any(result.status == "error" for result in results):
            return 1
        return 0
    if args.command == "info":
        return _run_info(args)
    if args.command == "intersect":
        return _run_intersect(args, parser)
    parser.error("Unknown command")
    return 2


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint and return an exit code."""
    parser = argparse.ArgumentParser(
        prog="alphaoverlap",
        description="Alpha-mask overlap of two georeferenced rasters",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable).",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce log output to warnings and errors.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON on stderr.",
    )
    parser.add_argument(
        "--log-file",
        help="Optional path for JSON log output.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_intersect_parser(subparsers)
    _add_info_parser(subparsers)
    subparsers.add_parser("doctor", help="Check Python dependencies.")
    subparsers.add_parser("version", help="Print the alphaoverlap version.")

    args = parser.parse_args(argv)
    log_file_value = getattr(args, "log_file", None)
    configure_logging(
        LogOptions(
            verbose=getattr(args, "verbose", 0) or 0,
            quiet=bool(getattr(args, "quiet", False)),
            log_file=Path(log_file_value) if log_file_value else None,
            json_console=bool(getattr(args, "log_json", False)),
        )
    )

    try:
        return _dispatch(args, parser)
    except Exception:
        LOGGER.exception("Unexpected failure while running '%s'.", args.command)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
