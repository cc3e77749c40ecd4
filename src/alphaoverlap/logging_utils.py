"""Logging setup and raster-scoped loggers for alphaoverlap."""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, MutableMapping

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_FIELDS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

CONSOLE_FORMAT = "%(levelname)s: %(message)s"


@dataclass(frozen=True)
class LogOptions:
    """Console and file logging choices taken from the CLI."""

    verbose: int = 0
    quiet: bool = False
    log_file: Path | None = None
    json_console: bool = False

    @property
    def console_level(self) -> int:
        if self.quiet:
            return logging.WARNING
        return logging.DEBUG if self.verbose > 0 else logging.INFO


class RasterLogger(logging.LoggerAdapter):
    """Logger adapter that tags every record with the raster it concerns."""

    def __init__(self, logger: logging.Logger, path: Path) -> None:
        super().__init__(logger, {"raster": Path(path).name})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


def raster_logger(logger: logging.Logger, path: Path) -> RasterLogger:
    """Return ``logger`` bound to the file name of ``path``."""
    return RasterLogger(logger, path)


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the fields a record received through ``extra``."""
    return {key: value for key, value in vars(record).items() if key not in _RECORD_FIELDS}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, for log files and machine consumers."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="seconds").replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = record_context(record)
        if context:
            payload["extra"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """``LEVEL: message``, prefixed with ``[raster]`` when the record names one."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        raster = getattr(record, "raster", None)
        return f"[{raster}] {message}" if raster else message


def _console_handler(options: LogOptions) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(options.console_level)
    if options.json_console:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(HumanFormatter(CONSOLE_FORMAT))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(JsonFormatter())
    return handler


def configure_logging(options: LogOptions) -> logging.Logger:
    """Replace the root handlers according to ``options`` and return the root logger."""
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    root.addHandler(_console_handler(options))
    if options.log_file:
        root.addHandler(_file_handler(options.log_file))
    return root
