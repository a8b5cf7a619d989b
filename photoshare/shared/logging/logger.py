# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""loguru setup: every record carries the id of the request that produced it."""

from __future__ import annotations

import inspect
import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger

from .redaction import redact_record

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)
_NO_REQUEST = "-"

_request_id: ContextVar[str] = ContextVar("request_id", default=_NO_REQUEST)


def _stamp_request_id(record: dict[str, Any]) -> None:
    record["extra"].setdefault("request_id", _request_id.get())


logger.configure(patcher=_stamp_request_id)


def bind_request_id(value: str | None) -> None:
    _request_id.set(value or _NO_REQUEST)


def reset_request_id() -> None:
    _request_id.set(_NO_REQUEST)


class _StdlibBridge(logging.Handler):
    """Routes werkzeug and SQLAlchemy records into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _sink_options(level: str) -> dict[str, Any]:
    return {
        "level": level,
        "format": _FORMAT,
        "filter": redact_record,
        "backtrace": False,
        "diagnose": False,
    }


def setup_logging(level: str = "INFO", *, log_file: str | None = None) -> None:
    level = level.upper()

    logger.remove()
    logger.add(sys.stderr, colorize=True, **_sink_options(level))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, colorize=False, enqueue=True, encoding="utf-8", **_sink_options(level))

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


__all__ = [
    "bind_request_id",
    "logger",
    "reset_request_id",
    "setup_logging",
]
