# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from photoshare.shared.logging import logger

from .base import AppError

INTERNAL_ERROR_BODY = {"error": "internal_error", "message": "Internal server error"}


def _where() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    client = forwarded.split(",")[0].strip() or request.remote_addr or "unknown"
    return f"{request.method} {request.path} from {client}, user={g.get('user_id')}"


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    """Render every failure as JSON; only 5xx responses carry a traceback in the log."""

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc).error(f"{exc.code} on {_where()}")
        else:
            # Token failures share one client body; the cause only goes to the log.
            reason = getattr(exc, "reason", None)
            logger.warning(f"{exc.code} on {_where()}" + (f" reason={reason}" if reason else ""))
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _on_http_exception(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        detail = f", query={dict(request.args)}, body_size={request.content_length or 0}" if debug_mode else ""
        logger.opt(exception=exc).error(f"unhandled {type(exc).__name__} on {_where()}{detail}")
        return jsonify(INTERNAL_ERROR_BODY), HTTPStatus.INTERNAL_SERVER_ERROR
