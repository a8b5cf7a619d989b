# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import re
import secrets
import time

from flask import Flask, Response, g, request

from photoshare.shared.logging import bind_request_id, logger, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_PATTERN = re.compile(r"^[\w.-]{1,64}$")
_CREDENTIAL_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _incoming_request_id() -> str:
    supplied = request.headers.get(REQUEST_ID_HEADER, "")
    if _REQUEST_ID_PATTERN.match(supplied):
        return supplied
    return secrets.token_urlsafe(8)


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _loggable_headers() -> dict[str, str]:
    return {
        name: _fingerprint(value) if name.lower() in _CREDENTIAL_HEADERS else value
        for name, value in request.headers.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    """Tag each request with an id, echo it back, and log its outcome."""

    @app.before_request
    def _open() -> None:
        g.request_id = _incoming_request_id()
        g.request_started = time.perf_counter()
        bind_request_id(g.request_id)
        if debug_mode:
            logger.debug(
                f"-> {request.method} {request.path} from {_client_ip()} "
                f"headers={_loggable_headers()} body_size={request.content_length or 0}"
            )

    @app.after_request
    def _close(response: Response) -> Response:
        elapsed_ms = (time.perf_counter() - g.get("request_started", time.perf_counter())) * 1000
        user_id = g.get("user_id")
        logger.info(
            f"{request.method} {request.path} -> {response.status_code} "
            f"in {elapsed_ms:.1f} ms (user={user_id if user_id is not None else '-'})"
        )
        response.headers[REQUEST_ID_HEADER] = g.get("request_id", "-")
        return response

    @app.teardown_request
    def _release(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"request aborted: {type(exc).__name__} on {request.method} {request.path}")
        reset_request_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
