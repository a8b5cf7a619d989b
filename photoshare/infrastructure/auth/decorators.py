# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, cast

from flask import g, request

from photoshare.application.services.authorization import AuthorizationGate
from photoshare.domain.users.entities import Identity
from photoshare.domain.users.exceptions import MissingTokenError
from photoshare.shared.logging import logger


class _GatedController(Protocol):
    _gate: AuthorizationGate


def auth_required(f: Callable[..., Any]) -> Callable[..., Any]:
    """Run the controller's gate before the view and bind the identity to ``g``."""

    @wraps(f)
    def inner(self: _GatedController, *a: Any, **kw: Any) -> Any:
        try:
            identity = self._gate.authenticate(request.headers.get("Authorization"))
        except MissingTokenError:
            logger.warning(
                f"No Authorization header on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise

        g.identity = identity
        g.user_id = identity.user_id
        logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")
        return f(self, *a, **kw)

    return inner


def current_identity() -> Identity:
    """Return the identity bound by :func:`auth_required` for this request."""
    identity = getattr(g, "identity", None)
    if identity is None:
        raise MissingTokenError()
    return cast(Identity, identity)


__all__ = ["auth_required", "current_identity"]
