# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-request identity verification and ownership checks."""

from __future__ import annotations

from photoshare.domain.users.entities import Identity
from photoshare.domain.users.exceptions import MissingTokenError, NotAllowedError
from photoshare.domain.users.repositories import TokenService
from photoshare.shared.logging import logger

_BEARER_PREFIX = "bearer "


def extract_bearer_token(header_value: str | None) -> str | None:
    """Return the token carried by an ``Authorization`` header value.

    Both ``Bearer <token>`` and a bare token are accepted.
    """
    if not header_value:
        return None
    value = header_value.strip()
    if value.lower() == _BEARER_PREFIX.strip():
        return None
    if value.lower().startswith(_BEARER_PREFIX):
        value = value[len(_BEARER_PREFIX):].strip()
    return value or None


class AuthorizationGate:
    """Turns a raw ``Authorization`` header into a verified :class:`Identity`.

    The gate never touches the credential store: a request without a
    verifiable token is rejected before any resource lookup happens.
    """

    def __init__(self, *, tokens: TokenService) -> None:
        self._tokens = tokens

    def authenticate(self, header_value: str | None) -> Identity:
        token = extract_bearer_token(header_value)
        if token is None:
            raise MissingTokenError()
        identity = self._tokens.verify(token)
        logger.debug(f"auth.gate: identity bound user_id={identity.user_id}")
        return identity


def require_owner(identity: Identity, owner_id: int, *, resource: str) -> None:
    if identity.user_id != owner_id:
        logger.warning(
            f"auth.gate: ownership denied on {resource} "
            f"(requester={identity.user_id}, owner={owner_id})"
        )
        raise NotAllowedError()


__all__ = ["AuthorizationGate", "extract_bearer_token", "require_owner"]
