# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-bounded bearer tokens (HMAC JWT via PyJWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from photoshare.domain.users.entities import Identity
from photoshare.domain.users.exceptions import TokenError, TokenErrorReason
from photoshare.domain.users.repositories import TokenService
from photoshare.shared.logging import logger

_REQUIRED_CLAIMS = ["sub", "iat", "exp", "email", "username"]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    def __init__(
        self,
        *,
        secret: str,
        algorithm: str = "HS256",
        ttl_seconds: int = 60 * 60 * 24,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("JWT signing secret is not configured")
        if ttl_seconds <= 0:
            raise ValueError("JWT ttl must be positive")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock

    def issue(self, user_id: int, email: str, username: str) -> str:
        issued_at = self._clock()
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "username": username,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        logger.debug(f"auth.token: issued user_id={user_id} exp={payload['exp']}")
        return token

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenError(TokenErrorReason.EXPIRED) from exc
        except jwt.InvalidSignatureError as exc:
            raise TokenError(TokenErrorReason.BAD_SIGNATURE) from exc
        except jwt.InvalidTokenError as exc:
            raise TokenError(TokenErrorReason.MALFORMED) from exc

        try:
            user_id = int(payload["sub"])
        except (TypeError, ValueError) as exc:
            raise TokenError(TokenErrorReason.MALFORMED) from exc

        return Identity(
            user_id=user_id,
            email=str(payload["email"]),
            username=str(payload["username"]),
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )


__all__ = ["JwtTokenService"]
