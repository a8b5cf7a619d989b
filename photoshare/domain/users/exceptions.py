# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum
from http import HTTPStatus

from photoshare.shared.errors.base import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
)


class EmailAlreadyExistsError(ConflictError):
    code = "email_already_exists"
    message = "Email already exists"


class UsernameAlreadyExistsError(ConflictError):
    code = "username_already_exists"
    message = "Username already exists"


class UserAlreadyExistsError(ConflictError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.BAD_REQUEST
    message = "Invalid email or password"


class UserNotFoundError(NotFoundError):
    code = "user_not_found"
    message = "User not found"


class NotAllowedError(AuthorizationError):
    pass


class MissingTokenError(AuthenticationError):
    code = "missing_token"


class TokenErrorReason(StrEnum):
    MALFORMED = "malformed"
    EXPIRED = "expired"
    BAD_SIGNATURE = "bad_signature"


class TokenError(AuthenticationError):
    code = "invalid_token"
    message = "Invalid or expired token"

    def __init__(self, reason: TokenErrorReason) -> None:
        super().__init__()
        self.reason = reason
