# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .photos.entities import Photo, PhotoView
from .photos.exceptions import PhotoNotFoundError
from .users.entities import Identity, User
from .users.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    MissingTokenError,
    NotAllowedError,
    TokenError,
    TokenErrorReason,
    UserAlreadyExistsError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
)

__all__ = [
    "EmailAlreadyExistsError",
    "Identity",
    "InvalidCredentialsError",
    "MissingTokenError",
    "NotAllowedError",
    "Photo",
    "PhotoNotFoundError",
    "PhotoView",
    "TokenError",
    "TokenErrorReason",
    "User",
    "UserAlreadyExistsError",
    "UserNotFoundError",
    "UsernameAlreadyExistsError",
]
