from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    BLANK = "blank"
    PASSWORD_TOO_SHORT = "password_too_short"
    USERNAME_INVALID_CHARS = "username_invalid_chars"
    PHOTO_URL_EXTENSION = "photo_url_extension"
