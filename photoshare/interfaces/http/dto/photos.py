from __future__ import annotations

from datetime import datetime
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from photoshare.shared.errors.validation_types import ValidationErrorType

ALLOWED_PHOTO_EXTENSIONS = ("jpg", "jpeg", "png", "gif")


def is_url_with_extension(value: str, extensions: tuple[str, ...]) -> bool:
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return False
    path = parsed.path.lower()
    return any(path.endswith(f".{ext}") for ext in extensions)


class PhotoFormDTO(BaseModel):
    title: str = Field(max_length=255)
    caption: str | None = Field(default=None, max_length=2000)
    photo_url: str = Field(max_length=2048)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError(ValidationErrorType.BLANK, "Title cannot be empty", {})
        return value

    @field_validator("caption")
    @classmethod
    def normalize_caption(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("photo_url")
    @classmethod
    def validate_photo_url(cls, value: str) -> str:
        value = value.strip()
        if not is_url_with_extension(value, ALLOWED_PHOTO_EXTENSIONS):
            raise PydanticCustomError(
                ValidationErrorType.PHOTO_URL_EXTENSION,
                "Invalid photo URL or does not end with the desired extension",
                {"extensions": ", ".join(ALLOWED_PHOTO_EXTENSIONS)},
            )
        return value


class PhotoResultDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    caption: str | None
    photo_url: str
    user_id: int
    email: str
    created_at: datetime
    updated_at: datetime
