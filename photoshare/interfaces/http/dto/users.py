from __future__ import annotations

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from photoshare.shared.errors.validation_types import ValidationErrorType

MIN_PASSWORD_LENGTH = 6
_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


def _check_username(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError(ValidationErrorType.BLANK, "Username cannot be empty", {})
    if not _USERNAME_PATTERN.match(value):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS,
            "Username may contain only letters, digits, '_', '.' and '-'",
            {"pattern": _USERNAME_PATTERN.pattern},
        )
    return value


def _check_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise PydanticCustomError(
            ValidationErrorType.PASSWORD_TOO_SHORT,
            "Password must be at least {min_length} characters",
            {"min_length": MIN_PASSWORD_LENGTH},
        )
    return value


class RegisterRequestDTO(BaseModel):
    username: str = Field(max_length=64)
    email: EmailStr
    password: str = Field(max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password(value)


class LoginRequestDTO(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)  # No length policy on login


class UpdateUserRequestDTO(BaseModel):
    username: str = Field(max_length=64)
    email: EmailStr
    password: str | None = Field(default=None, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return _check_password(value)


class UserResultDTO(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime


class TokenDTO(BaseModel):
    message: str = "Login successful"
    token: str
