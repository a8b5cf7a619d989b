# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast


@dataclass(slots=True, eq=False)
class AppError(Exception):
    code: str
    status: HTTPStatus
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or cast(str | None, getattr(self, "message", None))
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            message=resolved_message,
            context=context,
        )


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, message=message, context=context)


class StorageError(InfrastructureError):
    def __init__(self) -> None:
        super().__init__("storage_error", message="Internal storage failure")


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            message=message,
            context=context,
        )


class ConflictError(DomainError):
    code = "conflict"
    status = HTTPStatus.CONFLICT


class NotFoundError(DomainError):
    code = "not_found"
    status = HTTPStatus.NOT_FOUND


class AuthenticationError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "Authentication required"


class AuthorizationError(DomainError):
    # Ownership mismatches answer 401 like unauthenticated requests.
    code = "not_allowed"
    status = HTTPStatus.UNAUTHORIZED
    message = "Not allowed"


class InvalidIdentifierError(ValidationError):
    def __init__(self, resource: str, raw_value: str) -> None:
        super().__init__(
            code=f"invalid_{resource}_id",
            message=f"Invalid {resource} ID",
            context={"value": raw_value},
        )
