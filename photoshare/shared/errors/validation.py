# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Turns pydantic failures into the API's 400 ``validation_error`` body."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import ErrorDetails

from .base import ValidationError


def _field_path(loc: Sequence[int | str]) -> str:
    return ".".join(str(part) for part in loc)


def _describe(error: ErrorDetails) -> dict[str, Any]:
    described: dict[str, Any] = {
        "field": _field_path(error["loc"]) or "body",
        "type": error["type"],
        "message": error["msg"],
    }
    if "ctx" in error:
        # ctx may hold exceptions or other non-JSON values
        described["ctx"] = {key: str(value) for key, value in error["ctx"].items()}
    return described


def validation_context(exc: PydanticValidationError) -> dict[str, Any]:
    errors = [_describe(error) for error in exc.errors(include_url=False, include_input=False)]
    return {
        "fields": sorted({error["field"] for error in errors}),
        "errors": errors,
    }


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    context = validation_context(exc)
    first = context["errors"][0]
    raise ValidationError(message=f"{first['field']}: {first['message']}", context=context) from exc


__all__ = ["raise_validation_error", "validation_context"]
