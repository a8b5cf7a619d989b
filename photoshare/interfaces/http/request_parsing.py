# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from photoshare.shared.errors import InvalidIdentifierError
from photoshare.shared.errors.validation import raise_validation_error

DTO = TypeVar("DTO", bound=BaseModel)
# Largest value a signed 64-bit INTEGER column holds.
_MAX_ID = 2**63 - 1


def parse_body(dto: type[DTO]) -> DTO:
    try:
        return dto.model_validate(request.get_json(silent=True) or {})
    except ValidationError as exc:
        raise_validation_error(exc)


def parse_id(raw_value: str, resource: str) -> int:
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise InvalidIdentifierError(resource, raw_value) from exc
    if not 0 < value <= _MAX_ID:
        raise InvalidIdentifierError(resource, raw_value)
    return value


__all__ = ["parse_body", "parse_id"]
