# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Scrubs credentials out of log lines before any sink sees them."""

from __future__ import annotations

import re
from typing import Any

_REDACTIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"eyJ[\w-]+\.[\w-]+\.[\w-]+"), "***JWT***"),
    (re.compile(r"(?i)\b(bearer\s+)[\w.~+/-]{16,}=*"), r"\1***"),
    (re.compile(r"(?i)\b(authorization\s*:\s*)\S+"), r"\1***"),
    (
        re.compile(r"(?i)\b(password|password_hash|jwt_secret|secret_key|token)(\s*[=:]\s*[\"']?)[^\s\"',)]+"),
        r"\1\2***",
    ),
    (re.compile(r"(\b[a-z][\w+]*://[^:/\s@]+:)[^@\s]+@"), r"\1***@"),
    (re.compile(r"[\w.%+-]+@([\w-]+(?:\.[\w-]+)+)"), r"***@\1"),
)


def redact(message: str) -> str:
    for pattern, replacement in _REDACTIONS:
        message = pattern.sub(replacement, message)
    return message


def redact_record(record: dict[str, Any]) -> bool:
    """loguru filter: rewrites the message in place and never drops the record."""
    record["message"] = redact(record["message"])
    return True


__all__ = ["redact", "redact_record"]
