# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str
    password_hash: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """Verified bearer of a token, bound to the request for its lifetime."""

    user_id: int
    email: str
    username: str
    issued_at: datetime
    expires_at: datetime
