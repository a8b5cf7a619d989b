# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Photo:

    id: int
    title: str
    caption: str | None
    photo_url: str
    user_id: int
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class PhotoView:
    """A photo joined with its owner's email, as returned to clients."""

    id: int
    title: str
    caption: str | None
    photo_url: str
    user_id: int
    email: str
    created_at: datetime
    updated_at: datetime
