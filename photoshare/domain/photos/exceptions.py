# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from photoshare.shared.errors.base import NotFoundError


class PhotoNotFoundError(NotFoundError):
    code = "photo_not_found"
    message = "Photo not found"

    def __init__(self, photo_id: int) -> None:
        super().__init__(context={"photo_id": photo_id})
