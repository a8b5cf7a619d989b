# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Photo, PhotoView


class PhotoRepository(Protocol):
    def list_for_owner(self, owner_id: int) -> Sequence[PhotoView]: ...
    def find_for_owner(self, photo_id: int, owner_id: int) -> PhotoView | None: ...
    def find_by_id(self, photo_id: int) -> Photo | None: ...
    def add(self, photo: Photo) -> PhotoView: ...
    def save(self, photo: Photo) -> PhotoView: ...
    def delete(self, photo_id: int) -> bool: ...
