# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from photoshare.application.services.authorization import require_owner
from photoshare.domain.photos.entities import Photo, PhotoView
from photoshare.domain.photos.exceptions import PhotoNotFoundError
from photoshare.domain.photos.repositories import PhotoRepository
from photoshare.domain.users.entities import Identity


class ListPhotosUseCase:
    def __init__(self, *, photos: PhotoRepository) -> None:
        self._photos = photos

    def execute(self, identity: Identity) -> Sequence[PhotoView]:
        return self._photos.list_for_owner(identity.user_id)


class GetPhotoUseCase:
    def __init__(self, *, photos: PhotoRepository) -> None:
        self._photos = photos

    def execute(self, identity: Identity, photo_id: int) -> PhotoView:
        photo = self._photos.find_for_owner(photo_id, identity.user_id)
        if photo is None:
            raise PhotoNotFoundError(photo_id)
        return photo


class CreatePhotoUseCase:
    def __init__(self, *, photos: PhotoRepository) -> None:
        self._photos = photos

    def execute(
        self,
        identity: Identity,
        *,
        title: str,
        photo_url: str,
        caption: str | None = None,
    ) -> PhotoView:
        now = datetime.now(UTC)
        photo = Photo(
            id=0,
            title=title,
            caption=caption,
            photo_url=photo_url,
            user_id=identity.user_id,
            created_at=now,
            updated_at=now,
        )
        return self._photos.add(photo)


class UpdatePhotoUseCase:
    def __init__(self, *, photos: PhotoRepository) -> None:
        self._photos = photos

    def execute(
        self,
        identity: Identity,
        photo_id: int,
        *,
        title: str,
        photo_url: str,
        caption: str | None = None,
    ) -> PhotoView:
        # Scoped lookup: another user's photo is indistinguishable from a missing one.
        current = self._photos.find_for_owner(photo_id, identity.user_id)
        if current is None:
            raise PhotoNotFoundError(photo_id)

        updated = Photo(
            id=current.id,
            title=title,
            caption=caption,
            photo_url=photo_url,
            user_id=current.user_id,
            created_at=current.created_at,
            updated_at=datetime.now(UTC),
        )
        return self._photos.save(updated)


class DeletePhotoUseCase:
    def __init__(self, *, photos: PhotoRepository) -> None:
        self._photos = photos

    def execute(self, identity: Identity, photo_id: int) -> None:
        photo = self._photos.find_by_id(photo_id)
        if photo is None:
            raise PhotoNotFoundError(photo_id)
        require_owner(identity, photo.user_id, resource="photo")
        self._photos.delete(photo_id)
