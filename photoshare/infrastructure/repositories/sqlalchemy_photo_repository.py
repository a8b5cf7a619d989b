# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from photoshare.domain.photos.entities import Photo as DomainPhoto
from photoshare.domain.photos.entities import PhotoView
from photoshare.domain.photos.exceptions import PhotoNotFoundError
from photoshare.domain.photos.repositories import PhotoRepository
from photoshare.domain.users.exceptions import UserNotFoundError
from photoshare.infrastructure.db.models import Photo, User
from photoshare.infrastructure.db.session import Database
from photoshare.shared.logging import logger


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _view_query() -> Select:
    return select(Photo, User.email).join(User, User.id == Photo.user_id)


def _to_view(row: Photo, email: str) -> PhotoView:
    return PhotoView(
        id=row.id,
        title=row.title,
        caption=row.caption,
        photo_url=row.photo_url,
        user_id=row.user_id,
        email=email,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


def _to_domain(row: Photo) -> DomainPhoto:
    return DomainPhoto(
        id=row.id,
        title=row.title,
        caption=row.caption,
        photo_url=row.photo_url,
        user_id=row.user_id,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


def _load_view(session: Session, photo_id: int) -> PhotoView:
    result = session.execute(_view_query().where(Photo.id == photo_id)).first()
    if result is None:
        raise PhotoNotFoundError(photo_id)
    return _to_view(result[0], result[1])


class SqlAlchemyPhotoRepository(PhotoRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def list_for_owner(self, owner_id: int) -> Sequence[PhotoView]:
        with self._db.session_scope() as session:
            rows = session.execute(
                _view_query()
                .where(Photo.user_id == owner_id)
                .order_by(Photo.created_at.desc(), Photo.id.desc())
            ).all()
            return [_to_view(photo, email) for photo, email in rows]

    def find_for_owner(self, photo_id: int, owner_id: int) -> PhotoView | None:
        with self._db.session_scope() as session:
            result = session.execute(
                _view_query().where(Photo.id == photo_id, Photo.user_id == owner_id)
            ).first()
            if result is None:
                return None
            return _to_view(result[0], result[1])

    def find_by_id(self, photo_id: int) -> DomainPhoto | None:
        with self._db.session_scope() as session:
            row = session.get(Photo, photo_id)
            return _to_domain(row) if row else None

    def add(self, photo: DomainPhoto) -> PhotoView:
        with self._db.session_scope() as session:
            row = Photo(
                title=photo.title,
                caption=photo.caption,
                photo_url=photo.photo_url,
                user_id=photo.user_id,
                created_at=photo.created_at,
                updated_at=photo.updated_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                # Only the owner foreign key can fail here: the account is gone.
                logger.info(f"photos.add: owner missing (user_id={photo.user_id})")
                raise UserNotFoundError() from exc
            return _load_view(session, row.id)

    def save(self, photo: DomainPhoto) -> PhotoView:
        with self._db.session_scope() as session:
            row = session.get(Photo, photo.id)
            if row is None:
                raise PhotoNotFoundError(photo.id)
            row.title = photo.title
            row.caption = photo.caption
            row.photo_url = photo.photo_url
            row.updated_at = photo.updated_at
            session.flush()
            return _load_view(session, row.id)

    def delete(self, photo_id: int) -> bool:
        with self._db.session_scope() as session:
            row = session.get(Photo, photo_id)
            if row is None:
                return False
            session.delete(row)
            return True
