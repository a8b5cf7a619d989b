# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from photoshare.domain.users.entities import User as DomainUser
from photoshare.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from photoshare.domain.users.repositories import UserRepository
from photoshare.infrastructure.db.models import User
from photoshare.infrastructure.db.session import Database
from photoshare.shared.logging import logger


def _aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, database: Database) -> None:
        self._db = database

    def find_by_email(self, email: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            return _to_domain(row) if row else None

    def find_by_username(self, username: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.username == username)).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        with self._db.session_scope() as session:
            row = User(
                username=user.username,
                email=user.email,
                password_hash=user.password_hash,
                created_at=user.created_at,
                updated_at=user.updated_at,
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                logger.info("users.add: unique constraint hit, concurrent registration")
                raise UserAlreadyExistsError() from exc
            session.refresh(row)
            return _to_domain(row)

    def save(self, user: DomainUser) -> DomainUser:
        with self._db.session_scope() as session:
            row = session.get(User, user.id)
            if row is None:
                raise UserNotFoundError()
            row.username = user.username
            row.email = user.email
            row.password_hash = user.password_hash
            row.updated_at = user.updated_at
            try:
                session.flush()
            except IntegrityError as exc:
                logger.info(f"users.save: unique constraint hit (user_id={user.id})")
                raise UserAlreadyExistsError() from exc
            session.refresh(row)
            return _to_domain(row)

    def delete(self, user_id: int) -> bool:
        with self._db.session_scope() as session:
            row = session.get(User, user_id)
            if row is None:
                return False
            photo_count = len(row.photos)
            session.delete(row)
            logger.info(f"users.delete: user_id={user_id} cascaded_photos={photo_count}")
            return True
