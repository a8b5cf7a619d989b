from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select

from photoshare.domain.photos.entities import Photo
from photoshare.domain.users.entities import User
from photoshare.domain.users.exceptions import UserAlreadyExistsError, UserNotFoundError
from photoshare.infrastructure.db import Database, models
from photoshare.infrastructure.repositories import (
    SqlAlchemyPhotoRepository,
    SqlAlchemyUserRepository,
)
from photoshare.shared.config import DatabaseConfig


@pytest.fixture()
def database():
    db = Database(DatabaseConfig(url="sqlite://"))
    db.create_all()
    yield db
    db.drop_all()
    db.dispose()


@pytest.fixture()
def user_repo(database: Database) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(database)


def _user(username: str, email: str) -> User:
    now = datetime.now(UTC)
    return User(
        id=0,
        username=username,
        email=email,
        password_hash="pbkdf2:sha256:1000$salt$hash",
        created_at=now,
        updated_at=now,
    )


def _count(database: Database, model) -> int:
    with database.session_scope() as session:
        return session.scalar(select(func.count()).select_from(model))


def test_add_same_email_twice_keeps_one_row(database: Database, user_repo) -> None:
    # Both registrations passed the use case's lookup before either inserted.
    user_repo.add(_user("alice", "alice@example.com"))

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        user_repo.add(_user("alice2", "alice@example.com"))

    assert exc_info.value.status == 409
    assert exc_info.value.code == "user_already_exists"
    assert _count(database, models.User) == 1


def test_save_onto_taken_username_is_conflict(user_repo) -> None:
    user_repo.add(_user("alice", "alice@example.com"))
    bob = user_repo.add(_user("bob", "bob@example.com"))

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        user_repo.save(replace(bob, username="alice"))

    assert exc_info.value.status == 409
    assert user_repo.find_by_id(bob.id).username == "bob"
    assert user_repo.find_by_username("alice").email == "alice@example.com"


def test_add_photo_for_removed_owner_is_not_found(database: Database, user_repo) -> None:
    alice = user_repo.add(_user("alice", "alice@example.com"))
    user_repo.delete(alice.id)
    now = datetime.now(UTC)

    with pytest.raises(UserNotFoundError) as exc_info:
        SqlAlchemyPhotoRepository(database).add(
            Photo(
                id=0,
                title="Cat",
                caption=None,
                photo_url="https://cdn.example.com/cat.jpg",
                user_id=alice.id,
                created_at=now,
                updated_at=now,
            )
        )

    assert exc_info.value.status == 404
    assert _count(database, models.Photo) == 0
