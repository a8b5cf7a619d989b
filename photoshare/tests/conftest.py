from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from photoshare.domain.photos.entities import Photo, PhotoView
from photoshare.domain.photos.repositories import PhotoRepository
from photoshare.domain.users.entities import Identity, User
from photoshare.domain.users.repositories import PasswordHasher, UserRepository
from photoshare.shared.config import AppConfig, AuthConfig, DatabaseConfig, SecurityConfig

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1
        self.on_delete: list[int] = []

    def find_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def save(self, user: User) -> User:
        self._users[user.id] = user
        return user

    def delete(self, user_id: int) -> bool:
        self.on_delete.append(user_id)
        return self._users.pop(user_id, None) is not None

    def __len__(self) -> int:
        return len(self._users)


class InMemoryPhotoRepository(PhotoRepository):
    def __init__(self, emails: dict[int, str] | None = None) -> None:
        self._photos: dict[int, Photo] = {}
        self._emails = emails or {}
        self._seq = 1

    def _view(self, photo: Photo) -> PhotoView:
        return PhotoView(
            id=photo.id,
            title=photo.title,
            caption=photo.caption,
            photo_url=photo.photo_url,
            user_id=photo.user_id,
            email=self._emails.get(photo.user_id, f"user{photo.user_id}@example.com"),
            created_at=photo.created_at,
            updated_at=photo.updated_at,
        )

    def list_for_owner(self, owner_id: int) -> Sequence[PhotoView]:
        owned = [p for p in self._photos.values() if p.user_id == owner_id]
        owned.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return [self._view(p) for p in owned]

    def find_for_owner(self, photo_id: int, owner_id: int) -> PhotoView | None:
        photo = self._photos.get(photo_id)
        if photo is None or photo.user_id != owner_id:
            return None
        return self._view(photo)

    def find_by_id(self, photo_id: int) -> Photo | None:
        return self._photos.get(photo_id)

    def add(self, photo: Photo) -> PhotoView:
        stored = replace(photo, id=self._seq)
        self._seq += 1
        self._photos[stored.id] = stored
        return self._view(stored)

    def save(self, photo: Photo) -> PhotoView:
        self._photos[photo.id] = photo
        return self._view(photo)

    def delete(self, photo_id: int) -> bool:
        return self._photos.pop(photo_id, None) is not None

    def __len__(self) -> int:
        return len(self._photos)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


def make_identity(user_id: int, email: str | None = None, username: str | None = None) -> Identity:
    now = datetime.now(UTC)
    return Identity(
        user_id=user_id,
        email=email or f"user{user_id}@example.com",
        username=username or f"user{user_id}",
        issued_at=now,
        expires_at=now + timedelta(hours=1),
    )


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def photos() -> InMemoryPhotoRepository:
    return InMemoryPhotoRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def identity_factory():
    return make_identity


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        app_env="test",
        secret_key="test-flask-secret",
        log_level="WARNING",
        database=DatabaseConfig(url="sqlite://"),
        auth=AuthConfig(
            jwt_secret=TEST_SECRET,
            jwt_ttl_seconds=3600,
            # Fast hashing keeps the suite quick.
            password_hash_method="pbkdf2:sha256:1000",
        ),
        security=SecurityConfig(allowed_origins=["http://localhost:3000"]),
    )
