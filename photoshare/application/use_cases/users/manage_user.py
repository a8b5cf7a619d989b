# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Profile operations on the caller's own account."""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime

from photoshare.application.services.authorization import require_owner
from photoshare.domain.users.entities import Identity, User
from photoshare.domain.users.exceptions import (
    EmailAlreadyExistsError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
)
from photoshare.domain.users.repositories import PasswordHasher, UserRepository


class GetUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, identity: Identity, user_id: int) -> User:
        require_owner(identity, user_id, resource="user")
        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user


class UpdateUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(
        self,
        identity: Identity,
        user_id: int,
        *,
        username: str,
        email: str,
        password: str | None = None,
    ) -> User:
        require_owner(identity, user_id, resource="user")

        same_email = self._users.find_by_email(email)
        if same_email and same_email.id != user_id:
            raise EmailAlreadyExistsError()
        same_username = self._users.find_by_username(username)
        if same_username and same_username.id != user_id:
            raise UsernameAlreadyExistsError()

        user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()

        password_hash = user.password_hash
        if password:
            password_hash = self._password_hasher.hash(password)

        updated = replace(
            user,
            username=username,
            email=email,
            password_hash=password_hash,
            updated_at=datetime.now(UTC),
        )
        return self._users.save(updated)


class DeleteUserUseCase:
    """Deletes the caller's account together with every photo it owns."""

    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, identity: Identity, user_id: int) -> None:
        require_owner(identity, user_id, resource="user")
        if not self._users.delete(user_id):
            raise UserNotFoundError()
