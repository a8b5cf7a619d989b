# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from photoshare.domain.users.entities import User
from photoshare.domain.users.exceptions import EmailAlreadyExistsError, UsernameAlreadyExistsError
from photoshare.domain.users.repositories import PasswordHasher, UserRepository


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, email: str, password: str) -> User:
        if self._users.find_by_email(email):
            raise EmailAlreadyExistsError()
        if self._users.find_by_username(username):
            raise UsernameAlreadyExistsError()
        now = datetime.now(UTC)
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            username=username,
            email=email,
            password_hash=hashed,
            created_at=now,
            updated_at=now,
        )
        return self._users.add(user)
