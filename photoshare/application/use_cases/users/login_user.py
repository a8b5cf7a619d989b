# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from photoshare.domain.users.exceptions import InvalidCredentialsError
from photoshare.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from photoshare.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._dummy_hash: str | None = None

    def execute(self, email: str, password: str) -> str:
        user = self._users.find_by_email(email)
        if user is None:
            # Unknown emails pay the same hashing cost as a wrong password.
            self._password_hasher.verify(password, self._unmatchable_hash())
            password_valid = False
        else:
            password_valid = self._password_hasher.verify(password, user.password_hash)

        if not password_valid:
            logger.info(f"auth.login: rejected (known_email={user is not None})")
            raise InvalidCredentialsError()

        return self._tokens.issue(user.id, user.email, user.username)

    def _unmatchable_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._password_hasher.hash(secrets.token_urlsafe(32))
        return self._dummy_hash
