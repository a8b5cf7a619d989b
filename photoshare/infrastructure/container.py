# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from photoshare.application.services.authorization import AuthorizationGate
from photoshare.application.services.password_hashing import WerkzeugPasswordHasher
from photoshare.application.use_cases.photos.manage_photos import (
    CreatePhotoUseCase,
    DeletePhotoUseCase,
    GetPhotoUseCase,
    ListPhotosUseCase,
    UpdatePhotoUseCase,
)
from photoshare.application.use_cases.users.login_user import LoginUserUseCase
from photoshare.application.use_cases.users.manage_user import (
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from photoshare.application.use_cases.users.register_user import RegisterUserUseCase
from photoshare.infrastructure.auth.jwt_tokens import JwtTokenService
from photoshare.infrastructure.db import Database
from photoshare.infrastructure.repositories import (
    SqlAlchemyPhotoRepository,
    SqlAlchemyUserRepository,
)
from photoshare.interfaces.http.controllers.health_controller import HealthController
from photoshare.interfaces.http.controllers.photos_controller import PhotosController
from photoshare.interfaces.http.controllers.users_controller import UsersController
from photoshare.shared.config import AppConfig


class Container:
    """Everything one application instance shares across requests."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            secret=self.config.auth.jwt_secret,
            algorithm=self.config.auth.jwt_algorithm,
            ttl_seconds=self.config.auth.jwt_ttl_seconds,
        )

    @cached_property
    def gate(self) -> AuthorizationGate:
        return AuthorizationGate(tokens=self.token_service)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database)

    @cached_property
    def photo_repository(self) -> SqlAlchemyPhotoRepository:
        return SqlAlchemyPhotoRepository(self.database)

    # User use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_service,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(users=self.user_repository)

    @cached_property
    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(users=self.user_repository)

    # Photo use cases

    @cached_property
    def list_photos_use_case(self) -> ListPhotosUseCase:
        return ListPhotosUseCase(photos=self.photo_repository)

    @cached_property
    def get_photo_use_case(self) -> GetPhotoUseCase:
        return GetPhotoUseCase(photos=self.photo_repository)

    @cached_property
    def create_photo_use_case(self) -> CreatePhotoUseCase:
        return CreatePhotoUseCase(photos=self.photo_repository)

    @cached_property
    def update_photo_use_case(self) -> UpdatePhotoUseCase:
        return UpdatePhotoUseCase(photos=self.photo_repository)

    @cached_property
    def delete_photo_use_case(self) -> DeletePhotoUseCase:
        return DeletePhotoUseCase(photos=self.photo_repository)

    # Controllers

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(
            gate=self.gate,
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            get_user_use_case=self.get_user_use_case,
            update_user_use_case=self.update_user_use_case,
            delete_user_use_case=self.delete_user_use_case,
        )

    @cached_property
    def photos_controller(self) -> PhotosController:
        return PhotosController(
            gate=self.gate,
            list_use_case=self.list_photos_use_case,
            get_use_case=self.get_photo_use_case,
            create_use_case=self.create_photo_use_case,
            update_use_case=self.update_photo_use_case,
            delete_use_case=self.delete_photo_use_case,
        )

    @cached_property
    def health_controller(self) -> HealthController:
        return HealthController(database=self.database)
