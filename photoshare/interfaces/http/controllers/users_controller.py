# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from photoshare.application.services.authorization import AuthorizationGate
from photoshare.application.use_cases.users.login_user import LoginUserUseCase
from photoshare.application.use_cases.users.manage_user import (
    DeleteUserUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
)
from photoshare.application.use_cases.users.register_user import RegisterUserUseCase
from photoshare.infrastructure.auth import auth_required, current_identity
from photoshare.interfaces.http.dto.users import (
    LoginRequestDTO,
    RegisterRequestDTO,
    TokenDTO,
    UpdateUserRequestDTO,
    UserResultDTO,
)
from photoshare.interfaces.http.request_parsing import parse_body, parse_id
from photoshare.shared.logging import logger


class UsersController:
    def __init__(
        self,
        *,
        gate: AuthorizationGate,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        get_user_use_case: GetUserUseCase,
        update_user_use_case: UpdateUserUseCase,
        delete_user_use_case: DeleteUserUseCase,
    ) -> None:
        self._gate = gate
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._get_user_use_case = get_user_use_case
        self._update_user_use_case = update_user_use_case
        self._delete_user_use_case = delete_user_use_case

    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO)

        user = self._register_use_case.execute(dto.username, dto.email, dto.password)

        logger.info(f"users.register: ok user_id={user.id}")
        payload = {
            "message": "Account created successfully",
            "data": UserResultDTO.model_validate(user).model_dump(mode="json"),
        }
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO)

        token = self._login_use_case.execute(dto.email, dto.password)

        logger.info("users.login: ok")
        return jsonify(TokenDTO(token=token).model_dump()), HTTPStatus.OK

    @auth_required
    def get_user(self, user_id: str) -> tuple[Response, int]:
        target_id = parse_id(user_id, "user")
        user = self._get_user_use_case.execute(current_identity(), target_id)
        return jsonify({"data": UserResultDTO.model_validate(user).model_dump(mode="json")}), HTTPStatus.OK

    @auth_required
    def update_user(self, user_id: str) -> tuple[Response, int]:
        target_id = parse_id(user_id, "user")
        dto = parse_body(UpdateUserRequestDTO)

        user = self._update_user_use_case.execute(
            current_identity(),
            target_id,
            username=dto.username,
            email=dto.email,
            password=dto.password,
        )

        logger.info(f"users.update: ok user_id={user.id} password_changed={dto.password is not None}")
        payload = {
            "message": "User updated successfully",
            "data": UserResultDTO.model_validate(user).model_dump(mode="json"),
        }
        return jsonify(payload), HTTPStatus.OK

    @auth_required
    def delete_user(self, user_id: str) -> tuple[Response, int]:
        target_id = parse_id(user_id, "user")
        self._delete_user_use_case.execute(current_identity(), target_id)
        logger.info(f"users.delete: ok user_id={target_id}")
        return jsonify({"message": "User deleted successfully"}), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__, url_prefix="/api/users")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/<user_id>", view_func=self.get_user, methods=["GET"])
        bp.add_url_rule("/<user_id>", view_func=self.update_user, methods=["PUT"])
        bp.add_url_rule("/<user_id>", view_func=self.delete_user, methods=["DELETE"])
        return bp
