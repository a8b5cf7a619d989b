# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from __future__ import annotations

from http import HTTPStatus
from time import perf_counter

from flask import Blueprint, Response, jsonify

from photoshare.application.services.authorization import AuthorizationGate
from photoshare.application.use_cases.photos.manage_photos import (
    CreatePhotoUseCase,
    DeletePhotoUseCase,
    GetPhotoUseCase,
    ListPhotosUseCase,
    UpdatePhotoUseCase,
)
from photoshare.domain.photos.entities import PhotoView
from photoshare.infrastructure.auth import auth_required, current_identity
from photoshare.interfaces.http.dto.photos import PhotoFormDTO, PhotoResultDTO
from photoshare.interfaces.http.request_parsing import parse_body, parse_id
from photoshare.shared.logging import logger


def _dump(photo: PhotoView) -> dict:
    return PhotoResultDTO.model_validate(photo).model_dump(mode="json")


class PhotosController:
    def __init__(
        self,
        *,
        gate: AuthorizationGate,
        list_use_case: ListPhotosUseCase,
        get_use_case: GetPhotoUseCase,
        create_use_case: CreatePhotoUseCase,
        update_use_case: UpdatePhotoUseCase,
        delete_use_case: DeletePhotoUseCase,
    ) -> None:
        self._gate = gate
        self._list_use_case = list_use_case
        self._get_use_case = get_use_case
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._delete_use_case = delete_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("photos", __name__, url_prefix="/api")
        bp.add_url_rule("/photos", view_func=self.list_photos, methods=["GET"])
        bp.add_url_rule("/photos", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/photos/<photo_id>", view_func=self.get_photo, methods=["GET"])
        bp.add_url_rule("/photos/<photo_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/photos/<photo_id>", view_func=self.delete, methods=["DELETE"])
        return bp

    @auth_required
    def list_photos(self) -> tuple[Response, int]:
        t0 = perf_counter()
        identity = current_identity()
        items = self._list_use_case.execute(identity)
        dt = (perf_counter() - t0) * 1000
        logger.info(f"photos.list: ok (user_id={identity.user_id}, n={len(items)}, dt_ms={dt:.0f})")
        return jsonify({"data": [_dump(photo) for photo in items]}), HTTPStatus.OK

    @auth_required
    def get_photo(self, photo_id: str) -> tuple[Response, int]:
        target_id = parse_id(photo_id, "photo")
        photo = self._get_use_case.execute(current_identity(), target_id)
        return jsonify({"data": _dump(photo)}), HTTPStatus.OK

    @auth_required
    def create(self) -> tuple[Response, int]:
        dto = parse_body(PhotoFormDTO)
        identity = current_identity()

        photo = self._create_use_case.execute(
            identity,
            title=dto.title,
            caption=dto.caption,
            photo_url=dto.photo_url,
        )

        logger.info(f"photo.create: ok (user_id={identity.user_id}, photo_id={photo.id})")
        payload = {"message": "Photo successfully added", "data": _dump(photo)}
        return jsonify(payload), HTTPStatus.CREATED

    @auth_required
    def update(self, photo_id: str) -> tuple[Response, int]:
        target_id = parse_id(photo_id, "photo")
        dto = parse_body(PhotoFormDTO)
        identity = current_identity()

        photo = self._update_use_case.execute(
            identity,
            target_id,
            title=dto.title,
            caption=dto.caption,
            photo_url=dto.photo_url,
        )

        logger.info(f"photo.update: ok (user_id={identity.user_id}, photo_id={photo.id})")
        payload = {"message": "Photo successfully updated", "data": _dump(photo)}
        return jsonify(payload), HTTPStatus.OK

    @auth_required
    def delete(self, photo_id: str) -> tuple[Response, int]:
        target_id = parse_id(photo_id, "photo")
        identity = current_identity()
        self._delete_use_case.execute(identity, target_id)
        logger.info(f"photo.delete: ok (user_id={identity.user_id}, photo_id={target_id})")
        return jsonify({"message": "Photo successfully deleted"}), HTTPStatus.OK
