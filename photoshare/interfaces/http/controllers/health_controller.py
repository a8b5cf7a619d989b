# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify
from sqlalchemy.exc import SQLAlchemyError

from photoshare.infrastructure.db import Database
from photoshare.shared.logging import logger


class HealthController:
    def __init__(self, *, database: Database) -> None:
        self._database = database

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("health", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self) -> tuple[Response, int]:
        status: dict[str, object] = {"ok": True}
        try:
            self._database.ping()
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("health: database unreachable")
            status["ok"] = False
            status["database"] = "error"
            return jsonify(status), HTTPStatus.SERVICE_UNAVAILABLE
        return jsonify(status), HTTPStatus.OK
