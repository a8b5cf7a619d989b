# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sqlalchemy_photo_repository import SqlAlchemyPhotoRepository
from .sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = ["SqlAlchemyPhotoRepository", "SqlAlchemyUserRepository"]
