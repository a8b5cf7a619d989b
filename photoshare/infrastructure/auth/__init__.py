# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .decorators import auth_required, current_identity
from .jwt_tokens import JwtTokenService

__all__ = ["JwtTokenService", "auth_required", "current_identity"]
