# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .logger import bind_request_id, logger, reset_request_id, setup_logging
from .redaction import redact

__all__ = ["bind_request_id", "logger", "redact", "reset_request_id", "setup_logging"]
