"""Translate raw store failures into ExternalServiceError."""

from __future__ import annotations

import logging
from contextlib import contextmanager

from oficina.domain.exceptions import ExternalServiceError, StoreError
from oficina.domain.repository.vehicle_repository import UNIQUE_VIOLATION

logger = logging.getLogger(__name__)

_MESSAGES = {
    UNIQUE_VIOLATION: "A vehicle with this plate already exists",
}


@contextmanager
def translate_store_errors(action: str):
    """Re-raise any StoreError inside the block as ExternalServiceError.

    Known error codes get a fixed, readable message; anything else keeps
    the store's own message prefixed with *action*.
    """
    try:
        yield
    except StoreError as exc:
        logger.error("Store failure while trying to %s: [%s] %s", action, exc.code, exc.message)
        message = _MESSAGES.get(exc.code, f"Could not {action}: {exc.message}")
        raise ExternalServiceError(message) from exc
