"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

import logging

from fastapi import Header, HTTPException, status

from . import security

logger = logging.getLogger(__name__)


async def require_sync_key(x_sync_key: str | None = Header(default=None)) -> None:
    try:
        security.check_sync_key(x_sync_key)
    except security.SyncKeyNotConfigured as exc:
        logger.error("sync_key_not_configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server missing SYNC_KEY env var",
        ) from exc
    except security.SyncKeyMismatch as exc:
        logger.warning("sync_key_rejected header_present=%s", bool(security.normalize_incoming_key(x_sync_key)))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        ) from exc
