"""
Auth diagnostics endpoint.

Only mounted when ENABLE_AUTH_DEBUG is set (see `api/main.py`). Never echoes
the secret itself.
"""

from __future__ import annotations

from fastapi import APIRouter, Header

from . import security

router = APIRouter()


@router.get("/debug/auth")
async def debug_auth(x_sync_key: str | None = Header(default=None)) -> dict:
    return security.describe_keys(x_sync_key)
