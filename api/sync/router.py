"""
FastAPI router for the sheet sync endpoint.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import ValidationError

from auth import dependencies as auth_dependencies

from . import schemas, service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/sync", dependencies=[Depends(auth_dependencies.require_sync_key)])
async def sync_sheet(body: Any = Body(default=None)) -> dict:
    """
    Replace one sheet's data for one business.

    Responds only after the write has committed, so the status code reflects
    the real outcome.
    """
    try:
        payload = schemas.SyncRequest.model_validate(body)
    except ValidationError as exc:
        logger.warning("sync_invalid_payload errors=%s", exc.error_count())
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload") from exc

    try:
        await service.run_sync(payload)
    except service.UnknownSheet as exc:
        logger.warning("sync_unknown_sheet business_id=%s sheet=%s", payload.business_id, payload.sheet)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown sheet") from exc
    except Exception as exc:
        logger.exception(
            "sync_failed business_id=%s sheet=%s timestamp=%s",
            payload.business_id,
            payload.sheet,
            payload.timestamp,
        )
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Sync failed") from exc

    return {"status": "ok"}
