"""
Public read endpoints for the client app.

No auth. Failures are logged and answered with a generic 500; internal error
text never reaches the caller.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from . import service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/business")


def _load_failed(resource: str, business_id: str, exc: Exception) -> HTTPException:
    logger.error("read_failed resource=%s business_id=%s", resource, business_id, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to load {resource}",
    )


@router.get("/{business_id}/menu")
async def get_menu(business_id: str) -> dict:
    try:
        items = await service.menu(business_id)
    except Exception as exc:
        raise _load_failed("menu", business_id, exc) from exc
    return {"business_id": business_id, "menu": items}


@router.get("/{business_id}/hours")
async def get_hours(business_id: str) -> dict:
    try:
        entries = await service.hours(business_id)
    except Exception as exc:
        raise _load_failed("hours", business_id, exc) from exc
    return {"business_id": business_id, "hours": entries}


@router.get("/{business_id}/location")
async def get_location(business_id: str) -> dict:
    try:
        current = await service.location(business_id)
    except Exception as exc:
        raise _load_failed("location", business_id, exc) from exc
    return {"business_id": business_id, "location": current}


@router.get("/{business_id}/status")
async def get_status(business_id: str) -> dict:
    try:
        current = await service.sync_status(business_id)
    except Exception as exc:
        raise _load_failed("status", business_id, exc) from exc
    return {"business_id": business_id, "status": current}
