"""
Sync orchestration.

Flow:
1) Pick the transform/writer pair for the sheet type
2) Transform cell values into rows (no DB access; bad cells fail here)
3) In one transaction: lock the business, replace/upsert rows, stamp sync_status
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from core import db

from . import repository, schemas, transform

logger = logging.getLogger(__name__)


class UnknownSheet(ValueError):
    pass


@dataclass(frozen=True)
class SheetHandler:
    convert: Callable[[list[Any]], Any]
    write: Callable[[Any, str, Any], Awaitable[None]]


def _handlers() -> dict[str, SheetHandler]:
    return {
        "menu": SheetHandler(transform.menu_rows, repository.replace_menu),
        "hours": SheetHandler(transform.hours_rows, repository.replace_hours),
        "location": SheetHandler(transform.location_fields, repository.upsert_location),
    }


def _row_count(rows: Any) -> int:
    return len(rows) if isinstance(rows, list) else 1


@dataclass(frozen=True)
class SyncResult:
    business_id: str
    sheet: str
    rows: int


async def run_sync(payload: schemas.SyncRequest) -> SyncResult:
    handler = _handlers().get(payload.sheet)
    if handler is None:
        raise UnknownSheet(f"Unknown sheet: {payload.sheet!r}")

    rows = handler.convert(payload.values)

    async with db.transaction() as conn:
        await repository.lock_business(conn, payload.business_id)
        await handler.write(conn, payload.business_id, rows)
        await repository.upsert_sync_status(conn, payload.business_id, payload.sheet)

    result = SyncResult(business_id=payload.business_id, sheet=payload.sheet, rows=_row_count(rows))
    logger.info(
        "sync_complete business_id=%s sheet=%s rows=%s timestamp=%s",
        result.business_id,
        result.sheet,
        result.rows,
        payload.timestamp,
    )
    return result
