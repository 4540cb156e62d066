"""
Read queries for per-business data (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_menu_items(business_id: str) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, price, description, active
        FROM menu_items
        WHERE business_id = $1
        ORDER BY id ASC
        """,
        business_id,
    )


async def list_hours(business_id: str) -> list[dict]:
    return await db.fetch_all(
        """
        SELECT day, open, close
        FROM hours
        WHERE business_id = $1
        """,
        business_id,
    )


async def get_location(business_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT current_spot, note
        FROM location
        WHERE business_id = $1
        """,
        business_id,
    )


async def get_sync_status(business_id: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT last_synced_at, last_sheet
        FROM sync_status
        WHERE business_id = $1
        """,
        business_id,
    )
