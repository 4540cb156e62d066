"""
Sync persistence (raw SQL).

Every writer takes the connection of an open transaction (see
`core.db.transaction()`), so a whole sync commits or rolls back together.
"""

from __future__ import annotations

from typing import Sequence

import asyncpg

from .transform import HoursEntry, LocationFields, MenuItem


async def lock_business(conn: asyncpg.Connection, business_id: str) -> None:
    """
    Serialize concurrent syncs for one business until the transaction ends.
    """
    await conn.execute("SELECT pg_advisory_xact_lock(hashtext($1))", business_id)


async def replace_menu(conn: asyncpg.Connection, business_id: str, items: Sequence[MenuItem]) -> None:
    await conn.execute("DELETE FROM menu_items WHERE business_id = $1", business_id)
    if not items:
        return

    records = [
        (business_id, item.id, item.name, item.price, item.description, item.active)
        for item in items
    ]
    await conn.executemany(
        """
        INSERT INTO menu_items (business_id, id, name, price, description, active)
        VALUES ($1, $2, $3, $4, $5, $6)
        """,
        records,
    )


async def replace_hours(conn: asyncpg.Connection, business_id: str, entries: Sequence[HoursEntry]) -> None:
    await conn.execute("DELETE FROM hours WHERE business_id = $1", business_id)
    if not entries:
        return

    records = [(business_id, entry.day, entry.open, entry.close) for entry in entries]
    await conn.executemany(
        """
        INSERT INTO hours (business_id, day, open, close)
        VALUES ($1, $2, $3, $4)
        """,
        records,
    )


async def upsert_location(conn: asyncpg.Connection, business_id: str, fields: LocationFields) -> None:
    await conn.execute(
        """
        INSERT INTO location (business_id, current_spot, note)
        VALUES ($1, $2, $3)
        ON CONFLICT (business_id) DO UPDATE
        SET current_spot = EXCLUDED.current_spot,
            note = EXCLUDED.note
        """,
        business_id,
        fields.current_spot,
        fields.note,
    )


async def upsert_sync_status(conn: asyncpg.Connection, business_id: str, sheet: str) -> None:
    await conn.execute(
        """
        INSERT INTO sync_status (business_id, last_synced_at, last_sheet)
        VALUES ($1, clock_timestamp(), $2)
        ON CONFLICT (business_id) DO UPDATE
        SET last_synced_at = clock_timestamp(),
            last_sheet = EXCLUDED.last_sheet
        """,
        business_id,
        sheet,
    )
