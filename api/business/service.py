"""
Read-side shaping for the client app.
"""

from __future__ import annotations

from . import repository

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_DAY_INDEX = {name: i for i, name in enumerate(WEEKDAYS)}
_DAY_INDEX.update({name[:3]: i for i, name in enumerate(WEEKDAYS)})


def day_sort_key(day: str | None) -> int:
    # Unrecognized names sort after Sunday; sorted() keeps their stored order.
    return _DAY_INDEX.get(str(day or "").strip().lower(), len(WEEKDAYS))


async def menu(business_id: str) -> list[dict]:
    rows = await repository.list_menu_items(business_id)
    return [
        {
            "id": int(row["id"]),
            "name": row["name"],
            "price": float(row["price"]) if row["price"] is not None else None,
            "description": row["description"],
            "active": bool(row["active"]),
        }
        for row in rows
    ]


async def hours(business_id: str) -> list[dict]:
    rows = await repository.list_hours(business_id)
    ordered = sorted(rows, key=lambda row: day_sort_key(row["day"]))
    return [{"day": row["day"], "open": row["open"], "close": row["close"]} for row in ordered]


async def location(business_id: str) -> dict:
    row = await repository.get_location(business_id)
    if row is None:
        return {"current_spot": None, "note": None}
    return {"current_spot": row["current_spot"], "note": row["note"]}


async def sync_status(business_id: str) -> dict | None:
    row = await repository.get_sync_status(business_id)
    if row is None:
        return None
    return {"last_synced_at": row["last_synced_at"], "last_sheet": row["last_sheet"]}
