"""
Sheet value -> table row transforms.

Everything here is pure: a list of rows of cell values in, normalized rows out.
Rows that are not lists (e.g. null) are skipped.
Row 0 of every sheet is the header and is never written.

Cell values arrive as decoded JSON (str, int, float, bool, None). Date cells
are serialized by the sheet script as ISO timestamps; time-only cells use the
spreadsheet epoch, e.g. "1899-12-30T05:00:00.000Z".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Sequence

MENU_MIN_COLUMNS = 5
HOURS_MIN_COLUMNS = 3
LOCATION_FIELDS = ("current_spot", "note")

# menu_items.id is integer, menu_items.price is numeric(10, 2).
MAX_ITEM_ID = 2**31 - 1
PRICE_MAX_DIGITS = 8
PRICE_STEP = Decimal("0.01")

_CLOCK_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


class SheetValueError(ValueError):
    """A cell that must be numeric could not be parsed."""


@dataclass(frozen=True)
class MenuItem:
    id: int
    name: str
    price: Decimal
    description: str | None
    active: bool


@dataclass(frozen=True)
class HoursEntry:
    day: str
    open: str | None
    close: str | None


@dataclass(frozen=True)
class LocationFields:
    current_spot: str | None = None
    note: str | None = None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _to_decimal(value: Any, field: str) -> Decimal:
    if isinstance(value, bool):
        raise SheetValueError(f"{field} must be a number, got a boolean.")
    try:
        if isinstance(value, float):
            parsed = Decimal(str(value))
        elif isinstance(value, (int, Decimal)):
            parsed = Decimal(value)
        else:
            parsed = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise SheetValueError(f"{field} must be a number, got {value!r}.") from exc

    if not parsed.is_finite():
        raise SheetValueError(f"{field} must be a finite number, got {value!r}.")
    return parsed


def parse_item_id(value: Any) -> int:
    parsed = _to_decimal(value, "id")
    # Bound the magnitude before int(); "1e2000000" is a valid Decimal.
    if parsed.adjusted() > 9 or abs(parsed) > MAX_ITEM_ID:
        raise SheetValueError(f"id is out of range, got {value!r}.")
    if parsed != parsed.to_integral_value():
        raise SheetValueError(f"id must be a whole number, got {value!r}.")
    return int(parsed)


def parse_price(value: Any) -> Decimal:
    parsed = _to_decimal(value, "price")
    if parsed.adjusted() >= PRICE_MAX_DIGITS:
        raise SheetValueError(f"price is out of range, got {value!r}.")
    return parsed.quantize(PRICE_STEP, rounding=ROUND_HALF_UP)


def parse_active(value: Any) -> bool:
    if value is True:
        return True
    return isinstance(value, str) and value.strip().upper() == "TRUE"


def menu_rows(values: Sequence[Any]) -> list[MenuItem]:
    """
    Columns: id, name, price, description, active.

    Rows that are too short or miss id/name/price are skipped. A non-numeric
    id or price raises SheetValueError for the whole sheet.
    """
    items: list[MenuItem] = []
    for row in values[1:]:
        if not isinstance(row, list) or len(row) < MENU_MIN_COLUMNS:
            continue

        item_id, name, price, description, active = row[:MENU_MIN_COLUMNS]
        if _is_blank(item_id) or _is_blank(name) or _is_blank(price):
            continue

        items.append(
            MenuItem(
                id=parse_item_id(item_id),
                name=str(name),
                price=parse_price(price),
                description=str(description) if not _is_blank(description) else None,
                active=parse_active(active),
            )
        )
    return items


def _hhmm(hour: int, minute: int) -> str:
    return f"{hour:02d}:{minute:02d}"


def _clock_hhmm(text: str) -> str | None:
    match = _CLOCK_RE.match(text)
    if match is None:
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    second = int(match.group(3) or 0)
    if hour > 23 or minute > 59 or second > 59:
        return None
    return _hhmm(hour, minute)


def _timestamp_hhmm(text: str) -> str | None:
    candidate = text[:-1] + "+00:00" if text[-1] in "Zz" else text
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)
    return _hhmm(parsed.hour, parsed.minute)


def normalize_time(value: Any) -> str | None:
    """
    Normalize an open/close cell to "HH:MM" or None.

    Accepted inputs, in order:
    - datetime (UTC if timezone-aware) or time -> its hour and minute
    - "H:MM", "HH:MM", "HH:MM:SS" -> zero-padded "HH:MM"
    - ISO-8601 timestamp string -> hour and minute in UTC (naive = UTC)
    Anything else (None, "", numbers, booleans, other strings) -> None.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return _hhmm(value.hour, value.minute)
    if isinstance(value, time):
        return _hhmm(value.hour, value.minute)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    if _CLOCK_RE.match(text):
        return _clock_hhmm(text)
    return _timestamp_hhmm(text)


def hours_rows(values: Sequence[Any]) -> list[HoursEntry]:
    """
    Columns: day, open, close.
    """
    entries: list[HoursEntry] = []
    for row in values[1:]:
        if not isinstance(row, list) or len(row) < HOURS_MIN_COLUMNS:
            continue

        day, open_value, close_value = row[:HOURS_MIN_COLUMNS]
        day_text = _clean_text(day)
        if day_text is None:
            continue

        entries.append(
            HoursEntry(
                day=day_text,
                open=normalize_time(open_value),
                close=normalize_time(close_value),
            )
        )
    return entries


def _label(value: Any) -> str:
    return str(value if value is not None else "").strip().lower()


def _location_from_labels(rows: Sequence[Any]) -> LocationFields:
    found: dict[str, str | None] = {}
    for row in rows:
        if not isinstance(row, list) or not row:
            continue
        label = _label(row[0])
        if label in LOCATION_FIELDS:
            found[label] = _clean_text(row[1]) if len(row) > 1 else None
    return LocationFields(**found)


def _location_from_columns(header: list[str], data: Sequence[Any]) -> LocationFields:
    found: dict[str, str | None] = {}
    for name in LOCATION_FIELDS:
        if name not in header:
            continue
        index = header.index(name)
        found[name] = _clean_text(data[index]) if index < len(data) else None
    return LocationFields(**found)


def location_fields(values: Sequence[Any]) -> LocationFields:
    """
    Read current_spot/note from either sheet layout.

    Label/value rows (header discarded):
        [["field", "value"], ["current_spot", "5th & Main"], ["note", "Until 3pm"]]
    Header row naming the fields, values in the first data row:
        [["current_spot", "note"], ["5th & Main", "Until 3pm"]]

    The second layout is used when the header row names one of the fields.
    Missing fields (and blank values) come back as None.
    """
    if not values:
        return LocationFields()

    header = [_label(cell) for cell in values[0]] if isinstance(values[0], list) else []
    if any(name in header for name in LOCATION_FIELDS):
        data = values[1] if len(values) > 1 and isinstance(values[1], list) else []
        return _location_from_columns(header, data)
    return _location_from_labels(values[1:])
