"""
Shared fixtures: an in-memory stand-in for the four tables, a recording
connection for SQL-level checks, and a TestClient without lifespan (no real
database is opened).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

import main
from business import repository as business_repository
from core import db
from sync import repository as sync_repository

SYNC_KEY = "TACO_SECRET"


class RecordingConnection:
    """Collects (method, normalized sql, args) tuples instead of talking to Postgres."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object]] = []
        self.committed = 0
        self.rolled_back = 0

    async def execute(self, sql: str, *args):
        self.calls.append(("execute", " ".join(sql.split()), args))

    async def executemany(self, sql: str, records):
        self.calls.append(("executemany", " ".join(sql.split()), list(records)))

    def statements(self) -> list[str]:
        return [sql for (_, sql, _) in self.calls]


class FakeStore:
    def __init__(self) -> None:
        self.menu_items: dict[str, list[dict]] = {}
        self.hours: dict[str, list[dict]] = {}
        self.location: dict[str, dict] = {}
        self.sync_status: dict[str, dict] = {}
        self.fail_on: set[str] = set()

    def _maybe_fail(self, name: str) -> None:
        if name in self.fail_on:
            raise RuntimeError(f"simulated failure in {name}")

    # Writers (same signatures as sync.repository).
    async def lock_business(self, conn, business_id):
        return None

    async def replace_menu(self, conn, business_id, items):
        self._maybe_fail("replace_menu")
        self.menu_items[business_id] = [
            {
                "id": item.id,
                "name": item.name,
                "price": item.price,
                "description": item.description,
                "active": item.active,
            }
            for item in items
        ]

    async def replace_hours(self, conn, business_id, entries):
        self._maybe_fail("replace_hours")
        self.hours[business_id] = [{"day": e.day, "open": e.open, "close": e.close} for e in entries]

    async def upsert_location(self, conn, business_id, fields):
        self._maybe_fail("upsert_location")
        self.location[business_id] = {"current_spot": fields.current_spot, "note": fields.note}

    async def upsert_sync_status(self, conn, business_id, sheet):
        self.sync_status[business_id] = {
            "last_synced_at": datetime.now(timezone.utc),
            "last_sheet": sheet,
        }

    # Readers (same signatures as business.repository).
    async def list_menu_items(self, business_id):
        self._maybe_fail("list_menu_items")
        return sorted(self.menu_items.get(business_id, []), key=lambda row: row["id"])

    async def list_hours(self, business_id):
        self._maybe_fail("list_hours")
        return list(self.hours.get(business_id, []))

    async def get_location(self, business_id):
        self._maybe_fail("get_location")
        return self.location.get(business_id)

    async def get_sync_status(self, business_id):
        self._maybe_fail("get_sync_status")
        return self.sync_status.get(business_id)


@pytest.fixture
def connection(monkeypatch) -> RecordingConnection:
    conn = RecordingConnection()

    @asynccontextmanager
    async def fake_transaction():
        try:
            yield conn
        except Exception:
            conn.rolled_back += 1
            raise
        else:
            conn.committed += 1

    monkeypatch.setattr(db, "transaction", fake_transaction)
    return conn


@pytest.fixture
def store(monkeypatch, connection) -> FakeStore:
    fake = FakeStore()
    for name in ("lock_business", "replace_menu", "replace_hours", "upsert_location", "upsert_sync_status"):
        monkeypatch.setattr(sync_repository, name, getattr(fake, name))
    for name in ("list_menu_items", "list_hours", "get_location", "get_sync_status"):
        monkeypatch.setattr(business_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def sync_key(monkeypatch) -> str:
    monkeypatch.setenv("SYNC_KEY", SYNC_KEY)
    return SYNC_KEY


@pytest.fixture
def client() -> TestClient:
    return TestClient(main.create_app())
