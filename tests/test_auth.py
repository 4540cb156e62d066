import pytest
from fastapi.testclient import TestClient

import main
from auth import security


def test_keys_match_requires_both_non_empty_and_equal():
    assert security.keys_match("secret", "secret")
    assert not security.keys_match("secret", "Secret")
    assert not security.keys_match("secret", "secret2")
    assert not security.keys_match("", "")
    assert not security.keys_match("secret", "")


def test_check_sync_key_without_configuration(monkeypatch):
    monkeypatch.setenv("SYNC_KEY", "   ")

    with pytest.raises(security.SyncKeyNotConfigured):
        security.check_sync_key("anything")


def test_check_sync_key_mismatch(monkeypatch):
    monkeypatch.setenv("SYNC_KEY", "secret")

    with pytest.raises(security.SyncKeyMismatch):
        security.check_sync_key(None)
    with pytest.raises(security.SyncKeyMismatch):
        security.check_sync_key("wrong")

    security.check_sync_key("  secret ")


def test_debug_route_is_off_by_default(monkeypatch):
    monkeypatch.delenv("ENABLE_AUTH_DEBUG", raising=False)
    client = TestClient(main.create_app())

    assert client.get("/debug/auth").status_code == 404


def test_debug_route_reports_lengths_only(monkeypatch):
    monkeypatch.setenv("ENABLE_AUTH_DEBUG", "true")
    monkeypatch.setenv("SYNC_KEY", "TACO_SECRET")
    client = TestClient(main.create_app())

    body = client.get("/debug/auth", headers={"x-sync-key": "TACO"}).json()

    assert body == {
        "ok": False,
        "expected_set": True,
        "expected_len": 11,
        "incoming_present": True,
        "incoming_len": 4,
    }
    assert "TACO_SECRET" not in str(body)
