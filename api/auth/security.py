"""
Shared-secret helpers for the sync endpoint.
"""

from __future__ import annotations

import secrets

from core import config


class SyncKeyNotConfigured(RuntimeError):
    pass


class SyncKeyMismatch(RuntimeError):
    pass


def expected_sync_key() -> str:
    return config.sync_key()


def normalize_incoming_key(raw: str | None) -> str:
    return (raw or "").strip()


def keys_match(expected: str, incoming: str) -> bool:
    if not expected or not incoming:
        return False
    return secrets.compare_digest(expected.encode("utf-8"), incoming.encode("utf-8"))


def check_sync_key(incoming: str | None) -> None:
    """
    Raise unless `incoming` equals the configured SYNC_KEY.

    A missing server-side key is a configuration problem, not a caller problem.
    """
    expected = expected_sync_key()
    if not expected:
        raise SyncKeyNotConfigured("SYNC_KEY is not set.")

    if not keys_match(expected, normalize_incoming_key(incoming)):
        raise SyncKeyMismatch("Sync key mismatch.")


def describe_keys(incoming: str | None) -> dict:
    """
    Non-secret view of the key comparison (lengths and flags only).
    """
    expected = expected_sync_key()
    received = normalize_incoming_key(incoming)
    return {
        "ok": keys_match(expected, received),
        "expected_set": bool(expected),
        "expected_len": len(expected),
        "incoming_present": bool(received),
        "incoming_len": len(received),
    }
