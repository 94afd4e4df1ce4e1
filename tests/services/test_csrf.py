from __future__ import annotations

from app.game.sessions.state import PlayerSession, SessionUser
from app.services.csrf import ensure_csrf_token, issue_csrf_token, is_valid_csrf_token

TTL = 3600


def player() -> PlayerSession:
    return PlayerSession(user=SessionUser(id=1, username="alice"))


def test_issued_token_is_64_hex_chars_and_stored() -> None:
    current = player()

    token = issue_csrf_token(current, now_ts=1_000.0)

    assert len(token) == 64
    int(token, 16)
    assert current.csrf_token == token
    assert current.csrf_issued_at == 1_000.0


def test_ensure_reuses_token_until_expiry() -> None:
    current = player()
    first = ensure_csrf_token(current, now_ts=1_000.0, ttl_seconds=TTL)

    assert ensure_csrf_token(current, now_ts=1_000.0 + TTL, ttl_seconds=TTL) == first

    rotated = ensure_csrf_token(current, now_ts=1_001.0 + TTL, ttl_seconds=TTL)
    assert rotated != first
    assert current.csrf_issued_at == 1_001.0 + TTL


def test_token_validation() -> None:
    current = player()
    token = issue_csrf_token(current, now_ts=1_000.0)

    assert is_valid_csrf_token(current, received_token=token, now_ts=1_500.0, ttl_seconds=TTL) is True
    assert is_valid_csrf_token(current, received_token="0" * 64, now_ts=1_500.0, ttl_seconds=TTL) is False
    assert is_valid_csrf_token(current, received_token=None, now_ts=1_500.0, ttl_seconds=TTL) is False
    assert is_valid_csrf_token(current, received_token="", now_ts=1_500.0, ttl_seconds=TTL) is False
    assert is_valid_csrf_token(current, received_token=token, now_ts=1_000.0 + TTL + 1, ttl_seconds=TTL) is False


def test_session_without_token_rejects_everything() -> None:
    assert is_valid_csrf_token(player(), received_token="abc", now_ts=1.0, ttl_seconds=TTL) is False
