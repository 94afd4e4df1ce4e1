from __future__ import annotations

import secrets

from app.game.sessions.state import PlayerSession


def issue_csrf_token(player: PlayerSession, *, now_ts: float) -> str:
    token = secrets.token_hex(32)
    player.csrf_token = token
    player.csrf_issued_at = now_ts
    return token


def _is_expired(player: PlayerSession, *, now_ts: float, ttl_seconds: int) -> bool:
    if player.csrf_issued_at is None:
        return True
    return now_ts - player.csrf_issued_at > ttl_seconds


def ensure_csrf_token(player: PlayerSession, *, now_ts: float, ttl_seconds: int) -> str:
    """Returns the session token, rotating it once it is older than ``ttl_seconds``."""
    if player.csrf_token and not _is_expired(player, now_ts=now_ts, ttl_seconds=ttl_seconds):
        return player.csrf_token
    return issue_csrf_token(player, now_ts=now_ts)


def is_valid_csrf_token(
    player: PlayerSession,
    *,
    received_token: str | None,
    now_ts: float,
    ttl_seconds: int,
) -> bool:
    if not player.csrf_token or not received_token:
        return False
    if _is_expired(player, now_ts=now_ts, ttl_seconds=ttl_seconds):
        return False
    return secrets.compare_digest(player.csrf_token, received_token)
