from __future__ import annotations

from functools import lru_cache
from typing import Protocol

import structlog
from pydantic import ValidationError
from redis.asyncio import Redis

from app.core.config import get_settings
from app.game.sessions.state import PlayerSession

logger = structlog.get_logger(__name__)

SESSION_KEY_PREFIX = "real_or_ai:session:"


class SessionStore(Protocol):
    async def load(self, session_id: str) -> PlayerSession | None: ...

    async def save(self, session_id: str, player: PlayerSession, *, ttl_seconds: int) -> None: ...

    async def ping(self) -> bool: ...


def _session_key(session_id: str) -> str:
    return f"{SESSION_KEY_PREFIX}{session_id}"


class RedisSessionStore:
    """Keeps one JSON-encoded ``PlayerSession`` per session id, with a sliding TTL."""

    def __init__(self, redis_url: str) -> None:
        self._redis = Redis.from_url(redis_url, decode_responses=True)

    async def load(self, session_id: str) -> PlayerSession | None:
        raw = await self._redis.get(_session_key(session_id))
        if raw is None:
            return None
        try:
            return PlayerSession.model_validate_json(raw)
        except ValidationError:
            logger.warning("player_session_unreadable", session_id=session_id)
            return None

    async def save(self, session_id: str, player: PlayerSession, *, ttl_seconds: int) -> None:
        await self._redis.set(_session_key(session_id), player.model_dump_json(), ex=ttl_seconds)

    async def ping(self) -> bool:
        return await self._redis.ping() is True

    async def aclose(self) -> None:
        await self._redis.aclose()


@lru_cache(maxsize=1)
def get_session_store() -> SessionStore:
    return RedisSessionStore(get_settings().redis_url)
