from __future__ import annotations

from app.game.sessions.state import PlayerSession
from tests.game.fake_game_db import FakeSession


class DummySessionScope:
    def __init__(self, session: FakeSession) -> None:
        self.session = session

    async def __aenter__(self) -> FakeSession:
        return self.session

    async def __aexit__(self, exc_type, exc, tb) -> bool:
        return False


class DummySessionLocal:
    def __init__(self) -> None:
        self.session = FakeSession()
        self.begin_calls = 0

    def __call__(self) -> DummySessionScope:
        return DummySessionScope(self.session)

    def begin(self) -> DummySessionScope:
        self.begin_calls += 1
        return DummySessionScope(self.session)


class InMemorySessionStore:
    def __init__(self) -> None:
        self.items: dict[str, str] = {}
        self.saved_ttls: list[int] = []
        self.reachable = True

    async def load(self, session_id: str) -> PlayerSession | None:
        raw = self.items.get(session_id)
        if raw is None:
            return None
        return PlayerSession.model_validate_json(raw)

    async def save(self, session_id: str, player: PlayerSession, *, ttl_seconds: int) -> None:
        self.items[session_id] = player.model_dump_json()
        self.saved_ttls.append(ttl_seconds)

    async def ping(self) -> bool:
        return self.reachable
