"""Display names for computer-controlled opponents.

Half of the time a hand-picked bot username is used; otherwise an
adjective/noun pair is combined, sometimes with a two-digit suffix.
"""

from __future__ import annotations

import random
from typing import Protocol

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repo.bot_names_repo import BotNamesRepo

logger = structlog.get_logger(__name__)

FALLBACK_ADJECTIVES = ("Swift", "Quick", "Fast", "Rapid", "Speedy", "Smart", "Clever", "Wise", "Bright", "Sharp")
FALLBACK_NOUNS = ("Player", "Gamer", "Challenger", "Competitor", "Contender")
SAMPLE_BOT_NAME_COUNT = 10

_default_rng = random.SystemRandom()


class BotNameSource(Protocol):
    async def random_predefined_name(self) -> str | None: ...

    async def random_name_parts(self) -> tuple[str, str] | None: ...


class DbBotNameSource:
    """Reads bot names from the database; lookup failures count as "no data"."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def random_predefined_name(self) -> str | None:
        try:
            return await BotNamesRepo.get_random_username(self._session)
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("bot_username_lookup_failed", error_type=type(exc).__name__)
            return None

    async def random_name_parts(self) -> tuple[str, str] | None:
        try:
            return await BotNamesRepo.get_random_name_parts(self._session)
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("bot_name_parts_lookup_failed", error_type=type(exc).__name__)
            return None


class StaticBotNameSource:
    def __init__(
        self,
        *,
        usernames: tuple[str, ...] = (),
        name_parts: tuple[tuple[str, str], ...] = (),
        rng: random.Random | None = None,
    ) -> None:
        self._usernames = usernames
        self._name_parts = name_parts
        self._rng = rng or _default_rng

    async def random_predefined_name(self) -> str | None:
        return self._rng.choice(self._usernames) if self._usernames else None

    async def random_name_parts(self) -> tuple[str, str] | None:
        return self._rng.choice(self._name_parts) if self._name_parts else None


async def generate_bot_name(source: BotNameSource, *, rng: random.Random | None = None) -> str:
    rng = rng or _default_rng
    if rng.random() < 0.5:
        predefined = await source.random_predefined_name()
        if predefined:
            return predefined

    parts = await source.random_name_parts()
    if parts is None:
        parts = (rng.choice(FALLBACK_ADJECTIVES), rng.choice(FALLBACK_NOUNS))
    adjective, noun = parts

    if rng.random() < 0.5:
        return f"{adjective}{noun}{rng.randint(10, 99)}"
    return f"{adjective}{noun}"


async def generate_bot_names(
    source: BotNameSource,
    *,
    count: int = SAMPLE_BOT_NAME_COUNT,
    rng: random.Random | None = None,
) -> list[str]:
    return [await generate_bot_name(source, rng=rng) for _ in range(count)]
