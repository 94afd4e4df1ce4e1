from __future__ import annotations

import random
from collections.abc import Mapping
from typing import Any

import structlog

from app.db.session import SessionLocal
from app.game.bots.names import SAMPLE_BOT_NAME_COUNT, DbBotNameSource, generate_bot_names
from app.game.sessions.errors import GameSessionError
from app.game.sessions.state import PlayerSession

from .ajax_helpers import assert_admin, log_request_shape
from .ajax_payloads import bot_names_payload, failure_payload

logger = structlog.get_logger(__name__)


async def handle_bot_names(
    player: PlayerSession,
    form: Mapping[str, str],
    *,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    log_request_shape("bot_names_request", player, form)
    try:
        user = assert_admin(player)
    except GameSessionError as exc:
        return failure_payload(exc.message)

    # Read-only lookups; the source degrades to the built-in word lists on errors.
    async with SessionLocal() as session:
        names = await generate_bot_names(DbBotNameSource(session), count=SAMPLE_BOT_NAME_COUNT, rng=rng)

    logger.info("bot_names_generated", username=user.username, count=len(names))
    return bot_names_payload(names)
