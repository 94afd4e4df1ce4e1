from __future__ import annotations

import random
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import structlog

from app.db.session import SessionLocal
from app.game.sessions.errors import GameSessionError, UnknownActionError
from app.game.sessions.service import start_bonus_game, submit_bonus_answer
from app.game.sessions.state import PlayerSession

from .ajax_helpers import (
    GENERIC_GAME_ERROR,
    STORAGE_ERRORS,
    assert_csrf,
    assert_player,
    default_rng,
    log_request_shape,
    parse_int_field,
)
from .ajax_payloads import bonus_answer_payload, bonus_setup_payload, failure_payload

logger = structlog.get_logger(__name__)

BONUS_LOGIN_REQUIRED = "You must be logged in to play the bonus game."


async def handle_daily_bonus(
    player: PlayerSession,
    form: Mapping[str, str],
    *,
    now_utc: datetime | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    now_utc = now_utc or datetime.now(timezone.utc)
    rng = rng or default_rng
    action = (form.get("action") or "").strip()
    log_request_shape("daily_bonus_request", player, form)

    try:
        assert_player(player, message=BONUS_LOGIN_REQUIRED)
        assert_csrf(player, form, now_ts=now_utc.timestamp())

        if action == "start_bonus_game":
            async with SessionLocal.begin() as session:
                setup = await start_bonus_game(session, player=player, rng=rng)
            return bonus_setup_payload(setup)

        if action == "submit_bonus_answer":
            async with SessionLocal.begin() as session:
                result = await submit_bonus_answer(
                    session,
                    player=player,
                    selected_index=parse_int_field(form, "selected_index", default=-1),
                    now_utc=now_utc,
                    rng=rng,
                )
            return bonus_answer_payload(result)

        if not action:
            raise GameSessionError
        raise UnknownActionError
    except GameSessionError as exc:
        logger.info("daily_bonus_rejected", action=action, error=type(exc).__name__)
        return failure_payload(exc.message)
    except STORAGE_ERRORS:
        logger.exception(
            "daily_bonus_processing_failed",
            action=action,
            username=player.user.username if player.user else None,
        )
        return failure_payload(GENERIC_GAME_ERROR)
