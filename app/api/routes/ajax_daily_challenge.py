from __future__ import annotations

import random
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

import structlog

from app.db.session import SessionLocal
from app.game.sessions.errors import GameSessionError, UnknownActionError
from app.game.sessions.service import (
    start_daily_challenge,
    start_daily_final_round,
    submit_daily_answer,
    submit_daily_final_answer,
)
from app.game.sessions.state import PlayerSession

from .ajax_helpers import (
    GENERIC_FINAL_ROUND_ERROR,
    GENERIC_GAME_ERROR,
    STORAGE_ERRORS,
    assert_csrf,
    assert_player,
    default_rng,
    log_request_shape,
    parse_int_field,
)
from .ajax_payloads import (
    daily_answer_payload,
    daily_start_payload,
    failure_payload,
    final_answer_payload,
    final_round_setup_payload,
)

logger = structlog.get_logger(__name__)

DAILY_LOGIN_REQUIRED = "You must be logged in to play the Daily Challenge."
FINAL_ROUND_ACTIONS = frozenset({"start_daily_final_round", "submit_daily_final_answer"})


async def _dispatch(
    action: str,
    *,
    player: PlayerSession,
    form: Mapping[str, str],
    now_utc: datetime,
    rng: random.Random,
) -> dict[str, Any]:
    if action == "start_daily_challenge":
        async with SessionLocal.begin() as session:
            started = await start_daily_challenge(session, player=player, now_utc=now_utc, rng=rng)
        return daily_start_payload(started)

    if action == "submit_daily_answer":
        async with SessionLocal.begin() as session:
            answered = await submit_daily_answer(
                session,
                player=player,
                image_id=parse_int_field(form, "image_id", default=0),
                answer=(form.get("answer") or "").strip(),
                now_utc=now_utc,
            )
        return daily_answer_payload(answered)

    if action == "start_daily_final_round":
        async with SessionLocal.begin() as session:
            setup = await start_daily_final_round(session, player=player, now_utc=now_utc, rng=rng)
        return final_round_setup_payload(setup)

    if action == "submit_daily_final_answer":
        async with SessionLocal.begin() as session:
            final = await submit_daily_final_answer(
                session,
                player=player,
                answer=(form.get("answer") or "").strip(),
                now_utc=now_utc,
            )
        return final_answer_payload(final)

    raise UnknownActionError


async def handle_daily_challenge(
    player: PlayerSession,
    form: Mapping[str, str],
    *,
    now_utc: datetime | None = None,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    now_utc = now_utc or datetime.now(timezone.utc)
    action = (form.get("action") or "").strip()
    log_request_shape("daily_challenge_request", player, form)

    try:
        assert_player(player, message=DAILY_LOGIN_REQUIRED)
        assert_csrf(player, form, now_ts=now_utc.timestamp())
        if not action:
            raise GameSessionError
        return await _dispatch(action, player=player, form=form, now_utc=now_utc, rng=rng or default_rng)
    except GameSessionError as exc:
        logger.info("daily_challenge_rejected", action=action, error=type(exc).__name__)
        return failure_payload(exc.message)
    except STORAGE_ERRORS:
        logger.exception(
            "daily_challenge_processing_failed",
            action=action,
            username=player.user.username if player.user else None,
        )
        if action in FINAL_ROUND_ACTIONS:
            return failure_payload(GENERIC_FINAL_ROUND_ERROR)
        return failure_payload(GENERIC_GAME_ERROR)
