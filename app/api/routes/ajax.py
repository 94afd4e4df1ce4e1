from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime, timezone
from typing import Any

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from redis.exceptions import RedisError

from app.core.config import get_settings
from app.game.sessions.errors import GameSessionError
from app.game.sessions.state import PlayerSession
from app.services.csrf import ensure_csrf_token
from app.services.session_store import get_session_store

from .ajax_bot_names import handle_bot_names
from .ajax_daily_bonus import handle_daily_bonus
from .ajax_daily_challenge import handle_daily_challenge
from .ajax_helpers import GENERIC_GAME_ERROR, assert_player, read_form_fields
from .ajax_payloads import csrf_token_payload, failure_payload

router = APIRouter(prefix="/ajax", tags=["ajax"])
logger = structlog.get_logger(__name__)

AjaxHandler = Callable[[PlayerSession, Mapping[str, str]], Awaitable[dict[str, Any]]]
CSRF_LOGIN_REQUIRED = "You must be logged in to play."


def _json(payload: dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=200, content=payload)


async def _run_with_session(
    request: Request,
    handler: AjaxHandler,
    form: Mapping[str, str],
) -> JSONResponse:
    settings = get_settings()
    store = get_session_store()
    session_id = request.cookies.get(settings.session_cookie_name)

    if not session_id:
        # No session means no login; the handler answers without touching storage.
        return _json(await handler(PlayerSession(), form))

    try:
        player = await store.load(session_id)
    except RedisError:
        logger.exception("player_session_load_failed")
        return _json(failure_payload(GENERIC_GAME_ERROR))

    if player is None:
        return _json(await handler(PlayerSession(), form))

    payload = await handler(player, form)
    try:
        await store.save(session_id, player, ttl_seconds=settings.session_ttl_seconds)
    except RedisError:
        logger.exception("player_session_save_failed")
        return _json(failure_payload(GENERIC_GAME_ERROR))
    return _json(payload)


@router.post("/daily-challenge")
async def daily_challenge(request: Request) -> JSONResponse:
    return await _run_with_session(request, handle_daily_challenge, await read_form_fields(request))


@router.post("/daily-bonus")
async def daily_bonus(request: Request) -> JSONResponse:
    return await _run_with_session(request, handle_daily_bonus, await read_form_fields(request))


@router.api_route("/bot-names", methods=["GET", "POST"])
async def bot_names(request: Request) -> JSONResponse:
    form: dict[str, str] = dict(request.query_params)
    if request.method == "POST":
        form.update(await read_form_fields(request))
    return await _run_with_session(request, handle_bot_names, form)


async def _issue_csrf_token(player: PlayerSession, form: Mapping[str, str]) -> dict[str, Any]:
    del form
    try:
        assert_player(player, message=CSRF_LOGIN_REQUIRED)
    except GameSessionError as exc:
        return failure_payload(exc.message)
    token = ensure_csrf_token(
        player,
        now_ts=datetime.now(timezone.utc).timestamp(),
        ttl_seconds=get_settings().csrf_token_ttl_seconds,
    )
    return csrf_token_payload(token)


@router.get("/csrf-token")
async def csrf_token(request: Request) -> JSONResponse:
    return await _run_with_session(request, _issue_csrf_token, {})
