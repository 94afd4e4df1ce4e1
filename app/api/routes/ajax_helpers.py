from __future__ import annotations

import json
import random
from collections.abc import Mapping

import structlog
from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import get_settings
from app.game.sessions.errors import AdminRequiredError, InvalidCsrfTokenError
from app.game.sessions.rules import require_user
from app.game.sessions.state import PlayerSession, SessionUser
from app.services.csrf import is_valid_csrf_token

logger = structlog.get_logger(__name__)

AJAX_JSON_CONTENT_TYPE = "application/json"
GENERIC_GAME_ERROR = "An error occurred during game processing. Please try again."
GENERIC_FINAL_ROUND_ERROR = "An error occurred during the final round. Please try again."
STORAGE_ERRORS = (SQLAlchemyError, OSError)

default_rng = random.SystemRandom()


async def read_form_fields(request: Request) -> dict[str, str]:
    """Flattens a JSON, urlencoded or multipart body into first-value string fields.

    Uploaded files in a multipart body are ignored.
    """
    content_type = (request.headers.get("content-type") or "").split(";", maxsplit=1)[0].strip().lower()
    if content_type != AJAX_JSON_CONTENT_TYPE:
        form = await request.form()
        fields: dict[str, str] = {}
        for key, value in form.multi_items():
            if isinstance(value, str):
                fields.setdefault(key, value)
        return fields

    raw_body = await request.body()
    if not raw_body:
        return {}
    try:
        payload = json.loads(raw_body)
    except ValueError:
        logger.warning("ajax_body_unreadable", content_type=content_type)
        return {}
    if not isinstance(payload, dict):
        return {}
    return {str(key): "" if value is None else str(value) for key, value in payload.items()}


def parse_int_field(form: Mapping[str, str], name: str, *, default: int) -> int:
    try:
        return int((form.get(name) or "").strip())
    except ValueError:
        return default


def assert_csrf(player: PlayerSession, form: Mapping[str, str], *, now_ts: float) -> None:
    if not is_valid_csrf_token(
        player,
        received_token=form.get("csrf_token"),
        now_ts=now_ts,
        ttl_seconds=get_settings().csrf_token_ttl_seconds,
    ):
        logger.warning(
            "ajax_csrf_rejected",
            has_session_token=player.csrf_token is not None,
            has_received_token=bool(form.get("csrf_token")),
        )
        raise InvalidCsrfTokenError


def assert_admin(player: PlayerSession) -> SessionUser:
    user = player.user
    if user is None or not user.is_admin:
        raise AdminRequiredError
    return user


def assert_player(player: PlayerSession, *, message: str) -> SessionUser:
    return require_user(player, message=message)


def log_request_shape(event: str, player: PlayerSession, form: Mapping[str, str]) -> None:
    if not get_settings().log_request_payloads:
        return
    logger.info(
        event,
        action=form.get("action"),
        form_fields=sorted(form),
        session_fields=player.present_fields(),
    )
