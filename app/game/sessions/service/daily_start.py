from __future__ import annotations

import random
from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.repo.seen_images_repo import SeenImagesRepo
from app.game.sessions.errors import DailyChallengeAlreadyPlayedError
from app.game.sessions.rules import require_user
from app.game.sessions.state import DailyChallengeState, PlayerSession
from app.game.sessions.types import DailyStartResult

from .daily_records import can_play_daily_challenge, save_daily_progress
from .image_selection import select_daily_images

logger = structlog.get_logger(__name__)


async def start_daily_challenge(
    session: AsyncSession,
    *,
    player: PlayerSession,
    now_utc: datetime,
    rng: random.Random,
) -> DailyStartResult:
    user = require_user(player)
    settings = get_settings()

    if not await can_play_daily_challenge(
        session,
        username=user.username,
        is_admin=user.is_admin,
        now_utc=now_utc,
    ):
        raise DailyChallengeAlreadyPlayedError

    selected = await select_daily_images(
        session,
        username=user.username,
        count=settings.daily_total_rounds,
        rng=rng,
    )
    await SeenImagesRepo.record_seen(session, username=user.username, images=selected, seen_at=now_utc)

    state = DailyChallengeState(
        round=1,
        current_image_index=0,
        lives=settings.daily_starting_lives,
        total_rounds=settings.daily_total_rounds,
        game_images=[image_id for image_id, _ in selected],
    )
    player.daily = state
    await save_daily_progress(
        session,
        username=user.username,
        state=state,
        current_round=state.round,
        images_seen=[],
        now_utc=now_utc,
    )

    logger.info(
        "daily_challenge_started",
        username=user.username,
        total_rounds=state.total_rounds,
        is_admin=user.is_admin,
    )
    return DailyStartResult(
        round=state.round,
        total_rounds=state.total_rounds,
        lives=state.lives,
        score=state.score,
        streak=state.streak,
        current_image_id=state.game_images[0],
    )
