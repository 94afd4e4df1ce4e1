from __future__ import annotations

import random
from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.repo.daily_challenge_repo import DailyChallengeRepo
from app.db.repo.seen_images_repo import SeenImagesRepo
from app.game.sessions.rules import evaluate_bonus_selection, require_bonus_state, require_user
from app.game.sessions.state import BonusGameState, ImageType, PlayerSession
from app.game.sessions.types import BonusAnswerResult, BonusGameSetup

from .avatars import award_random_avatar
from .image_selection import select_bonus_images

logger = structlog.get_logger(__name__)


async def start_bonus_game(
    session: AsyncSession,
    *,
    player: PlayerSession,
    rng: random.Random,
) -> BonusGameSetup:
    user = require_user(player)
    images = await select_bonus_images(
        session,
        username=user.username,
        difficulty=get_settings().bonus_difficulty,
        rng=rng,
    )
    correct_index = next(index for index, image in enumerate(images) if image.type == ImageType.REAL)
    player.bonus = BonusGameState(images=images, correct_index=correct_index)

    logger.info("bonus_game_started", username=user.username, image_count=len(images))
    return BonusGameSetup(image_ids=[image.id for image in images])


async def submit_bonus_answer(
    session: AsyncSession,
    *,
    player: PlayerSession,
    selected_index: int,
    now_utc: datetime,
    rng: random.Random,
) -> BonusAnswerResult:
    user = require_user(player)
    bonus = require_bonus_state(player)
    is_correct = evaluate_bonus_selection(selected_index, bonus=bonus)

    # One attempt per bonus game.
    player.bonus = None
    result = BonusAnswerResult(
        is_correct=is_correct,
        correct_index=bonus.correct_index,
        selected_index=selected_index,
    )
    if is_correct:
        result.avatar = await award_random_avatar(session, username=user.username, now_utc=now_utc, rng=rng)
    else:
        await DailyChallengeRepo.reset_streak(session, username=user.username)
        result.new_streak = 0

    await SeenImagesRepo.record_seen(
        session,
        username=user.username,
        images=[(image.id, image.type.value) for image in bonus.images],
        seen_at=now_utc,
    )
    logger.info(
        "bonus_answer_submitted",
        username=user.username,
        is_correct=is_correct,
        avatar_awarded=result.avatar is not None,
    )
    return result
