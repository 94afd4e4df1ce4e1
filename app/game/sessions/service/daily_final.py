from __future__ import annotations

import random
from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repo.seen_images_repo import SeenImagesRepo
from app.game.sessions.errors import FinalRoundNotReadyError
from app.game.sessions.rules import (
    apply_final_answer,
    classify_daily_phase,
    evaluate_final_answer,
    require_daily_state,
    require_final_round,
    require_user,
)
from app.game.sessions.state import FinalRoundState, ImageType, PlayerSession
from app.game.sessions.types import DailyPhase, FinalAnswerResult, FinalRoundSetup

from .daily_records import save_daily_completion, save_daily_progress, update_daily_challenge_record
from .image_selection import select_final_round_pair

logger = structlog.get_logger(__name__)


async def start_daily_final_round(
    session: AsyncSession,
    *,
    player: PlayerSession,
    now_utc: datetime,
    rng: random.Random,
) -> FinalRoundSetup:
    user = require_user(player)
    state = require_daily_state(player)
    if classify_daily_phase(state) != DailyPhase.FINAL_ROUND:
        raise FinalRoundNotReadyError

    final_round = state.final_round
    if final_round is None:
        real_id, ai_id = await select_final_round_pair(
            session,
            username=user.username,
            run_image_ids=state.game_images,
        )
        final_round = FinalRoundState(
            real_image_id=real_id,
            ai_image_id=ai_id,
            left_is_real=rng.random() < 0.5,
        )
        player.daily = state.model_copy(update={"final_round": final_round})
        await SeenImagesRepo.record_seen(
            session,
            username=user.username,
            images=[(real_id, ImageType.REAL.value), (ai_id, ImageType.AI.value)],
            seen_at=now_utc,
        )
        logger.info("daily_final_round_started", username=user.username)

    return FinalRoundSetup(
        left_image_id=final_round.left_image_id,
        right_image_id=final_round.right_image_id,
        score=state.score,
        lives=state.lives,
    )


async def submit_daily_final_answer(
    session: AsyncSession,
    *,
    player: PlayerSession,
    answer: str,
    now_utc: datetime,
) -> FinalAnswerResult:
    user = require_user(player)
    state = require_daily_state(player)
    final_round = require_final_round(state)

    is_correct = evaluate_final_answer(answer, left_is_real=final_round.left_is_real)
    updated = apply_final_answer(state, is_correct=is_correct)
    player.daily = updated
    phase = classify_daily_phase(updated)
    completed = phase == DailyPhase.COMPLETED

    await update_daily_challenge_record(
        session,
        username=user.username,
        completed=completed,
        is_admin=user.is_admin,
        now_utc=now_utc,
    )
    if completed:
        await save_daily_completion(session, username=user.username, state=updated, now_utc=now_utc)
    await save_daily_progress(
        session,
        username=user.username,
        state=updated,
        current_round=updated.total_rounds + 1,
        images_seen=[*updated.game_images, final_round.real_image_id, final_round.ai_image_id],
        now_utc=now_utc,
    )

    logger.info(
        "daily_final_answer_submitted",
        username=user.username,
        is_correct=is_correct,
        phase=phase.value,
        score=updated.score,
    )
    return FinalAnswerResult(
        is_correct=is_correct,
        phase=phase,
        score=updated.score,
        lives=updated.lives,
        left_is_real=final_round.left_is_real,
    )
