from __future__ import annotations

from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repo.images_repo import ImagesRepo
from app.db.repo.seen_images_repo import SeenImagesRepo
from app.game.sessions.errors import GameAlreadyOverError, ImageNotFoundError, ImageOutOfTurnError, InvalidInputError
from app.game.sessions.rules import (
    apply_regular_answer,
    classify_daily_phase,
    evaluate_regular_answer,
    require_daily_state,
    require_user,
    seen_image_ids,
)
from app.game.sessions.state import PlayerSession
from app.game.sessions.types import DailyAnswerResult, DailyPhase

from .daily_records import save_daily_completion, save_daily_progress, update_daily_challenge_record

logger = structlog.get_logger(__name__)


async def submit_daily_answer(
    session: AsyncSession,
    *,
    player: PlayerSession,
    image_id: int,
    answer: str,
    now_utc: datetime,
) -> DailyAnswerResult:
    user = require_user(player)
    state = require_daily_state(player)
    if image_id <= 0:
        raise InvalidInputError("Invalid image ID")
    if classify_daily_phase(state) != DailyPhase.IN_PROGRESS:
        raise GameAlreadyOverError

    image = await ImagesRepo.get_by_id(session, image_id)
    if image is None:
        raise ImageNotFoundError
    if image.id != state.current_image_id:
        logger.warning("daily_answer_image_mismatch", expected=state.current_image_id, received=image.id)
        raise ImageOutOfTurnError

    is_correct = evaluate_regular_answer(answer, image_type=image.type)
    updated = apply_regular_answer(state, is_correct=is_correct)
    player.daily = updated
    phase = classify_daily_phase(updated)

    await SeenImagesRepo.record_seen(
        session,
        username=user.username,
        images=[(image.id, image.type)],
        seen_at=now_utc,
    )
    if phase == DailyPhase.FAILED:
        await update_daily_challenge_record(
            session,
            username=user.username,
            completed=False,
            is_admin=user.is_admin,
            now_utc=now_utc,
        )
    elif phase == DailyPhase.FINAL_ROUND:
        await update_daily_challenge_record(
            session,
            username=user.username,
            completed=True,
            is_admin=user.is_admin,
            now_utc=now_utc,
        )
        await save_daily_completion(session, username=user.username, state=updated, now_utc=now_utc)

    await save_daily_progress(
        session,
        username=user.username,
        state=updated,
        current_round=updated.round,
        images_seen=seen_image_ids(updated),
        now_utc=now_utc,
    )

    logger.info(
        "daily_answer_submitted",
        username=user.username,
        is_correct=is_correct,
        phase=phase.value,
        round=updated.round,
        lives=updated.lives,
    )
    return DailyAnswerResult(
        is_correct=is_correct,
        image_type=image.type,
        phase=phase,
        round=updated.round,
        total_rounds=updated.total_rounds,
        score=updated.score,
        lives=updated.lives,
        streak=updated.streak,
        game_over=updated.game_over,
        next_image_id=updated.current_image_id if phase == DailyPhase.IN_PROGRESS else None,
    )
