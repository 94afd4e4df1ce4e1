from __future__ import annotations

from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.models.daily_challenge_records import DailyChallengeRecord
from app.db.repo.daily_challenge_repo import DailyChallengeRepo
from app.game.sessions.clock import local_date, next_challenge_at
from app.game.sessions.rules import join_image_ids
from app.game.sessions.state import DailyChallengeState

logger = structlog.get_logger(__name__)


async def can_play_daily_challenge(
    session: AsyncSession,
    *,
    username: str,
    is_admin: bool,
    now_utc: datetime,
) -> bool:
    if is_admin:
        return True
    record = await DailyChallengeRepo.get_record(session, username)
    return record is None or record.next_challenge_at <= now_utc


async def update_daily_challenge_record(
    session: AsyncSession,
    *,
    username: str,
    completed: bool,
    is_admin: bool,
    now_utc: datetime,
) -> DailyChallengeRecord:
    """Folds one finished run into the player's long-term daily record.

    A run can reach more than one terminal transition on the same day
    (regular rounds cleared, then the final round lost). Completions are
    counted once per day; a later failure on that day still breaks the streak.
    """
    settings = get_settings()
    today = local_date(now_utc, tz_name=settings.app_timezone)
    next_at = next_challenge_at(
        now_utc,
        tz_name=settings.app_timezone,
        reset_hour=settings.daily_reset_hour,
    )

    record = await DailyChallengeRepo.get_record_for_update(session, username)
    if record is None:
        record = await DailyChallengeRepo.create_record(
            session,
            record=DailyChallengeRecord(
                username=username,
                date_last_challenge=today,
                next_challenge_at=next_at,
                games_completed=1 if completed else 0,
                streak=1 if completed else 0,
            ),
        )
        logger.info("daily_record_created", username=username, completed=completed)
        return record

    if record.date_last_challenge == today:
        if is_admin:
            logger.info("daily_record_admin_replay_ignored", username=username)
            return record
        if not completed:
            record.streak = 0
            await session.flush()
        return record

    record.date_last_challenge = today
    record.next_challenge_at = next_at
    if completed:
        record.games_completed += 1
        record.streak += 1
    else:
        record.streak = 0
    await session.flush()
    logger.info(
        "daily_record_updated",
        username=username,
        completed=completed,
        streak=record.streak,
        games_completed=record.games_completed,
    )
    return record


async def save_daily_progress(
    session: AsyncSession,
    *,
    username: str,
    state: DailyChallengeState,
    current_round: int,
    images_seen: list[int],
    now_utc: datetime,
) -> None:
    settings = get_settings()
    await DailyChallengeRepo.upsert_progress(
        session,
        username=username,
        game_date=local_date(now_utc, tz_name=settings.app_timezone),
        current_round=current_round,
        lives_remaining=state.lives,
        score=state.score,
        game_over=state.game_over,
        images_seen=join_image_ids(images_seen),
        updated_at=now_utc,
    )


async def save_daily_completion(
    session: AsyncSession,
    *,
    username: str,
    state: DailyChallengeState,
    now_utc: datetime,
) -> None:
    settings = get_settings()
    await DailyChallengeRepo.upsert_completion(
        session,
        username=username,
        challenge_date=local_date(now_utc, tz_name=settings.app_timezone),
        score=state.score,
        remaining_lives=state.lives,
        total_rounds=state.total_rounds,
        completed_at=now_utc,
    )
