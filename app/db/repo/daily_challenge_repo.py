from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.daily_challenge_completions import DailyChallengeCompletion
from app.db.models.daily_challenge_progress import DailyChallengeProgress
from app.db.models.daily_challenge_records import DailyChallengeRecord


class DailyChallengeRepo:
    @staticmethod
    async def get_record(session: AsyncSession, username: str) -> DailyChallengeRecord | None:
        return await session.get(DailyChallengeRecord, username)

    @staticmethod
    async def get_record_for_update(session: AsyncSession, username: str) -> DailyChallengeRecord | None:
        stmt = select(DailyChallengeRecord).where(DailyChallengeRecord.username == username).with_for_update()
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def create_record(session: AsyncSession, *, record: DailyChallengeRecord) -> DailyChallengeRecord:
        session.add(record)
        await session.flush()
        return record

    @staticmethod
    async def reset_streak(session: AsyncSession, *, username: str) -> int:
        stmt = (
            update(DailyChallengeRecord)
            .where(DailyChallengeRecord.username == username)
            .values(streak=0)
        )
        result = await session.execute(stmt)
        return int(result.rowcount or 0)

    @staticmethod
    async def get_progress(
        session: AsyncSession,
        *,
        username: str,
        game_date: date,
    ) -> DailyChallengeProgress | None:
        stmt = select(DailyChallengeProgress).where(
            DailyChallengeProgress.username == username,
            DailyChallengeProgress.game_date == game_date,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def upsert_progress(
        session: AsyncSession,
        *,
        username: str,
        game_date: date,
        current_round: int,
        lives_remaining: int,
        score: int,
        game_over: bool,
        images_seen: str,
        updated_at: datetime,
    ) -> None:
        values = {
            "current_round": current_round,
            "lives_remaining": lives_remaining,
            "score": score,
            "game_over": game_over,
            "images_seen": images_seen,
            "updated_at": updated_at,
        }
        stmt = (
            pg_insert(DailyChallengeProgress)
            .values(username=username, game_date=game_date, **values)
            .on_conflict_do_update(
                constraint="uq_daily_challenge_progress_user_date",
                set_=values,
            )
        )
        await session.execute(stmt)

    @staticmethod
    async def upsert_completion(
        session: AsyncSession,
        *,
        username: str,
        challenge_date: date,
        score: int,
        remaining_lives: int,
        total_rounds: int,
        completed_at: datetime,
    ) -> None:
        values = {
            "score": score,
            "remaining_lives": remaining_lives,
            "total_rounds": total_rounds,
            "completed_at": completed_at,
        }
        stmt = (
            pg_insert(DailyChallengeCompletion)
            .values(username=username, challenge_date=challenge_date, **values)
            .on_conflict_do_update(
                constraint="uq_daily_challenge_completions_user_date",
                set_=values,
            )
        )
        await session.execute(stmt)
