from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.avatar_rewards import AvatarReward


class AvatarRewardsRepo:
    @staticmethod
    async def list_for_user(session: AsyncSession, *, username: str) -> list[str]:
        stmt = (
            select(AvatarReward.avatar)
            .where(AvatarReward.username == username)
            .order_by(AvatarReward.awarded_at.asc())
        )
        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def insert_if_absent(
        session: AsyncSession,
        *,
        username: str,
        avatar: str,
        awarded_at: datetime,
    ) -> bool:
        stmt = (
            pg_insert(AvatarReward)
            .values(username=username, avatar=avatar, awarded_at=awarded_at)
            .on_conflict_do_nothing(index_elements=[AvatarReward.username, AvatarReward.avatar])
            .returning(AvatarReward.avatar)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
