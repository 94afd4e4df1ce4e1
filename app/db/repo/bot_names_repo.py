from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.bot_names import BotNamePart, BotUsername


class BotNamesRepo:
    @staticmethod
    async def get_random_username(session: AsyncSession) -> str | None:
        stmt = select(BotUsername.bot_username).order_by(func.random()).limit(1)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_random_name_parts(session: AsyncSession) -> tuple[str, str] | None:
        stmt = select(BotNamePart.adjective, BotNamePart.noun).order_by(func.random()).limit(1)
        result = await session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row.adjective, row.noun
