from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.images import Image


class ImagesRepo:
    @staticmethod
    async def get_by_id(session: AsyncSession, image_id: int) -> Image | None:
        return await session.get(Image, image_id)

    @staticmethod
    async def count_by_type(
        session: AsyncSession,
        *,
        image_type: str,
        difficulty: str | None = None,
    ) -> int:
        stmt = select(func.count(Image.id)).where(Image.type == image_type)
        if difficulty is not None:
            stmt = stmt.where(Image.difficulty == difficulty)
        result = await session.execute(stmt)
        return int(result.scalar_one())

    @staticmethod
    async def list_recent_ids(
        session: AsyncSession,
        *,
        image_type: str,
        limit: int,
        difficulty: str | None = None,
        exclude_ids: Collection[int] = (),
    ) -> list[int]:
        stmt = select(Image.id).where(Image.type == image_type)
        if difficulty is not None:
            stmt = stmt.where(Image.difficulty == difficulty)
        if exclude_ids:
            stmt = stmt.where(Image.id.not_in(list(exclude_ids)))
        stmt = stmt.order_by(Image.created_at.desc(), Image.id.desc()).limit(limit)
        result = await session.execute(stmt)
        return [int(image_id) for image_id in result.scalars().all()]

    @staticmethod
    async def list_random(
        session: AsyncSession,
        *,
        image_type: str,
        limit: int,
        difficulty: str | None = None,
        exclude_ids: Collection[int] = (),
    ) -> list[Image]:
        stmt = select(Image).where(Image.type == image_type)
        if difficulty is not None:
            stmt = stmt.where(Image.difficulty == difficulty)
        if exclude_ids:
            stmt = stmt.where(Image.id.not_in(list(exclude_ids)))
        stmt = stmt.order_by(func.random()).limit(limit)
        result = await session.execute(stmt)
        return list(result.scalars().all())
