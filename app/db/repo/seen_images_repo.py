from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.seen_images import SeenImage


class SeenImagesRepo:
    @staticmethod
    async def list_ids_by_type(session: AsyncSession, *, username: str) -> dict[str, set[int]]:
        stmt = select(SeenImage.image_id, SeenImage.image_type).where(SeenImage.username == username)
        result = await session.execute(stmt)
        seen: dict[str, set[int]] = {"real": set(), "ai": set()}
        for image_id, image_type in result.all():
            seen.setdefault(image_type, set()).add(int(image_id))
        return seen

    @staticmethod
    async def record_seen(
        session: AsyncSession,
        *,
        username: str,
        images: Iterable[tuple[int, str]],
        seen_at: datetime,
    ) -> int:
        rows = [
            {"username": username, "image_id": image_id, "image_type": image_type, "seen_at": seen_at}
            for image_id, image_type in dict(images).items()
        ]
        if not rows:
            return 0
        stmt = pg_insert(SeenImage).values(rows)
        stmt = stmt.on_conflict_do_update(
            index_elements=[SeenImage.username, SeenImage.image_id],
            set_={"seen_at": stmt.excluded.seen_at},
        )
        result = await session.execute(stmt)
        return int(result.rowcount or 0)
