from __future__ import annotations

import random
from datetime import datetime

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repo.avatar_rewards_repo import AvatarRewardsRepo

logger = structlog.get_logger(__name__)

AVATAR_CATALOG: tuple[str, ...] = tuple(
    dict.fromkeys(
        (
            "😝", "🍍", "💪", "💋", "👾", "👽", "💩", "👨‍💻", "👩‍💻", "🤹",
            "🏍️", "🏎️", "💅", "🦴", "👁️‍🗨️", "🦷", "👁️", "💥", "💌", "💣",
            "👘", "🎩", "🕶️", "🧢", "👑", "👛", "👗", "🥽", "🦓", "🐺",
            "🦡", "🐾", "🦚", "🦜", "🐧", "🐦", "🐙", "🍁", "🌲", "🌴",
            "🍊", "🍉", "🍓", "🍇", "🍋", "🍎", "🥥", "🍿", "🥧", "🍬",
            "🍯", "🍭", "🏝️", "🌄", "🌉", "🌅", "♨️", "🌃", "🌆", "🌌",
            "🚄", "🚗", "🛴", "🚁", "🛰️", "🚀", "🛸", "🎁", "🎆", "🎟️",
            "🌮", "❤️", "✅", "✔️", "💫", "🗿", "🍂", "📟", "⚙️", "🥨",
            "🪁", "🧗‍♀️", "🦦", "🧩", "🧇", "☕", "🥏", "🪐", "🧁", "🩰",
            "🪀", "🦥", "🦩", "🧊", "🥯", "🥒", "📱", "📸", "📅", "🏆",
            "🗳️", "🌟", "💬", "💙", "🎀", "🏴‍☠️", "👧", "🤪", "🤭", "🧐",
            "🏃‍♀️", "🦆", "🐢", "🌷", "🌼", "🌺", "🍄", "🥑", "🍕", "🏀",
            "🎲", "🎭", "🎬", "🎼", "🎵", "🎹", "🥁", "🚲", "🛹", "🏄‍♂️",
        )
    )
)


async def award_random_avatar(
    session: AsyncSession,
    *,
    username: str,
    now_utc: datetime,
    rng: random.Random,
) -> str | None:
    """Grants one catalog avatar the player does not own yet.

    Returns ``None`` when the player already owns the whole catalog.
    """
    owned = set(await AvatarRewardsRepo.list_for_user(session, username=username))
    available = [avatar for avatar in AVATAR_CATALOG if avatar not in owned]
    if not available:
        logger.info("avatar_catalog_exhausted", username=username)
        return None

    avatar = rng.choice(available)
    inserted = await AvatarRewardsRepo.insert_if_absent(
        session,
        username=username,
        avatar=avatar,
        awarded_at=now_utc,
    )
    if not inserted:
        # A concurrent request granted the same avatar first.
        logger.info("avatar_award_race_lost", username=username)
        return None
    logger.info("avatar_awarded", username=username)
    return avatar
