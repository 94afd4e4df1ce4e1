from __future__ import annotations

import random
from collections.abc import Collection

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.repo.images_repo import ImagesRepo
from app.db.repo.seen_images_repo import SeenImagesRepo
from app.game.sessions.errors import NotEnoughImagesError
from app.game.sessions.state import BonusImage, ImageType

from .constants import BONUS_AI_IMAGE_COUNT, DAILY_RECENT_POOL_SIZE, FINAL_ROUND_DIFFICULTY

logger = structlog.get_logger(__name__)


async def _pick_daily_ids(
    session: AsyncSession,
    *,
    image_type: str,
    needed: int,
    available: int,
    seen_ids: set[int],
    rng: random.Random,
) -> list[int]:
    # Seen images are only skipped while enough unseen ones remain.
    exclude_ids: Collection[int] = seen_ids if seen_ids and len(seen_ids) < available - needed else ()
    pool = await ImagesRepo.list_recent_ids(
        session,
        image_type=image_type,
        limit=DAILY_RECENT_POOL_SIZE,
        exclude_ids=exclude_ids,
    )
    rng.shuffle(pool)
    picked = pool[:needed]
    if len(picked) < needed:
        logger.info(
            "daily_images_topped_up",
            image_type=image_type,
            missing=needed - len(picked),
        )
        extra = await ImagesRepo.list_random(
            session,
            image_type=image_type,
            limit=needed - len(picked),
            exclude_ids=picked,
        )
        picked.extend(image.id for image in extra)
    return picked


async def select_daily_images(
    session: AsyncSession,
    *,
    username: str,
    count: int,
    rng: random.Random,
) -> list[tuple[int, str]]:
    real_needed = count // 2
    ai_needed = count - real_needed

    real_available = await ImagesRepo.count_by_type(session, image_type=ImageType.REAL.value)
    ai_available = await ImagesRepo.count_by_type(session, image_type=ImageType.AI.value)
    if real_available < real_needed or ai_available < ai_needed:
        logger.warning(
            "daily_images_insufficient",
            real_available=real_available,
            ai_available=ai_available,
            needed=count,
        )
        raise NotEnoughImagesError

    seen = await SeenImagesRepo.list_ids_by_type(session, username=username)
    real_ids = await _pick_daily_ids(
        session,
        image_type=ImageType.REAL.value,
        needed=real_needed,
        available=real_available,
        seen_ids=seen.get(ImageType.REAL.value, set()),
        rng=rng,
    )
    ai_ids = await _pick_daily_ids(
        session,
        image_type=ImageType.AI.value,
        needed=ai_needed,
        available=ai_available,
        seen_ids=seen.get(ImageType.AI.value, set()),
        rng=rng,
    )

    selected = [(image_id, ImageType.REAL.value) for image_id in real_ids]
    selected.extend((image_id, ImageType.AI.value) for image_id in ai_ids)
    rng.shuffle(selected)
    return selected


async def _pick_final_round_id(
    session: AsyncSession,
    *,
    image_type: str,
    run_image_ids: Collection[int],
    seen_ids: set[int],
) -> int | None:
    attempts = (
        {"difficulty": FINAL_ROUND_DIFFICULTY, "exclude_ids": set(run_image_ids) | seen_ids},
        {"difficulty": FINAL_ROUND_DIFFICULTY, "exclude_ids": set(run_image_ids)},
        {"difficulty": None, "exclude_ids": set(run_image_ids)},
    )
    for attempt in attempts:
        found = await ImagesRepo.list_recent_ids(session, image_type=image_type, limit=1, **attempt)
        if found:
            return found[0]
    return None


async def select_final_round_pair(
    session: AsyncSession,
    *,
    username: str,
    run_image_ids: Collection[int],
) -> tuple[int, int]:
    seen = await SeenImagesRepo.list_ids_by_type(session, username=username)
    real_id = await _pick_final_round_id(
        session,
        image_type=ImageType.REAL.value,
        run_image_ids=run_image_ids,
        seen_ids=seen.get(ImageType.REAL.value, set()),
    )
    ai_id = await _pick_final_round_id(
        session,
        image_type=ImageType.AI.value,
        run_image_ids=run_image_ids,
        seen_ids=seen.get(ImageType.AI.value, set()),
    )
    if real_id is None or ai_id is None:
        logger.warning("final_round_images_missing", real_found=real_id is not None, ai_found=ai_id is not None)
        raise NotEnoughImagesError
    return real_id, ai_id


async def select_bonus_images(
    session: AsyncSession,
    *,
    username: str,
    difficulty: str,
    rng: random.Random,
) -> list[BonusImage]:
    seen = await SeenImagesRepo.list_ids_by_type(session, username=username)

    real_images = await ImagesRepo.list_random(
        session,
        image_type=ImageType.REAL.value,
        limit=1,
        difficulty=difficulty,
        exclude_ids=seen.get(ImageType.REAL.value, set()),
    )
    if not real_images:
        real_images = await ImagesRepo.list_random(
            session,
            image_type=ImageType.REAL.value,
            limit=1,
            difficulty=difficulty,
        )

    ai_images = await ImagesRepo.list_random(
        session,
        image_type=ImageType.AI.value,
        limit=BONUS_AI_IMAGE_COUNT,
        difficulty=difficulty,
        exclude_ids=seen.get(ImageType.AI.value, set()),
    )
    if len(ai_images) < BONUS_AI_IMAGE_COUNT:
        ai_images = await ImagesRepo.list_random(
            session,
            image_type=ImageType.AI.value,
            limit=BONUS_AI_IMAGE_COUNT,
            difficulty=difficulty,
        )

    if not real_images or len(ai_images) < BONUS_AI_IMAGE_COUNT:
        logger.warning(
            "bonus_images_insufficient",
            difficulty=difficulty,
            real_found=len(real_images),
            ai_found=len(ai_images),
        )
        raise NotEnoughImagesError

    images = [BonusImage(id=image.id, type=ImageType(image.type)) for image in [*real_images[:1], *ai_images]]
    rng.shuffle(images)
    return images
