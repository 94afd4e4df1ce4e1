from __future__ import annotations

from sqlalchemy import CheckConstraint, UniqueConstraint

from app.db.models import (  # noqa: F401
    AvatarReward,
    BotNamePart,
    BotUsername,
    DailyChallengeCompletion,
    DailyChallengeProgress,
    DailyChallengeRecord,
    Image,
    SeenImage,
)
from app.db.models.base import Base


def test_all_game_tables_registered() -> None:
    expected_tables = {
        "images",
        "seen_images",
        "daily_challenge_records",
        "daily_challenge_progress",
        "daily_challenge_completions",
        "avatar_rewards",
        "bot_usernames",
        "bot_name_parts",
    }
    assert expected_tables.issubset(set(Base.metadata.tables))


def test_critical_constraints_present() -> None:
    images = Base.metadata.tables["images"]
    image_check_names = {
        constraint.name for constraint in images.constraints if isinstance(constraint, CheckConstraint)
    }
    assert {"ck_images_type", "ck_images_difficulty"}.issubset(image_check_names)

    progress = Base.metadata.tables["daily_challenge_progress"]
    progress_unique_names = {
        constraint.name for constraint in progress.constraints if isinstance(constraint, UniqueConstraint)
    }
    assert "uq_daily_challenge_progress_user_date" in progress_unique_names

    completions = Base.metadata.tables["daily_challenge_completions"]
    completion_unique_names = {
        constraint.name for constraint in completions.constraints if isinstance(constraint, UniqueConstraint)
    }
    assert "uq_daily_challenge_completions_user_date" in completion_unique_names

    bot_name_parts = Base.metadata.tables["bot_name_parts"]
    assert "uq_bot_name_parts_pair" in {index.name for index in bot_name_parts.indexes}

    seen_images = Base.metadata.tables["seen_images"]
    assert [column.name for column in seen_images.primary_key.columns] == ["username", "image_id"]
    assert {fk.column.table.name for fk in seen_images.foreign_keys} == {"images"}

    avatar_rewards = Base.metadata.tables["avatar_rewards"]
    assert [column.name for column in avatar_rewards.primary_key.columns] == ["username", "avatar"]
