"""r1_core_game_tables

Revision ID: 3c1e5a7b9d20
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "3c1e5a7b9d20"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "images",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("filename", sa.Text(), nullable=False),
        sa.Column("type", sa.String(8), nullable=False),
        sa.Column("difficulty", sa.String(8), nullable=False, server_default=sa.text("'medium'")),
        sa.Column("category", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("type IN ('real','ai')", name="ck_images_type"),
        sa.CheckConstraint("difficulty IN ('easy','medium','hard')", name="ck_images_difficulty"),
    )
    op.create_index("idx_images_type_difficulty", "images", ["type", "difficulty"])
    op.create_index("idx_images_type_created_at", "images", ["type", "created_at"])

    op.create_table(
        "seen_images",
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("image_id", sa.BigInteger(), nullable=False),
        sa.Column("image_type", sa.String(8), nullable=False),
        sa.Column("seen_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("image_type IN ('real','ai')", name="ck_seen_images_type"),
        sa.ForeignKeyConstraint(["image_id"], ["images.id"]),
        sa.PrimaryKeyConstraint("username", "image_id"),
    )
    op.create_index("idx_seen_images_user_type", "seen_images", ["username", "image_type"])

    op.create_table(
        "daily_challenge_records",
        sa.Column("username", sa.Text(), primary_key=True),
        sa.Column("date_last_challenge", sa.Date(), nullable=False),
        sa.Column("next_challenge_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("games_completed", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("streak", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.CheckConstraint("games_completed >= 0", name="ck_daily_challenge_records_games_completed"),
        sa.CheckConstraint("streak >= 0", name="ck_daily_challenge_records_streak"),
    )

    op.create_table(
        "daily_challenge_progress",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("game_date", sa.Date(), nullable=False),
        sa.Column("current_round", sa.Integer(), nullable=False),
        sa.Column("lives_remaining", sa.Integer(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("game_over", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("images_seen", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("current_round >= 1", name="ck_daily_challenge_progress_round"),
        sa.CheckConstraint("score >= 0", name="ck_daily_challenge_progress_score"),
        sa.UniqueConstraint("username", "game_date", name="uq_daily_challenge_progress_user_date"),
    )

    op.create_table(
        "daily_challenge_completions",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("challenge_date", sa.Date(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("remaining_lives", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("total_rounds", sa.Integer(), nullable=False, server_default=sa.text("10")),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("username", "challenge_date", name="uq_daily_challenge_completions_user_date"),
    )

    op.create_table(
        "avatar_rewards",
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("avatar", sa.String(32), nullable=False),
        sa.Column("awarded_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.PrimaryKeyConstraint("username", "avatar"),
    )

    op.create_table(
        "bot_usernames",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("bot_username", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.UniqueConstraint("bot_username", name="uq_bot_usernames_bot_username"),
    )

    op.create_table(
        "bot_name_parts",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("adjective", sa.String(32), nullable=False),
        sa.Column("noun", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
    )
    op.create_index("uq_bot_name_parts_pair", "bot_name_parts", ["adjective", "noun"], unique=True)


def downgrade() -> None:
    op.drop_index("uq_bot_name_parts_pair", table_name="bot_name_parts")
    op.drop_table("bot_name_parts")
    op.drop_table("bot_usernames")
    op.drop_table("avatar_rewards")
    op.drop_table("daily_challenge_completions")
    op.drop_table("daily_challenge_progress")
    op.drop_table("daily_challenge_records")
    op.drop_index("idx_seen_images_user_type", table_name="seen_images")
    op.drop_table("seen_images")
    op.drop_index("idx_images_type_created_at", table_name="images")
    op.drop_index("idx_images_type_difficulty", table_name="images")
    op.drop_table("images")
