"""r2_seed_bot_names

Revision ID: 6e8f0a2c4b61
Revises: 3c1e5a7b9d20
Create Date: 2026-10-19 09:30:00.000000
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "6e8f0a2c4b61"
down_revision: str | None = "3c1e5a7b9d20"
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None

BOT_USERNAMES = (
    "PixelPhantomX",
    "ShadowByte77",
    "TurboGlitcher",
    "QuantumRogue",
    "NebulaHackz",
    "Zephyr",
    "Icarus",
    "Cassian",
    "Juno",
    "Elio",
)
BOT_ADJECTIVES = (
    "Swift", "Quick", "Fast", "Rapid", "Speedy",
    "Smart", "Clever", "Wise", "Bright", "Sharp",
    "Brave", "Bold", "Daring", "Mighty", "Strong",
)
BOT_NOUNS = (
    "Player", "Gamer", "Challenger", "Competitor", "Contender",
    "Wizard", "Ninja", "Master", "Champion", "Warrior",
)


def upgrade() -> None:
    bot_usernames = sa.table("bot_usernames", sa.column("bot_username", sa.String))
    bot_name_parts = sa.table(
        "bot_name_parts",
        sa.column("adjective", sa.String),
        sa.column("noun", sa.String),
    )
    op.bulk_insert(bot_usernames, [{"bot_username": name} for name in BOT_USERNAMES])
    op.bulk_insert(
        bot_name_parts,
        [{"adjective": adjective, "noun": noun} for adjective in BOT_ADJECTIVES for noun in BOT_NOUNS],
    )


def downgrade() -> None:
    op.execute("DELETE FROM bot_name_parts")
    op.execute("DELETE FROM bot_usernames")
