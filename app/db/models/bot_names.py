from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Index, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base


class BotUsername(Base):
    __tablename__ = "bot_usernames"
    __table_args__ = (UniqueConstraint("bot_username", name="uq_bot_usernames_bot_username"),)

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    bot_username: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )


class BotNamePart(Base):
    __tablename__ = "bot_name_parts"
    __table_args__ = (
        Index("uq_bot_name_parts_pair", "adjective", "noun", unique=True),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    adjective: Mapped[str] = mapped_column(String(32), nullable=False)
    noun: Mapped[str] = mapped_column(String(32), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
