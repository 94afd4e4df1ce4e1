from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import BigInteger, Boolean, CheckConstraint, Date, DateTime, Integer, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base


class DailyChallengeProgress(Base):
    __tablename__ = "daily_challenge_progress"
    __table_args__ = (
        UniqueConstraint("username", "game_date", name="uq_daily_challenge_progress_user_date"),
        CheckConstraint("current_round >= 1", name="ck_daily_challenge_progress_round"),
        CheckConstraint("score >= 0", name="ck_daily_challenge_progress_score"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    game_date: Mapped[date] = mapped_column(Date, nullable=False)
    current_round: Mapped[int] = mapped_column(Integer, nullable=False)
    lives_remaining: Mapped[int] = mapped_column(Integer, nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    game_over: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=text("false"))
    images_seen: Mapped[str] = mapped_column(Text, nullable=False, server_default=text("''"))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
