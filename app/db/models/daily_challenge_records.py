from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import CheckConstraint, Date, DateTime, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base


class DailyChallengeRecord(Base):
    __tablename__ = "daily_challenge_records"
    __table_args__ = (
        CheckConstraint("games_completed >= 0", name="ck_daily_challenge_records_games_completed"),
        CheckConstraint("streak >= 0", name="ck_daily_challenge_records_streak"),
    )

    username: Mapped[str] = mapped_column(Text, primary_key=True)
    date_last_challenge: Mapped[date] = mapped_column(Date, nullable=False)
    next_challenge_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    games_completed: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    streak: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
