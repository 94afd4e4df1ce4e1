from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import BigInteger, Date, DateTime, Integer, Text, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base


class DailyChallengeCompletion(Base):
    __tablename__ = "daily_challenge_completions"
    __table_args__ = (
        UniqueConstraint("username", "challenge_date", name="uq_daily_challenge_completions_user_date"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    username: Mapped[str] = mapped_column(Text, nullable=False)
    challenge_date: Mapped[date] = mapped_column(Date, nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    remaining_lives: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("0"))
    total_rounds: Mapped[int] = mapped_column(Integer, nullable=False, server_default=text("10"))
    completed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
