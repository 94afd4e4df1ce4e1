from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base


class AvatarReward(Base):
    __tablename__ = "avatar_rewards"

    username: Mapped[str] = mapped_column(Text, primary_key=True)
    avatar: Mapped[str] = mapped_column(String(32), primary_key=True)
    awarded_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
