from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.models.base import Base


class Image(Base):
    __tablename__ = "images"
    __table_args__ = (
        CheckConstraint("type IN ('real','ai')", name="ck_images_type"),
        CheckConstraint(
            "difficulty IN ('easy','medium','hard')",
            name="ck_images_difficulty",
        ),
        Index("idx_images_type_difficulty", "type", "difficulty"),
        Index("idx_images_type_created_at", "type", "created_at"),
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    filename: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(8), nullable=False)
    difficulty: Mapped[str] = mapped_column(
        String(8),
        nullable=False,
        server_default=text("'medium'"),
    )
    category: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("now()"),
    )
