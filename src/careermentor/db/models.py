from __future__ import annotations

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from careermentor.db.base import Base, TimestampMixin


class UserProfile(TimestampMixin, Base):
    __tablename__ = "user_profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    branch: Mapped[str | None] = mapped_column(String(20), nullable=True)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    interest: Mapped[str | None] = mapped_column(String(120), nullable=True)
    daily_time: Mapped[int | None] = mapped_column(Integer, nullable=True)
    career_path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    roadmap: Mapped[str | None] = mapped_column(Text, nullable=True)
    progress_status: Mapped[str] = mapped_column(String(40), default="not_started", nullable=False)
