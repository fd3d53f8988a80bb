"""Database models."""

from datetime import datetime

from sqlalchemy import JSON, DateTime, Index, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from nvc_exercises.database import Base


class Exercise(Base):
    """Bilingual NVC exercise, one column per language variant."""

    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    name_en: Mapped[str] = mapped_column(Text, nullable=False)
    name_zh: Mapped[str] = mapped_column(Text, nullable=False)
    description_en: Mapped[str] = mapped_column(Text, nullable=False)
    description_zh: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty: Mapped[str | None] = mapped_column(String(20), nullable=True)
    audience: Mapped[str | None] = mapped_column(String(20), nullable=True)
    related_ids: Mapped[list[int] | None] = mapped_column(JSON, nullable=True)
    scenario_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    scenario_zh: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    example_zh: Mapped[str | None] = mapped_column(Text, nullable=True)
    alternative_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    alternative_zh: Mapped[str | None] = mapped_column(Text, nullable=True)
    request_template_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    request_template_zh: Mapped[str | None] = mapped_column(Text, nullable=True)
    gratitude_expression_en: Mapped[str | None] = mapped_column(Text, nullable=True)
    gratitude_expression_zh: Mapped[str | None] = mapped_column(Text, nullable=True)
    steps_en: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)
    steps_zh: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    __table_args__ = (Index("ix_exercises_difficulty_audience", "difficulty", "audience"),)

    def __repr__(self) -> str:
        """String representation of Exercise."""
        return f"<Exercise(id={self.id}, category='{self.category}', name_en='{self.name_en}')>"


class ApiKey(Base):
    """Issued API key; holds the SHA-256 digest, never the key itself."""

    __tablename__ = "api_keys"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    key_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    issued_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    last_used_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def __repr__(self) -> str:
        """String representation of ApiKey."""
        return f"<ApiKey(id={self.id}, label='{self.label}', status='{self.status}')>"
