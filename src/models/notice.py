from __future__ import annotations

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.db.database import Base
from src.models.base import TimestampMixin


class Notice(Base, TimestampMixin):
    """A notice seen at least once. The id is unique across every category."""

    __tablename__ = "notices"
    __table_args__ = (Index("idx_notices_category", "category"),)

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    link: Mapped[str] = mapped_column(String(1000), nullable=False, default="")
    date: Mapped[str] = mapped_column(String(20), nullable=False)

    def __repr__(self) -> str:
        return f"<Notice {self.category}:{self.id} {self.date}>"
