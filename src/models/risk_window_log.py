from __future__ import annotations

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from src.db.database import Base
from src.models.base import TimestampMixin


class RiskWindowLog(Base, TimestampMixin):
    """Delay between a notice being persisted and its push being delivered."""

    __tablename__ = "risk_window_log"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    item_id: Mapped[str] = mapped_column(String(255), nullable=False)
    saved_at: Mapped[str] = mapped_column(String(40), nullable=False)
    notified_at: Mapped[str] = mapped_column(String(40), nullable=False)
    elapsed_micros: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<RiskWindowLog {self.category}:{self.item_id} "
            f"{self.elapsed_micros}us>"
        )
