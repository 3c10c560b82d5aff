from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.exceptions import StorageError
from src.models.risk_window_log import RiskWindowLog


@dataclass
class RiskWindowRecord:
    category: str
    item_id: str
    persisted_at: str  # ISO 8601
    notified_at: str  # ISO 8601
    elapsed_micros: int


class RiskWindowRepository:
    """Append-only latency log. Never read back by the pipeline."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def save(self, record: RiskWindowRecord) -> None:
        log = RiskWindowLog(
            category=record.category,
            item_id=record.item_id,
            saved_at=record.persisted_at,
            notified_at=record.notified_at,
            elapsed_micros=record.elapsed_micros,
        )
        try:
            async with self.session_factory() as session:
                session.add(log)
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(
                f"Failed to save risk window log for {record.item_id}: {e}"
            ) from e
