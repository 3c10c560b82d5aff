from __future__ import annotations

from typing import Any, Dict

from loguru import logger
from sqlalchemy import delete, insert, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.exceptions import StorageError
from src.models.notice import Notice
from src.scrapers.base import NotificationPayload


def _insert_if_absent(dialect_name: str, values: Dict[str, Any]):
    """Single-statement insert that silently skips an existing id."""
    if dialect_name == "postgresql":
        return (
            postgresql.insert(Notice)
            .values(**values)
            .on_conflict_do_nothing(index_elements=[Notice.id])
        )
    if dialect_name in ("mysql", "mariadb"):
        return insert(Notice).values(**values).prefix_with("IGNORE")
    return (
        sqlite.insert(Notice)
        .values(**values)
        .on_conflict_do_nothing(index_elements=[Notice.id])
    )


class NoticeRepository:
    """Dedup store shared by every notice family.

    ``save`` is the only place that decides whether a notice is new: the
    unique key on ``notices.id`` makes concurrent saves of the same id
    produce exactly one ``True``.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def save(self, category: str, notice: NotificationPayload) -> bool:
        """Insert the notice if its id is unseen.

        Returns:
            True if a new row was created, False if the id already existed.

        Raises:
            StorageError: on any database engine failure.
        """
        values = {
            "id": notice.id,
            "category": category,
            "title": notice.title,
            "link": notice.link,
            "date": notice.date,
        }
        try:
            async with self.session_factory() as session:
                dialect_name = session.get_bind().dialect.name
                result = await session.execute(_insert_if_absent(dialect_name, values))
                inserted = result.rowcount > 0
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to save notice {notice.id}: {e}") from e

        return inserted

    async def delete_excluding_date(self, keep_date: str) -> int:
        """Delete every notice whose date differs from ``keep_date``.

        Returns:
            Number of rows removed.
        """
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    delete(Notice).where(Notice.date != keep_date)
                )
                deleted = result.rowcount or 0
                await session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete notices not dated {keep_date}: {e}") from e

        logger.debug(f"Deleted {deleted} notices not dated {keep_date}")
        return deleted

    async def exists(self, notice_id: str) -> bool:
        try:
            async with self.session_factory() as session:
                result = await session.execute(
                    select(Notice.id).where(Notice.id == notice_id)
                )
                return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to look up notice {notice_id}: {e}") from e
