import asyncio

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.db.database import Base, configure_sqlite
from src.db.notice_repository import NoticeRepository
from src.exceptions import StorageError
from src.models import Notice
from src.scrapers.base import NotificationPayload


def make_notice(notice_id: str, date: str = "2025.03.10", title: str = "공지") -> NotificationPayload:
    return NotificationPayload(
        id=notice_id,
        title=title,
        link=f"https://example.com/{notice_id}",
        date=date,
    )


@pytest.fixture
async def session_factory(tmp_path):
    # 파일 DB를 써야 세션마다 별도 커넥션이 생긴다
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/notices.db")
    configure_sqlite(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def repository(session_factory):
    return NoticeRepository(session_factory)


class TestSave:
    @pytest.mark.asyncio
    async def test_first_save_creates_row(self, repository, session_factory):
        assert await repository.save("CSE", make_notice("cse-1")) is True

        async with session_factory() as session:
            stored = (await session.execute(select(Notice))).scalars().all()
        assert len(stored) == 1
        assert stored[0].id == "cse-1"
        assert stored[0].category == "CSE"
        assert stored[0].date == "2025.03.10"

    @pytest.mark.asyncio
    async def test_second_save_is_noop(self, repository, session_factory):
        assert await repository.save("CSE", make_notice("cse-1")) is True
        assert await repository.save("CSE", make_notice("cse-1", title="changed")) is False

        async with session_factory() as session:
            stored = (await session.execute(select(Notice))).scalars().all()
        assert len(stored) == 1
        assert stored[0].title == "공지"

    @pytest.mark.asyncio
    async def test_same_id_under_other_category_is_not_new(self, repository):
        assert await repository.save("CSE", make_notice("shared-1")) is True
        assert await repository.save("MECH", make_notice("shared-1")) is False

    @pytest.mark.asyncio
    async def test_concurrent_saves_yield_exactly_one_true(self, repository):
        notice = make_notice("cse-race")

        results = await asyncio.gather(
            *(repository.save("CSE", notice) for _ in range(10))
        )

        assert results.count(True) == 1
        assert results.count(False) == 9

    @pytest.mark.asyncio
    async def test_missing_table_raises_storage_error(self, tmp_path):
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path}/empty.db")
        repository = NoticeRepository(
            async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
        )

        with pytest.raises(StorageError):
            await repository.save("CSE", make_notice("cse-1"))

        await engine.dispose()


class TestDeleteExcludingDate:
    @pytest.mark.asyncio
    async def test_keeps_only_given_date(self, repository):
        await repository.save("CSE", make_notice("a", date="2025.03.09"))
        await repository.save("CSE", make_notice("b", date="2025.03.10"))
        await repository.save("MECH", make_notice("c", date="2025.03.08"))

        deleted = await repository.delete_excluding_date("2025.03.10")

        assert deleted == 2
        assert await repository.exists("b") is True
        assert await repository.exists("a") is False
        assert await repository.exists("c") is False

    @pytest.mark.asyncio
    async def test_empty_store(self, repository):
        assert await repository.delete_excluding_date("2025.03.10") == 0

    @pytest.mark.asyncio
    async def test_purged_id_can_be_saved_again(self, repository):
        await repository.save("CSE", make_notice("a", date="2025.03.09"))
        await repository.delete_excluding_date("2025.03.10")

        assert await repository.save("CSE", make_notice("a", date="2025.03.09")) is True


class TestExists:
    @pytest.mark.asyncio
    async def test_exists(self, repository):
        assert await repository.exists("cse-1") is False
        await repository.save("CSE", make_notice("cse-1"))
        assert await repository.exists("cse-1") is True
