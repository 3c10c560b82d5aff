from __future__ import annotations

from functools import lru_cache

from loguru import logger

from src.config import get_settings
from src.db.database import async_session_factory
from src.db.notice_repository import NoticeRepository
from src.db.risk_window_repository import RiskWindowRepository
from src.notifications.fcm import FcmSender
from src.scheduler.families import FAMILIES
from src.scheduler.notice_scheduler import CrawlResult, NoticeScheduler


@lru_cache
def get_notice_scheduler(family: str) -> NoticeScheduler:
    """공지 계열별 스케줄러. 모든 계열이 같은 공지 저장소를 쓴다."""
    settings = get_settings()
    notice_family = FAMILIES[family]
    return NoticeScheduler(
        name=notice_family.name,
        scraper=notice_family.scraper_cls(
            notice_family.sources(settings), family=notice_family.name
        ),
        title_strategy=notice_family.title_strategy,
        sender=FcmSender(),
        notice_repository=NoticeRepository(async_session_factory),
        risk_window_repository=RiskWindowRepository(async_session_factory),
        timezone=settings.timezone,
    )


async def run_notice_crawl(family: str, task_name: str) -> CrawlResult:
    """정기 크롤링 작업"""
    return await get_notice_scheduler(family).execute_crawling(f"[{family}] {task_name}")


async def run_notice_purge(family: str) -> int:
    """오늘이 아닌 공지 삭제 작업"""
    deleted = await get_notice_scheduler(family).delete_old_notices(f"[{family}] 오래된 공지 삭제")
    logger.debug(f"[{family}] purge job done")
    return deleted
