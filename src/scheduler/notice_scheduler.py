from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo

from loguru import logger

from src.db.notice_repository import NoticeRepository
from src.db.risk_window_repository import RiskWindowRecord, RiskWindowRepository
from src.exceptions import StorageError
from src.notifications.fcm import FcmSender
from src.notifications.formatter import build_payload
from src.notifications.titles import TitleStrategy
from src.scrapers.base import BaseScraper, NotificationPayload

DEFAULT_DATE_FORMAT = "%Y.%m.%d"


@dataclass
class CrawlResult:
    fetched: int = 0
    today: int = 0
    new: int = 0
    notified: int = 0
    failed: int = 0

    def __str__(self) -> str:
        return (
            f"fetched={self.fetched} today={self.today} new={self.new} "
            f"notified={self.notified} failed={self.failed}"
        )


class NoticeScheduler:
    """Fetch -> today filter -> insert-if-absent -> push, for one notice family.

    The notice store decides what is new: only a notice whose ``save``
    created a row is pushed, so overlapping runs never notify twice.
    Delivery is at-most-once. A failed push is logged and the notice stays
    stored.
    """

    def __init__(
        self,
        name: str,
        scraper: BaseScraper,
        title_strategy: TitleStrategy,
        sender: FcmSender,
        notice_repository: NoticeRepository,
        risk_window_repository: RiskWindowRepository,
        timezone: str = "Asia/Seoul",
        date_format: str = DEFAULT_DATE_FORMAT,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.name = name
        self.scraper = scraper
        self.title_strategy = title_strategy
        self.sender = sender
        self.notice_repository = notice_repository
        self.risk_window_repository = risk_window_repository
        self.tz = ZoneInfo(timezone)
        self.date_format = date_format
        self.clock = clock or (lambda: datetime.now(self.tz))

    def now(self) -> datetime:
        return self.clock().astimezone(self.tz)

    def get_today_date(self) -> str:
        return self.now().strftime(self.date_format)

    def filter_today(self, notices: List[NotificationPayload]) -> List[NotificationPayload]:
        today = self.get_today_date()
        return [notice for notice in notices if notice.date == today]

    async def execute_crawling(self, log_prefix: str) -> CrawlResult:
        """크롤링 1회 실행. 어떤 예외도 호출자에게 전파하지 않는다."""
        result = CrawlResult()
        logger.info(f"{log_prefix} crawling started")

        try:
            all_notices = await self.scraper.fetch_all_notices()

            for category, notices in all_notices.items():
                result.fetched += len(notices)
                today_notices = self.filter_today(notices)
                result.today += len(today_notices)

                for notice in today_notices:
                    await self._process_notice(log_prefix, category, notice, result)
        except Exception as e:
            logger.error(f"{log_prefix} crawling failed: {e}")
        finally:
            logger.info(f"{log_prefix} crawling finished ({result})")

        return result

    async def delete_old_notices(self, log_prefix: str) -> int:
        """오늘 날짜가 아닌 공지를 모두 삭제한다."""
        today = self.get_today_date()
        try:
            deleted = await self.notice_repository.delete_excluding_date(today)
        except Exception as e:
            logger.error(f"{log_prefix} failed to delete old notices: {e}")
            return 0

        if deleted:
            logger.info(f"{log_prefix} deleted {deleted} notices not dated {today}")
        return deleted

    async def _process_notice(
        self,
        log_prefix: str,
        category: str,
        notice: NotificationPayload,
        result: CrawlResult,
    ) -> None:
        try:
            inserted = await self.notice_repository.save(category, notice)
        except StorageError as e:
            result.failed += 1
            logger.error(f"{log_prefix}-{category} failed to save {notice.id}: {e}")
            return

        if not inserted:
            return

        result.new += 1
        persisted_at = self.now()
        started = time.perf_counter()

        message = build_payload(self.title_strategy, notice, category)
        try:
            await self.sender.send_to_topic(
                category, message.title, message.body, message.data
            )
        except Exception as e:
            # 알림 실패는 재시도하지 않고 공지는 저장된 상태로 둔다
            result.failed += 1
            logger.error(f"{log_prefix}-{category} failed to notify {notice.id}: {e}")
            return

        elapsed_micros = int((time.perf_counter() - started) * 1_000_000)
        result.notified += 1
        logger.info(f"{log_prefix}-{category} new notice: {notice.title} ({notice.id})")

        await self._record_risk_window(
            log_prefix,
            RiskWindowRecord(
                category=category,
                item_id=notice.id,
                persisted_at=persisted_at.isoformat(),
                notified_at=self.now().isoformat(),
                elapsed_micros=elapsed_micros,
            ),
        )

    async def _record_risk_window(self, log_prefix: str, record: RiskWindowRecord) -> None:
        try:
            await self.risk_window_repository.save(record)
        except Exception as e:
            logger.warning(
                f"{log_prefix}-{record.category} failed to record risk window "
                f"for {record.item_id}: {e}"
            )
