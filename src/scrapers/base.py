from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger

from src.config import SourceUrls
from src.exceptions import FetchError


@dataclass
class NotificationPayload:
    id: str  # "<provider>-<postId>", unique across every category
    title: str
    link: str
    date: str  # YYYY.MM.DD
    writer: Optional[str] = None
    access: Optional[str] = None


class BaseScraper(ABC):
    """Source adapter for one family of notice boards.

    Each category (department, board, ...) has a list URL and a query URL
    configured in ``Settings``.
    """

    family: str = ""

    def __init__(self, sources: Dict[str, SourceUrls], family: Optional[str] = None):
        self.sources = sources
        if family:
            self.family = family

    def get_all_categories(self) -> List[str]:
        return list(self.sources.keys())

    async def fetch_all_notices(self) -> Dict[str, List[NotificationPayload]]:
        """첫 페이지 공지를 카테고리별로 수집한다. 실패한 카테고리는 결과에서 빠진다."""
        results: Dict[str, List[NotificationPayload]] = {}

        for category in self.get_all_categories():
            try:
                notices = await self.fetch_notices(category, 1)
                results[category] = notices["general"]
            except FetchError as e:
                logger.error(f"[{self.family}] Failed to fetch {category}: {e}")

        return results

    @abstractmethod
    async def fetch_notices(
        self, category: str, page: int
    ) -> Dict[str, List[NotificationPayload]]:
        """지정한 카테고리의 page 번째 일반 공지 목록을 {"general": [...]} 형태로 반환"""
        ...

    def _urls_for(self, category: str) -> Optional[SourceUrls]:
        urls = self.sources.get(category)
        if urls is None or not urls.base_url or not urls.query_url:
            logger.error(f"[{self.family}] No source URLs configured for {category}")
            return None
        return urls
