from __future__ import annotations

from typing import Any, Dict, List

from loguru import logger

from src.config import get_settings
from src.exceptions import FetchError
from src.scrapers.base import BaseScraper, NotificationPayload
from src.scrapers.utils import fetch_response, normalize_timestamp

PAGE_SIZE = 10


class LibraryStyleScraper(BaseScraper):
    """정석학술정보관 스타일(JSON 게시판 API) 공지"""

    family = "library_style"

    async def fetch_notices(
        self, category: str, page: int
    ) -> Dict[str, List[NotificationPayload]]:
        urls = self._urls_for(category)
        if urls is None:
            return {"general": []}

        params = {
            "onlyNoticableBulletin": "false",
            "nameOption": "",
            "onlyWriter": "false",
            "max": str(PAGE_SIZE),
            "offset": str(page - 1),
        }
        response = await fetch_response(urls.base_url, params=params, category=category)
        try:
            body = response.json()
        except ValueError as e:
            raise FetchError(f"Malformed JSON from {urls.base_url}", category=category) from e

        return {"general": self.parse_general_notices(body, urls.query_url, category)}

    def parse_general_notices(
        self, body: Dict[str, Any], query_url: str, category: str
    ) -> List[NotificationPayload]:
        tz_name = get_settings().timezone
        results: List[NotificationPayload] = []

        posts = ((body or {}).get("data") or {}).get("list") or []
        for post in posts:
            post_id = post.get("id")
            date = normalize_timestamp(str(post.get("lastUpdated") or ""), tz_name)
            if post_id is None or date is None:
                logger.warning(f"[{self.family}] Skipping malformed post in {category}: {post}")
                continue

            results.append(
                NotificationPayload(
                    # 게시물 번호는 카테고리 안에서만 고유하므로 카테고리를 접두사로 사용
                    id=f"{category}-{post_id}",
                    title=str(post.get("title", "")).strip(),
                    link=f"{query_url}/{post_id}",
                    date=date,
                )
            )

        return results
