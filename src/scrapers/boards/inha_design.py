from __future__ import annotations

from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from src.scrapers.base import BaseScraper, NotificationPayload
from src.scrapers.utils import clean_text, fetch_response, parse_html

NOTICE_BOARD_SELECTOR = "#wsite-content"
POST_SELECTOR = ".blog-post"
TITLE_SELECTOR = ".blog-title"
TITLE_LINK_SELECTOR = "a.blog-title-link"
DATE_SELECTOR = ".date-text"
PROVIDER = "inhadesign"
POST_ID_PREFIX = "blog-post-"


def parse_slash_date(raw: str) -> Optional[str]:
    """'3/2/2025' -> '2025.03.02'"""
    parts = raw.strip().split("/")
    if len(parts) != 3 or not all(part.isdigit() for part in parts):
        return None
    month, day, year = parts
    return f"{year}.{month.zfill(2)}.{day.zfill(2)}"


def absolute_link(href: str, base_url: str) -> str:
    if href.startswith("//"):
        return f"http:{href}"
    if href.startswith("http"):
        return href
    return base_url + href


class InhaDesignStyleScraper(BaseScraper):
    """디자인융합학과 스타일(Weebly 블로그) 공지"""

    family = "inha_design_style"

    async def fetch_notices(
        self, category: str, page: int
    ) -> Dict[str, List[NotificationPayload]]:
        urls = self._urls_for(category)
        if urls is None:
            return {"general": []}

        response = await fetch_response(f"{urls.query_url}{page}", category=category)
        soup = parse_html(response.content.decode("utf-8", errors="replace"))
        return {"general": self.parse_general_notices(soup, urls.base_url)}

    def parse_general_notices(
        self, soup: BeautifulSoup, base_url: str
    ) -> List[NotificationPayload]:
        results: List[NotificationPayload] = []

        board = soup.select_one(NOTICE_BOARD_SELECTOR)
        if board is None:
            return results

        for post in board.select(POST_SELECTOR):
            notice = self._parse_post(post, base_url)
            if notice is not None:
                results.append(notice)

        return results

    def _parse_post(self, post: Tag, base_url: str) -> Optional[NotificationPayload]:
        title_tag = post.select_one(TITLE_SELECTOR)
        link_tag = post.select_one(TITLE_LINK_SELECTOR)
        date_tag = post.select_one(DATE_SELECTOR)
        if not all([title_tag, link_tag, date_tag]):
            return None

        post_id = (post.get("id") or "").removeprefix(POST_ID_PREFIX)
        if not post_id:
            logger.warning(
                f"[{self.family}] Blog post without id: {clean_text(title_tag.get_text())}"
            )
            return None

        date = parse_slash_date(date_tag.get_text())
        if date is None:
            logger.warning(
                f"[{self.family}] Unparseable date {date_tag.get_text()!r} on {post_id}"
            )
            return None

        # 작성자, 조회수는 블로그에 표시되지 않는다
        return NotificationPayload(
            id=f"{PROVIDER}-{post_id}",
            title=clean_text(title_tag.get_text()),
            link=absolute_link(link_tag.get("href", ""), base_url),
            date=date,
        )
