from __future__ import annotations

from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from src.scrapers.base import BaseScraper, NotificationPayload
from src.scrapers.utils import (
    clean_text,
    fetch_response,
    make_board_notice_id,
    normalize_dotted_date,
    parse_html,
)


class K2WebBoardScraper(BaseScraper):
    """K2Web CMS 게시판(학사, 학과) 공통 크롤러.

    목록 페이지는 ``query_url + page``, 게시물 링크는 ``base_url + href`` 로 만든다.
    """

    ROW_SELECTOR = ".artclTable tr:not(.headline)"
    TITLE_LINK_SELECTOR = "._artclTdTitle .artclLinkView"
    TITLE_TEXT_SELECTOR: Optional[str] = None
    DATE_SELECTOR = "._artclTdRdate"
    WRITER_SELECTOR = "._artclTdWriter"
    ACCESS_SELECTOR = "._artclTdAccess"

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

        for row in soup.select(self.ROW_SELECTOR):
            notice = self._parse_row(row, base_url)
            if notice is not None:
                results.append(notice)

        return results

    def _parse_row(self, row: Tag, base_url: str) -> Optional[NotificationPayload]:
        link_tag = row.select_one(self.TITLE_LINK_SELECTOR)
        title_tag = (
            row.select_one(self.TITLE_TEXT_SELECTOR) if self.TITLE_TEXT_SELECTOR else link_tag
        )
        date_tag = row.select_one(self.DATE_SELECTOR)
        writer_tag = row.select_one(self.WRITER_SELECTOR)
        access_tag = row.select_one(self.ACCESS_SELECTOR)

        # 제목, 날짜, 작성자, 조회수 중 하나라도 없으면 공지 행이 아님
        if not all([link_tag, title_tag, date_tag, writer_tag, access_tag]):
            return None

        post_url = link_tag.get("href", "")
        notice_id = make_board_notice_id(post_url)
        if notice_id is None:
            logger.warning(f"[{self.family}] Cannot build notice id from {post_url!r}")
            return None

        for badge in title_tag.select("span.newArtcl"):
            badge.decompose()

        return NotificationPayload(
            id=notice_id,
            title=clean_text(title_tag.get_text()),
            link=base_url + post_url,
            date=normalize_dotted_date(date_tag.get_text()),
            writer=clean_text(writer_tag.get_text()),
            access=clean_text(access_tag.get_text()),
        )
