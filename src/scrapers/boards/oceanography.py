from __future__ import annotations

from typing import Dict, List, Optional

from bs4 import BeautifulSoup, Tag
from loguru import logger

from src.scrapers.base import BaseScraper, NotificationPayload
from src.scrapers.utils import (
    clean_text,
    fetch_response,
    make_query_notice_id,
    normalize_dotted_date,
    parse_html,
)

NOTICE_BOARD_SELECTOR = ".pic1"
HEADLINE_MARK = "[공지]"
PROVIDER = "oceanography"


class OceanographyStyleScraper(BaseScraper):
    """해양과학과 스타일(EUC-KR 테이블 게시판) 공지"""

    family = "oceanography_style"

    async def fetch_notices(
        self, category: str, page: int
    ) -> Dict[str, List[NotificationPayload]]:
        urls = self._urls_for(category)
        if urls is None:
            return {"general": []}

        response = await fetch_response(f"{urls.query_url}{page}", category=category)
        soup = parse_html(response.content.decode("euc-kr", errors="replace"))
        return {"general": self.parse_general_notices(soup, urls.base_url)}

    def parse_general_notices(
        self, soup: BeautifulSoup, base_url: str
    ) -> List[NotificationPayload]:
        results: List[NotificationPayload] = []

        board = soup.select_one(NOTICE_BOARD_SELECTOR)
        if board is None:
            return results

        tables = board.find_all("table")
        if len(tables) < 2:
            return results

        # td가 정확히 6개인 행만 게시물이며 첫 행은 목차
        rows = [tr for tr in tables[1].find_all("tr") if len(tr.find_all("td")) == 6]
        for row in rows[1:]:
            notice = self._parse_row(row, base_url)
            if notice is not None:
                results.append(notice)

        return results

    def _parse_row(self, row: Tag, base_url: str) -> Optional[NotificationPayload]:
        cells = row.find_all("td")
        if clean_text(cells[1].get_text()) == HEADLINE_MARK:
            return None

        link_tag = row.find("a")
        post_url = link_tag.get("href", "") if link_tag else ""
        notice_id = make_query_notice_id(post_url, PROVIDER)
        if notice_id is None:
            logger.warning(f"[{self.family}] Cannot build notice id from {post_url!r}")
            return None

        return NotificationPayload(
            id=notice_id,
            title=clean_text(cells[2].get_text()),
            link=base_url + post_url,
            date=normalize_dotted_date(cells[4].get_text()),
            writer=clean_text(cells[3].get_text()),
            access=clean_text(cells[5].get_text()),
        )
