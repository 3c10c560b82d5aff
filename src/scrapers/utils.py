import random
import re
from datetime import datetime
from typing import Any, Dict, Optional
from urllib.parse import parse_qs, urlparse
from zoneinfo import ZoneInfo

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from src.config import get_settings
from src.exceptions import FetchError

settings = get_settings()

USER_AGENTS = [
    (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Safari/605.1.15"
    ),
]

_SHORT_DATE = re.compile(r"^(\d{2})\.(\d{2})\.(\d{2})$")
_ISO_DATE_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")


def get_random_headers() -> dict:
    return {
        "User-Agent": random.choice(USER_AGENTS),
        "Accept": "text/html,application/xhtml+xml,application/json;q=0.9,*/*;q=0.8",
        "Accept-Language": "ko-KR,ko;q=0.9,en-US;q=0.8,en;q=0.7",
    }


async def fetch_response(
    url: str, params: Optional[Dict[str, Any]] = None, category: Optional[str] = None
) -> httpx.Response:
    """GET a source page. Any transport or status failure surfaces as FetchError."""
    try:
        async with httpx.AsyncClient(
            timeout=settings.crawler_timeout,
            headers=get_random_headers(),
            follow_redirects=True,
        ) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FetchError(
            f"Source responded {e.response.status_code} for {url}", category=category
        ) from e
    except httpx.RequestError as e:
        raise FetchError(f"Request to {url} failed: {e}", category=category) from e

    return response


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def clean_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def make_board_notice_id(post_url: str) -> Optional[str]:
    """K2Web 게시물 URL에서 고유 id를 만든다.

    /bbs/<provider>/<boardNo>/<postId>/artclView.do -> "<provider>-<postId>"
    """
    if not post_url:
        return None

    segments = post_url.split("/")
    if len(segments) <= 4:
        return None

    provider = segments[2]
    post_id = segments[4]
    if not provider or not post_id:
        return None
    return f"{provider}-{post_id}"


def make_query_notice_id(post_url: str, provider: str, param: str = "idx") -> Optional[str]:
    """쿼리 파라미터(idx 등)로 게시물을 구분하는 게시판의 고유 id를 만든다."""
    if not post_url:
        return None

    segments = post_url.split("/")
    if len(segments) < 3:
        return None

    query = parse_qs(urlparse(segments[2]).query)
    post_id = query.get(param, [None])[0]
    if not post_id:
        return None
    return f"{provider}-{post_id}"


def normalize_dotted_date(raw: str) -> str:
    """'2025.03.10.' / '25.03.10' -> '2025.03.10'"""
    raw = raw.strip().rstrip(".")
    match = _SHORT_DATE.match(raw)
    if not match:
        return raw

    # 50 이상이면 1900년대
    century = "19" if int(match.group(1)) >= 50 else "20"
    return f"{century}{match.group(1)}.{match.group(2)}.{match.group(3)}"


def normalize_timestamp(raw: str, tz_name: str) -> Optional[str]:
    """ISO-8601 timestamp -> 'YYYY.MM.DD' in the given timezone."""
    raw = raw.strip()
    if not raw:
        return None

    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        match = _ISO_DATE_PREFIX.match(raw)
        if not match:
            logger.warning(f"Unparseable timestamp: {raw}")
            return None
        return f"{match.group(1)}.{match.group(2)}.{match.group(3)}"

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(ZoneInfo(tz_name))
    return parsed.strftime("%Y.%m.%d")
