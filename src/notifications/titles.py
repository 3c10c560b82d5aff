from __future__ import annotations

from typing import Dict

from src.notifications.mappings import (
    INHA_DESIGN_STYLE_TITLES,
    LIBRARY_STYLE_TITLES,
    MAJOR_STYLE_TITLES,
    MAJOR_TITLES,
    OCEANOGRAPHY_STYLE_TITLES,
    UNDERGRADUATE_TITLES,
    WHOLE_TITLES,
)

DEFAULT_TITLE = "새로운 공지사항이 있어요!"


class TitleStrategy:
    """Maps a category key to the human-readable notification title.

    Pure lookup over a static table. Unknown keys get the fallback title.
    """

    def __init__(self, titles: Dict[str, str], fallback: str = DEFAULT_TITLE):
        self.titles = dict(titles)
        self.fallback = fallback

    def get_title(self, category: str) -> str:
        return self.titles.get(category, self.fallback)


WHOLE = TitleStrategy(WHOLE_TITLES)
MAJOR = TitleStrategy(MAJOR_TITLES)
MAJOR_STYLE = TitleStrategy(MAJOR_STYLE_TITLES)
OCEANOGRAPHY_STYLE = TitleStrategy(OCEANOGRAPHY_STYLE_TITLES)
LIBRARY_STYLE = TitleStrategy(LIBRARY_STYLE_TITLES)
INHA_DESIGN_STYLE = TitleStrategy(INHA_DESIGN_STYLE_TITLES)
UNDERGRADUATE = TitleStrategy(UNDERGRADUATE_TITLES)

# 관리자 수동 발송은 학과 토픽 기준, 모르는 토픽은 "학과"
MAJOR_BROADCAST = TitleStrategy(MAJOR_TITLES, fallback="학과")
