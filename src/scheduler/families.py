"""Notice families and their crawl cadences.

Cron expressions are evaluated in ``Settings.timezone`` (Asia/Seoul).
Day-of-week is written by name since APScheduler counts 0 as Monday.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Type

from src.config import Settings, SourceUrls
from src.notifications import titles
from src.notifications.titles import TitleStrategy
from src.scrapers.base import BaseScraper
from src.scrapers.boards import (
    InhaDesignStyleScraper,
    LibraryStyleScraper,
    MajorScraper,
    OceanographyStyleScraper,
    WholeScraper,
)

WEEKDAYS_WORKING_HOURS = "*/10 9-16 * * mon-fri"
WEEKDAYS_EVENING = "*/30 17-23 * * mon-fri"
WEEKEND = "*/30 9-23 * * sat,sun"


@dataclass(frozen=True)
class CrawlSchedule:
    job_id: str
    task_name: str
    crontab: str


@dataclass(frozen=True)
class NoticeFamily:
    name: str
    settings_field: str
    scraper_cls: Type[BaseScraper]
    title_strategy: TitleStrategy
    crawls: List[CrawlSchedule] = field(default_factory=list)
    purge: str = "0 17 * * mon-fri"

    def sources(self, settings: Settings) -> Dict[str, SourceUrls]:
        return getattr(settings, self.settings_field)


def _weekday_crawl(family: str, task_name: str) -> List[CrawlSchedule]:
    return [CrawlSchedule(f"{family}_crawl_weekdays", task_name, WEEKDAYS_WORKING_HOURS)]


FAMILIES: Dict[str, NoticeFamily] = {
    "whole": NoticeFamily(
        name="whole",
        settings_field="wholes",
        scraper_cls=WholeScraper,
        title_strategy=titles.WHOLE,
        crawls=[
            CrawlSchedule("whole_crawl_weekdays", "학사 정기 크롤링 (평일 9~17시)", WEEKDAYS_WORKING_HOURS),
            CrawlSchedule("whole_crawl_evening", "학사 정기 크롤링 (평일 17~24시)", WEEKDAYS_EVENING),
            CrawlSchedule("whole_crawl_weekend", "학사 정기 크롤링 (주말)", WEEKEND),
        ],
        purge="0 0 * * mon-fri",
    ),
    "major": NoticeFamily(
        name="major",
        settings_field="majors",
        scraper_cls=MajorScraper,
        title_strategy=titles.MAJOR,
        crawls=_weekday_crawl("major", "학과 정기 크롤링"),
    ),
    "major_style": NoticeFamily(
        name="major_style",
        settings_field="major_styles",
        scraper_cls=MajorScraper,
        title_strategy=titles.MAJOR_STYLE,
        crawls=_weekday_crawl("major_style", "학과 스타일 정기 크롤링"),
    ),
    "oceanography_style": NoticeFamily(
        name="oceanography_style",
        settings_field="oceanography_styles",
        scraper_cls=OceanographyStyleScraper,
        title_strategy=titles.OCEANOGRAPHY_STYLE,
        crawls=_weekday_crawl("oceanography_style", "해양과학과 스타일 정기 크롤링"),
    ),
    "library_style": NoticeFamily(
        name="library_style",
        settings_field="library_styles",
        scraper_cls=LibraryStyleScraper,
        title_strategy=titles.LIBRARY_STYLE,
        crawls=_weekday_crawl("library_style", "정석학술정보관 스타일 정기 크롤링"),
    ),
    "inha_design_style": NoticeFamily(
        name="inha_design_style",
        settings_field="inha_design_styles",
        scraper_cls=InhaDesignStyleScraper,
        title_strategy=titles.INHA_DESIGN_STYLE,
        crawls=_weekday_crawl("inha_design_style", "디자인융합학과 스타일 정기 크롤링"),
    ),
}
