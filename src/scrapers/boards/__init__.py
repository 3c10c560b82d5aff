from src.scrapers.boards.inha_design import InhaDesignStyleScraper
from src.scrapers.boards.library import LibraryStyleScraper
from src.scrapers.boards.major import MajorScraper
from src.scrapers.boards.oceanography import OceanographyStyleScraper
from src.scrapers.boards.whole import WholeScraper

__all__ = [
    "InhaDesignStyleScraper",
    "LibraryStyleScraper",
    "MajorScraper",
    "OceanographyStyleScraper",
    "WholeScraper",
]
