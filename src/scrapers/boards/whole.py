from src.scrapers.boards.k2web import K2WebBoardScraper


class WholeScraper(K2WebBoardScraper):
    """학사 공지(전체공지, 장학, 모집/채용)"""

    family = "whole"
