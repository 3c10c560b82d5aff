from src.scrapers.boards.k2web import K2WebBoardScraper


class MajorScraper(K2WebBoardScraper):
    """학과 및 학과 스타일(국제처, SW중심대학사업단, 단과대, 대학원) 공지"""

    family = "major"
    TITLE_LINK_SELECTOR = "._artclTdTitle a.artclLinkView"
    TITLE_TEXT_SELECTOR = "._artclTdTitle a.artclLinkView strong"
