from src.notifications import titles
from src.notifications.mappings import MAJOR_STYLE_TITLES, MAJOR_TITLES
from src.notifications.titles import DEFAULT_TITLE, TitleStrategy


class TestTitleStrategy:
    def test_known_key(self):
        strategy = TitleStrategy({"CSE": "컴퓨터공학과"})
        assert strategy.get_title("CSE") == "컴퓨터공학과"

    def test_unknown_key_falls_back(self):
        strategy = TitleStrategy({"CSE": "컴퓨터공학과"})
        assert strategy.get_title("NOPE") == "새로운 공지사항이 있어요!"
        assert strategy.get_title("") == DEFAULT_TITLE

    def test_custom_fallback(self):
        strategy = TitleStrategy({}, fallback="학과")
        assert strategy.get_title("CSE") == "학과"

    def test_table_is_copied(self):
        table = {"CSE": "컴퓨터공학과"}
        strategy = TitleStrategy(table)
        table["CSE"] = "changed"
        assert strategy.get_title("CSE") == "컴퓨터공학과"


class TestShippedStrategies:
    def test_whole(self):
        assert titles.WHOLE.get_title("all-notices") == "학사"
        assert titles.WHOLE.get_title("SCHOLARSHIP") == "장학"
        assert titles.WHOLE.get_title("RECRUITMENT") == "모집/채용"

    def test_major(self):
        assert titles.MAJOR.get_title("CSE") == "컴퓨터공학과"
        assert titles.MAJOR.get_title("MECH") == "기계공학과"
        assert len(MAJOR_TITLES) > 70

    def test_major_style_includes_colleges_and_graduate_schools(self):
        assert titles.MAJOR_STYLE.get_title("INTERNATIONAL") == "국제처"
        assert titles.MAJOR_STYLE.get_title("SWCC") == "소프트웨어융합대학"
        assert titles.MAJOR_STYLE.get_title("IMIS") == "제조혁신전문대학원"
        assert "CSE" not in MAJOR_STYLE_TITLES

    def test_oceanography_and_library(self):
        assert titles.OCEANOGRAPHY_STYLE.get_title("OCEANOGRAPHY") == "해양과학과"
        assert titles.LIBRARY_STYLE.get_title("LIBRARY") == "정석학술정보관"
        assert titles.INHA_DESIGN_STYLE.get_title("INHADESIGN") == "디자인융합학과"

    def test_undergraduate_calendar(self):
        assert (
            titles.UNDERGRADUATE.get_title("undergraduate-schedule-d1-notification")
            == "내일 일정이 있어요!"
        )
        assert (
            titles.UNDERGRADUATE.get_title("undergraduate-schedule-dd-notification")
            == "오늘 일정이 있어요!"
        )
