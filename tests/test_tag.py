import pytest

from datetag.style import DateStyle
from datetag.tag import DateTag

CASES = [
    (DateStyle.PLAIN, "%Y", "%Y%m", "%G%V", "%Y%m%d"),
    (DateStyle.DOT, "%Y", "%Y.%m", "%G.%V", "%Y.%m.%d"),
    (DateStyle.SLASH, "%Y", "%Y/%m", "%G/%V", "%Y/%m/%d"),
    (DateStyle.COLON, "%Y", "%Y:%m", "%G:%V", "%Y:%m:%d"),
    (DateStyle.DASH, "%Y", "%Y-%m", "%G-%V", "%Y-%m-%d"),
]


@pytest.mark.parametrize("style, year, month, week, day", CASES)
def test_get_format_year(style, year, month, week, day):
    assert DateTag.YEARLY.get_format(style) == year
    assert DateTag.Y.get_format(style) == year


@pytest.mark.parametrize("style, year, month, week, day", CASES)
def test_get_format_month(style, year, month, week, day):
    assert DateTag.MONTHLY.get_format(style) == month
    assert DateTag.M.get_format(style) == month


@pytest.mark.parametrize("style, year, month, week, day", CASES)
def test_get_format_week(style, year, month, week, day):
    assert DateTag.WEEKLY.get_format(style) == week
    assert DateTag.W.get_format(style) == week


@pytest.mark.parametrize("style, year, month, week, day", CASES)
def test_get_format_day(style, year, month, week, day):
    assert DateTag.DAILY.get_format(style) == day
    assert DateTag.D.get_format(style) == day


def test_get_format_accepts_style_value():
    assert DateTag.DAILY.get_format("dash") == "%Y-%m-%d"


def test_lookup_by_value():
    assert DateTag("d") is DateTag.D
    assert DateTag("monthly") is DateTag.MONTHLY


def test_unknown_tag_raises():
    with pytest.raises(ValueError):
        DateTag("hourly")