"""Parsing of reference dates and applying tag offsets."""

from __future__ import annotations

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date, timedelta

from datetag.tag import DateTag

_NON_DIGIT = re.compile(r"[^0-9]")


def try_date_from_str(s: str) -> date:
    """Parse a reference date, raising ``ValueError`` if it is not valid."""
    parsed = checked_date_from_str(s)
    if parsed is None:
        raise ValueError("conversion error")
    return parsed


def checked_date_from_str(s: str) -> date | None:
    """Parse ``yyyy``, ``yyyymm`` or ``yyyymmdd`` with any separators, or return None."""
    digits = _NON_DIGIT.sub("", s)

    if len(digits) == 4:
        digits += "01"
    if len(digits) == 6:
        digits += "01"

    # Fields are read greedily: up to 4 digits of year, then up to 2 of month and day.
    year, month, day = digits[:4], digits[4:6], digits[6:8]
    if not (year and month and day) or len(digits) > 8:
        return None
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def _add_months(value: date, months: int) -> date | None:
    total = value.year * 12 + (value.month - 1) + months
    year, month_index = divmod(total, 12)
    if not MINYEAR <= year <= MAXYEAR:
        return None
    month = month_index + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _add_days(value: date, days: int) -> date | None:
    try:
        return value + timedelta(days=days)
    except OverflowError:
        return None


def checked_add_offset(date: date, offset: int, tag_type: DateTag) -> date | None:
    """Shift ``date`` by ``offset`` units of ``tag_type``; None if out of range."""
    tag_type = DateTag(tag_type)
    if tag_type in (DateTag.Y, DateTag.YEARLY):
        return _add_months(date, offset * 12)
    if tag_type in (DateTag.W, DateTag.WEEKLY):
        return _add_days(date, 7 * offset)
    if tag_type in (DateTag.M, DateTag.MONTHLY):
        return _add_months(date, offset)
    return _add_days(date, offset)