"""Date tag granularities and their strftime formats."""

from __future__ import annotations

from enum import Enum

from datetag.style import DateStyle

_SEPARATORS = {
    DateStyle.PLAIN: "",
    DateStyle.DOT: ".",
    DateStyle.SLASH: "/",
    DateStyle.COLON: ":",
    DateStyle.DASH: "-",
}


class DateTag(str, Enum):
    """The granularity of a date tag."""

    Y = "y"
    YEARLY = "yearly"
    """yearly tags (e.g. 2022)"""
    W = "w"
    WEEKLY = "weekly"
    """weekly ISO 8601 tags (e.g. 202234)"""
    M = "m"
    MONTHLY = "monthly"
    """monthly tags (e.g. 202212)"""
    D = "d"
    DAILY = "daily"
    """daily tags (e.g. 20221230)"""

    def __str__(self) -> str:
        return self.value

    @property
    def _fields(self) -> tuple[str, ...]:
        if self in (DateTag.Y, DateTag.YEARLY):
            return ("%Y",)
        if self in (DateTag.W, DateTag.WEEKLY):
            return ("%G", "%V")
        if self in (DateTag.M, DateTag.MONTHLY):
            return ("%Y", "%m")
        return ("%Y", "%m", "%d")

    def get_format(self, style: DateStyle) -> str:
        """Return the strftime format for this tag rendered in ``style``."""
        return _SEPARATORS[DateStyle(style)].join(self._fields)