"""Separator styles used when rendering a date reference."""

from __future__ import annotations

from enum import Enum


class DateStyle(str, Enum):
    """How the fields of a date reference are separated."""

    PLAIN = "plain"
    """yyyymmdd"""
    DOT = "dot"
    """yyyy.mm.dd"""
    SLASH = "slash"
    """yyyy/mm/dd"""
    COLON = "colon"
    """yyyy:mm:dd"""
    DASH = "dash"
    """yyyy-mm-dd"""

    def __str__(self) -> str:
        return self.value