"""
Purpose: Time-of-day greeting and date/clock text for the page header.
Pure functions of a datetime; they read nothing from the session.
"""

from __future__ import annotations
from datetime import datetime

from ..models import DateStyle


def greeting_for(hour: int) -> str:
    if 5 <= hour < 12:
        return "Good Morning!"
    if 12 <= hour < 17:
        return "Good Afternoon!"
    if 17 <= hour < 21:
        return "Good Evening!"
    return "Good Night!"


def format_date(now: datetime, style: DateStyle = DateStyle.LONG) -> str:
    """Monday, October 19, 2026 (long) or Mon, Oct 19, 2026 (short)."""
    if style == DateStyle.SHORT:
        return f"{now:%a, %b} {now.day}, {now.year}"
    return f"{now:%A, %B} {now.day}, {now.year}"


def format_clock(now: datetime, *, seconds: bool = True) -> str:
    return now.strftime("%I:%M:%S %p" if seconds else "%I:%M %p")


def format_turn_time(ts: datetime) -> str:
    return format_clock(ts, seconds=False)
