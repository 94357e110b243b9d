"""pt-BR calendar abbreviations used in chart labels.

Kept as fixed tables so labels do not depend on the host locale.
"""

from __future__ import annotations

from datetime import date

# date.weekday(): Monday == 0
WEEKDAY_ABBREVIATIONS = ("seg", "ter", "qua", "qui", "sex", "sáb", "dom")

MONTH_ABBREVIATIONS = (
    "jan", "fev", "mar", "abr", "mai", "jun",
    "jul", "ago", "set", "out", "nov", "dez",
)


def weekday_abbrev(day: date) -> str:
    return WEEKDAY_ABBREVIATIONS[day.weekday()]


def month_abbrev(day: date) -> str:
    return MONTH_ABBREVIATIONS[day.month - 1]


def day_label(day: date) -> str:
    """``"qua 10"``"""
    return f"{weekday_abbrev(day)} {day.day:02d}"


def week_label(start: date, end: date) -> str:
    start_month = month_abbrev(start)
    end_month = month_abbrev(end)
    if start_month == end_month:
        return f"{start.day}-{end.day} {end_month}"
    return f"{start.day} {start_month} - {end.day} {end_month}"


def month_label(year: int, month: int) -> str:
    """``"jan/24"``"""
    return f"{MONTH_ABBREVIATIONS[month - 1]}/{year % 100:02d}"
